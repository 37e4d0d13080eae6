"""Oxford Dictionaries API client."""

import logging
from typing import Any

import httpx

from oxdict.config import build_entries_url, settings
from oxdict.errors import (
    ConfigurationError,
    MalformedResponseError,
    TransportFailure,
    classify_http_error,
)

logger = logging.getLogger(__name__)


class OxfordClient:
    """Fetch entries from the Oxford Dictionaries API."""

    def __init__(
        self,
        app_id: str | None = None,
        app_key: str | None = None,
        base_url: str | None = None,
        source_lang: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.app_id = app_id if app_id is not None else settings.app_id
        self.app_key = app_key if app_key is not None else settings.app_key
        self.base_url = base_url or settings.base_url
        self.source_lang = source_lang or settings.source_lang
        self.timeout = timeout if timeout is not None else settings.request_timeout

    @property
    def headers(self) -> dict[str, str]:
        return {"app_id": self.app_id, "app_key": self.app_key}

    def entries_url(self, expression: str) -> str:
        """Return the entries endpoint for an expression."""
        return build_entries_url(self.base_url, self.source_lang, expression)

    async def fetch_entries(self, expression: str) -> dict[str, Any]:
        """
        Fetch the definitions of an expression.

        Only the ``definitions`` field is requested. A single request is made;
        there are no retries.

        Returns:
            The decoded JSON body

        Raises:
            ConfigurationError: Credentials are missing or not valid header values
            ProviderError: The provider answered with a non-success status
            TransportFailure: The request could not be completed
            MalformedResponseError: The body is not a JSON object
        """
        if not self.app_id or not self.app_key:
            raise ConfigurationError("APP_ID and APP_KEY must both be set")

        url = self.entries_url(expression)
        logger.debug(f"GET {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    url,
                    params={"fields": "definitions"},
                    headers=self.headers,
                )
        except (httpx.LocalProtocolError, UnicodeEncodeError) as e:
            logger.warning(f"Invalid request headers for '{expression}': {e}")
            raise ConfigurationError(f"Invalid header value: {e}") from e
        except httpx.TransportError as e:
            logger.warning(f"Request for '{expression}' failed: {e}")
            raise TransportFailure(f"ERROR: could not reach {self.base_url}: {e}") from e

        if not response.is_success:
            logger.warning(
                f"Lookup of '{expression}' failed with {response.status_code} "
                f"{response.reason_phrase}"
            )
            raise classify_http_error(response.status_code, response.reason_phrase, expression)

        try:
            body = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Response for '{expression}' is not JSON") from e

        if not isinstance(body, dict):
            raise MalformedResponseError(
                f"Expected a JSON object for '{expression}', got {type(body).__name__}"
            )
        return body
