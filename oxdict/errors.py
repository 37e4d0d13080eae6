"""Exceptions raised by lookups.

The definitions core raises only MalformedResponseError. The remaining
classes come from the HTTP client; the CLI catches OxdictError and prints
its message and hint.
"""

DEVELOPER_PORTAL_URL = "https://developer.oxforddictionaries.com"


class OxdictError(Exception):
    """Base class for all lookup errors."""

    hint: str | None = None

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint

    @property
    def message(self) -> str:
        return str(self)


class MalformedResponseError(OxdictError):
    """Response body does not have the structure of an entries response."""


class ConfigurationError(OxdictError):
    """Credentials are missing or cannot be sent as header values."""

    hint = (
        "Check that you have correctly created the .env file.\n"
        f"Get your own key and id here: {DEVELOPER_PORTAL_URL}"
    )

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"ERROR: {detail}")


class TransportFailure(OxdictError):
    """The request could not be completed (connection refused, timeout, ...)."""


class ProviderError(OxdictError):
    """The provider answered with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        reason: str,
        expression: str,
        message: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.expression = expression
        super().__init__(message or f'ERROR {status_code} for "{expression}": {reason}')


class ExpressionNotFoundError(ProviderError):
    """404: the provider has no entry for the expression."""

    hint = "Please check your spelling"

    def __init__(self, status_code: int, reason: str, expression: str) -> None:
        super().__init__(
            status_code, reason, expression, message=f'ERROR {status_code}: "{expression}" {reason}'
        )


class CredentialsRejectedError(ProviderError):
    """400/403: the provider refused the app id or key."""

    hint = "Check the APP_KEY and APP_ID in your .env file."

    def __init__(self, status_code: int, reason: str, expression: str) -> None:
        super().__init__(
            status_code, reason, expression, message=f"ERROR {status_code}: {reason}"
        )


def classify_http_error(status_code: int, reason: str, expression: str) -> ProviderError:
    """Map a failed HTTP status to the matching ProviderError subclass."""
    if status_code == 404:
        return ExpressionNotFoundError(status_code, reason, expression)
    if status_code in (400, 403):
        return CredentialsRejectedError(status_code, reason, expression)
    return ProviderError(status_code, reason, expression)
