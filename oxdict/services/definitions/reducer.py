"""Reduce an Oxford entries response to definitions grouped by part of speech.

The response nests definitions five levels deep::

    results[].lexicalEntries[].entries[].senses[].definitions[]

and each lexical entry names its part of speech in ``lexicalCategory.text``.
All definitions for one part of speech are collected into a single list,
even when they come from different results or lexical entries.

The provider is known to return entries without ``senses`` and senses
without ``definitions`` (e.g. for "so"); those contribute nothing. Any other
missing or mistyped field means the response is not the shape we expect
and raises MalformedResponseError.
"""

import logging
from typing import Any

from oxdict.errors import MalformedResponseError
from oxdict.services.definitions.base import ApiResponse, DefinitionsByCategory, LexicalEntry

logger = logging.getLogger(__name__)


def _as_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MalformedResponseError(
            f"Expected an object at {where}, got {type(value).__name__}"
        )
    return value


def _required_list(container: dict[str, Any], key: str, where: str) -> list[Any]:
    """Return container[key], which must be present and a list."""
    if key not in container or container[key] is None:
        raise MalformedResponseError(f"Missing '{key}' at {where}")
    value = container[key]
    if not isinstance(value, list):
        raise MalformedResponseError(
            f"Expected a list for '{key}' at {where}, got {type(value).__name__}"
        )
    return value


def _optional_list(container: dict[str, Any], key: str, where: str) -> list[Any]:
    """Return container[key], or an empty list when the key is absent or null."""
    value = container.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise MalformedResponseError(
            f"Expected a list for '{key}' at {where}, got {type(value).__name__}"
        )
    return value


def part_of_speech(lexical_entry: LexicalEntry, where: str = "lexicalEntry") -> str:
    """Return the part-of-speech label ("Verb", "Noun", ...) of a lexical entry."""
    entry = _as_object(lexical_entry, where)
    category = _as_object(entry.get("lexicalCategory"), f"{where}.lexicalCategory")
    text = category.get("text")
    if not isinstance(text, str):
        raise MalformedResponseError(f"Missing part-of-speech text at {where}.lexicalCategory")
    return text


def lexical_entry_definitions(
    lexical_entry: LexicalEntry, where: str = "lexicalEntry"
) -> list[str]:
    """Flatten every definition of a lexical entry, in order.

    Args:
        lexical_entry: One item of a result's ``lexicalEntries`` list
        where: Location used in error messages

    Returns:
        Definitions from all senses of all entries, in encounter order
    """
    entry = _as_object(lexical_entry, where)
    definitions: list[str] = []

    for group_index, group in enumerate(_required_list(entry, "entries", where)):
        group_where = f"{where}.entries[{group_index}]"
        group = _as_object(group, group_where)

        for sense_index, sense in enumerate(_optional_list(group, "senses", group_where)):
            sense_where = f"{group_where}.senses[{sense_index}]"
            sense = _as_object(sense, sense_where)

            for definition in _optional_list(sense, "definitions", sense_where):
                if not isinstance(definition, str):
                    raise MalformedResponseError(
                        f"Expected a string definition at {sense_where}, "
                        f"got {type(definition).__name__}"
                    )
                definitions.append(definition)

    return definitions


def reduce_response(api_response: ApiResponse) -> DefinitionsByCategory:
    """
    Group the definitions of an entries response by part of speech.

    Categories keep the order in which they are first seen. A category whose
    lexical entries carry no definitions is kept with an empty list; the
    renderer decides whether to show it.

    Raises:
        MalformedResponseError: ``results`` or ``lexicalEntries`` is missing
            or not a list, or another structural field has the wrong type
    """
    response = _as_object(api_response, "response")
    collection: DefinitionsByCategory = {}

    for result_index, result in enumerate(_required_list(response, "results", "response")):
        result_where = f"results[{result_index}]"
        result = _as_object(result, result_where)

        for entry_index, lexical_entry in enumerate(
            _required_list(result, "lexicalEntries", result_where)
        ):
            entry_where = f"{result_where}.lexicalEntries[{entry_index}]"
            category = part_of_speech(lexical_entry, entry_where)
            definitions = lexical_entry_definitions(lexical_entry, entry_where)
            collection.setdefault(category, []).extend(definitions)

    logger.debug(
        f"Reduced response to {len(collection)} categories: {', '.join(collection) or 'none'}"
    )
    return collection


def provider_name(api_response: ApiResponse, default: str) -> str:
    """Return ``metadata.provider``, or default when the response does not name one."""
    metadata = api_response.get("metadata") if isinstance(api_response, dict) else None
    if isinstance(metadata, dict) and isinstance(metadata.get("provider"), str):
        return metadata["provider"]
    return default
