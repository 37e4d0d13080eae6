"""Render grouped definitions as console text."""

from oxdict.services.definitions.base import (
    DEFAULT_PROVIDER,
    ApiResponse,
    DefinitionsByCategory,
    Lookup,
)
from oxdict.services.definitions.reducer import provider_name, reduce_response

BANNER = "***************************"


def _category_block(category: str, definitions: list[str]) -> list[str]:
    """Header line followed by numbered definitions."""
    lines = [f"# {category}"]
    lines.extend(f"{number}. {definition}" for number, definition in enumerate(definitions, 1))
    return lines


def render_definitions(
    definitions: DefinitionsByCategory,
    expression: str,
    provider: str = DEFAULT_PROVIDER,
) -> str:
    """
    Render definitions grouped by part of speech between two banners.

    Categories appear in mapping order. Categories without definitions are
    skipped entirely, so an empty mapping renders just the title.
    """
    lines = [BANNER, "", f'Definitions of "{expression}", as provided by {provider}', ""]

    for category, category_definitions in definitions.items():
        if not category_definitions:
            continue
        lines.extend(_category_block(category, category_definitions))
        lines.append("")

    lines.append(BANNER)
    return "\n".join(lines)


def build_lookup(api_response: ApiResponse, expression: str) -> Lookup:
    """Reduce a response and pair it with the expression and provider name."""
    definitions = reduce_response(api_response)
    return Lookup(
        expression=expression,
        provider=provider_name(api_response, DEFAULT_PROVIDER),
        definitions=definitions,
    )


def render_lookup(lookup: Lookup) -> str:
    return render_definitions(lookup.definitions, lookup.expression, lookup.provider)


def render(api_response: ApiResponse, expression: str) -> str:
    """
    Turn an entries response into the text shown for a lookup.

    Args:
        api_response: Decoded JSON body of ``GET /entries/{lang}/{expression}``
        expression: The expression that was looked up, used in the title

    Returns:
        The rendered definitions

    Raises:
        MalformedResponseError: The response lacks ``results`` or ``lexicalEntries``
    """
    return render_lookup(build_lookup(api_response, expression))
