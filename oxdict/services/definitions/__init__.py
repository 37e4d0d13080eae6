"""Reduce Oxford entries responses and render them as text."""

from oxdict.services.definitions.base import DefinitionsByCategory, Lookup
from oxdict.services.definitions.reducer import (
    lexical_entry_definitions,
    part_of_speech,
    reduce_response,
)
from oxdict.services.definitions.renderer import (
    build_lookup,
    render,
    render_definitions,
    render_lookup,
)

__all__ = [
    "DefinitionsByCategory",
    "Lookup",
    "build_lookup",
    "lexical_entry_definitions",
    "part_of_speech",
    "reduce_response",
    "render",
    "render_definitions",
    "render_lookup",
]
