"""Shared types for reducing and rendering entries responses."""

from dataclasses import dataclass, field
from typing import Any

# Raw JSON objects as decoded from the provider
ApiResponse = dict[str, Any]
LexicalEntry = dict[str, Any]

# Part-of-speech label -> definitions, in first-seen category order
DefinitionsByCategory = dict[str, list[str]]

DEFAULT_PROVIDER = "the dictionary provider"


@dataclass(frozen=True)
class Lookup:
    """One reduced entries response, ready to render."""

    expression: str
    provider: str = DEFAULT_PROVIDER
    definitions: DefinitionsByCategory = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when no category has a definition to show."""
        return not any(self.definitions.values())
