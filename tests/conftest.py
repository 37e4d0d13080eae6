"""Pytest configuration and fixtures."""

from typing import Any

import pytest
from factories import api_response, lexical_entry, sense_group


@pytest.fixture
def debug_response() -> dict[str, Any]:
    """Trimmed response for "debug": two verb sense groups and a noun."""
    return api_response(
        [
            lexical_entry(
                "Verb",
                sense_group(
                    ["identify and remove errors from (computer hardware or software)"],
                    ["detect and remove concealed microphones from (an area)."],
                ),
                sense_group(["remove insects from (something), especially with a pesticide."]),
            ),
            lexical_entry(
                "Noun",
                sense_group(
                    ["the process of identifying and removing errors from computer hardware or "
                     "software"]
                ),
            ),
        ]
    )


@pytest.fixture
def sparse_response() -> dict[str, Any]:
    """Response shaped like the one for "so", with entries missing senses."""
    return {
        "metadata": {"provider": "Oxford University Press"},
        "results": [
            {
                "lexicalEntries": [
                    lexical_entry("Adverb", sense_group(["to such a great extent"])),
                    lexical_entry("Conjunction", {}),
                    lexical_entry(
                        "Noun",
                        {"senses": [{"id": "m_en_gbus0960620.005"}]},
                    ),
                ]
            },
            {
                "lexicalEntries": [
                    lexical_entry("Noun", sense_group(["variant spelling of soh"])),
                ]
            },
        ],
    }
