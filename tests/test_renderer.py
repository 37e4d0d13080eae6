"""Tests for rendering definitions as text."""

import pytest
from factories import api_response, lexical_entry, sense_group

from oxdict.errors import MalformedResponseError
from oxdict.services.definitions import (
    Lookup,
    build_lookup,
    render,
    render_definitions,
    render_lookup,
)
from oxdict.services.definitions.renderer import BANNER


class TestRenderDefinitions:
    """Tests for render_definitions."""

    def test_full_layout(self):
        """Should frame the title and blocks with banners and blank lines."""
        text = render_definitions(
            {"Verb": ["a", "b"], "Noun": ["c"]}, "debug", "Oxford University Press"
        )
        assert text == "\n".join(
            [
                BANNER,
                "",
                'Definitions of "debug", as provided by Oxford University Press',
                "",
                "# Verb",
                "1. a",
                "2. b",
                "",
                "# Noun",
                "1. c",
                "",
                BANNER,
            ]
        )

    def test_single_block(self):
        """Should render a header followed by numbered definitions."""
        text = render_definitions({"Verb": ["fix code"]}, "debug", "OUP")
        assert "# Verb\n1. fix code" in text

    def test_keeps_mapping_order(self):
        """Should not sort categories alphabetically."""
        text = render_definitions({"Verb": ["v"], "Adjective": ["a"]}, "x", "OUP")
        assert text.index("# Verb") < text.index("# Adjective")

    def test_skips_empty_categories(self):
        """Should omit categories without definitions."""
        text = render_definitions({"Conjunction": [], "Noun": ["n"]}, "so", "OUP")
        assert "Conjunction" not in text
        assert text.count("#") == 1

    def test_empty_mapping(self):
        """Should render only the title between banners."""
        text = render_definitions({}, "so", "OUP")
        assert text == f'{BANNER}\n\nDefinitions of "so", as provided by OUP\n\n{BANNER}'

    def test_only_empty_categories_matches_empty_mapping(self):
        """Should render the same text as an empty mapping."""
        assert render_definitions({"Verb": []}, "so", "OUP") == render_definitions({}, "so", "OUP")

    def test_numbering_restarts_per_category(self):
        """Should number each category from 1."""
        text = render_definitions({"Verb": ["a", "b"], "Noun": ["c"]}, "x", "OUP")
        assert "# Noun\n1. c" in text

    def test_repeated_calls_identical(self):
        """Should return the same string each time."""
        definitions = {"Verb": ["a", "b"], "Noun": ["c"]}
        assert render_definitions(definitions, "x", "OUP") == render_definitions(
            definitions, "x", "OUP"
        )

    def test_default_provider(self):
        """Should name a generic provider when none is given."""
        assert "as provided by the dictionary provider" in render_definitions({}, "x")


class TestRender:
    """Tests for the render entry point."""

    def test_single_verb_response(self):
        """Should render a minimal response."""
        response = {
            "results": [
                {
                    "lexicalEntries": [
                        {
                            "lexicalCategory": {"text": "Verb"},
                            "entries": [{"senses": [{"definitions": ["fix code"]}]}],
                        }
                    ]
                }
            ]
        }
        assert "# Verb\n1. fix code" in render(response, "debug")

    def test_uses_provider_from_metadata(self, debug_response):
        """Should name the provider from metadata in the title."""
        text = render(debug_response, "debug")
        assert 'Definitions of "debug", as provided by Oxford University Press' in text

    def test_debug_response(self, debug_response):
        """Should render every verb definition before the noun."""
        text = render(debug_response, "debug")
        assert "# Verb\n1. identify" in text
        assert "\n3. remove insects from (something)" in text
        assert text.index("# Verb") < text.index("# Noun")

    def test_entry_without_senses_only(self):
        """Should not render a block for a category without definitions."""
        response = api_response([lexical_entry("Verb", {})])
        assert "# Verb" not in render(response, "x")

    def test_merged_nouns(self):
        """Should number merged definitions consecutively."""
        response = api_response(
            [lexical_entry("Noun", sense_group(["a"]))],
            [lexical_entry("Noun", sense_group(["b"]))],
        )
        assert "# Noun\n1. a\n2. b" in render(response, "x")

    def test_sparse_response(self, sparse_response):
        """Should skip the category whose entries are all empty."""
        text = render(sparse_response, "so")
        assert "# Conjunction" not in text
        assert "# Adverb\n1. to such a great extent" in text
        assert "# Noun\n1. variant spelling of soh" in text

    def test_empty_object_raises(self):
        """Should fail on a response without results."""
        with pytest.raises(MalformedResponseError):
            render({}, "x")

    def test_missing_lexical_entries_raises(self):
        """Should fail on a result without lexicalEntries."""
        with pytest.raises(MalformedResponseError):
            render({"metadata": {"provider": "OUP"}, "results": [{}]}, "x")


class TestLookup:
    """Tests for build_lookup and render_lookup."""

    def test_build_lookup(self, debug_response):
        """Should bundle expression, provider and definitions."""
        lookup = build_lookup(debug_response, "debug")
        assert lookup.expression == "debug"
        assert lookup.provider == "Oxford University Press"
        assert list(lookup.definitions) == ["Verb", "Noun"]
        assert lookup.is_empty is False

    def test_is_empty(self):
        """Should be empty when every category has no definitions."""
        assert Lookup(expression="so", definitions={"Verb": []}).is_empty is True

    def test_render_lookup_matches_render(self, debug_response):
        """Should render the same text as render()."""
        lookup = build_lookup(debug_response, "debug")
        assert render_lookup(lookup) == render(debug_response, "debug")
