"""
Unit tests for drag payload building and parsing.
"""

import json
import logging

import pytest

from template_builder.editor.component_defaults import COMPONENT_CATALOG, get_component_defaults
from template_builder.editor.drop_payload import build_drag_payload, parse_drag_payload
from template_builder.models.template_models import ComponentKind


class TestDragPayload:
    """Tests for the palette's drag record."""

    @pytest.mark.parametrize("entry", COMPONENT_CATALOG, ids=lambda e: e["kind"])
    def test_round_trip_when_palette_kind_then_kind_recovered(self, entry):
        payload = build_drag_payload(entry["kind"])

        assert parse_drag_payload(payload) == ComponentKind(entry["kind"])

    def test_build_when_menu_then_defaults_included(self):
        data = json.loads(build_drag_payload(ComponentKind.MENU))

        assert data["type"] == "menu"
        assert [item["text"] for item in data["properties"]["menuItems"]] == ["Home", "About", "Contact"]

    def test_parse_when_kind_key_then_accepted(self):
        assert parse_drag_payload('{"kind": "video"}') == ComponentKind.VIDEO

    @pytest.mark.parametrize("raw", [
        "",
        None,
        "{broken",
        "[1, 2]",
        '"heading"',
        '{"type": "carousel"}',
        '{"type": ["heading"]}',
        '{"content": "no kind"}',
    ])
    def test_parse_when_malformed_then_none_and_logged(self, raw, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_drag_payload(raw) is None

        assert "[DROP]" in caplog.text


class TestComponentDefaults:
    """Tests for the defaults table."""

    @pytest.mark.parametrize("kind", list(ComponentKind))
    def test_defaults_when_any_kind_then_complete(self, kind):
        defaults = get_component_defaults(kind)

        assert set(defaults) >= {"content", "style", "properties"}

    def test_defaults_when_called_twice_then_independent_copies(self):
        first = get_component_defaults(ComponentKind.BUTTON)
        first["style"]["color"] = "#000000"

        assert get_component_defaults(ComponentKind.BUTTON)["style"]["color"] == "#ffffff"
