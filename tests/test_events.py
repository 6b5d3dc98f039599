"""Tests for generic event name mapping."""

from __future__ import annotations

import pytest

from inspectree.events import NATIVE_TO_ENGINE_EVENT_MAP, map_native_event_name, prop_from_event


class TestMapNativeEventName:
    @pytest.mark.parametrize(
        "event, expected",
        [
            ("dblclick", "doubleClick"),
            ("doubleclick", "doubleClick"),
            ("keydown", "keyDown"),
            ("mouseenter", "mouseEnter"),
            ("touchstart", "touchStart"),
            ("compositionend", "compositionEnd"),
            ("timeupdate", "timeUpdate"),
        ],
    )
    def test_mapped(self, event, expected):
        assert map_native_event_name(event) == expected

    def test_unmapped_passes_through(self):
        assert map_native_event_name("click") == "click"
        assert map_native_event_name("change") == "change"
        assert map_native_event_name("nonsense") == "nonsense"

    def test_engine_names_are_identity(self):
        for engine_name in NATIVE_TO_ENGINE_EVENT_MAP.values():
            assert map_native_event_name(engine_name) == engine_name

    def test_keys_are_lowercase(self):
        for native in NATIVE_TO_ENGINE_EVENT_MAP:
            assert native == native.lower()


class TestPropFromEvent:
    @pytest.mark.parametrize(
        "event, prop",
        [
            ("click", "onClick"),
            ("change", "onChange"),
            ("dblclick", "onDoubleClick"),
            ("keyup", "onKeyUp"),
            ("mouseleave", "onMouseLeave"),
            ("keyDown", "onKeyDown"),
        ],
    )
    def test_prop_names(self, event, prop):
        assert prop_from_event(event) == prop
