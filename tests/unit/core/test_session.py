"""Unit tests for FilterSession."""

from canvasfilter.core.session import FilterSession
from canvasfilter.core.types import DisplayMode


class TestFilterSession:
    def test_defaults(self):
        session = FilterSession()
        assert session.mode == DisplayMode.HIDE
        assert session.shown == frozenset()

    def test_toggle_mode_round_trips(self):
        session = FilterSession()
        assert session.toggle_mode() == DisplayMode.FADE
        assert session.toggle_mode() == DisplayMode.HIDE

    def test_replace_discards_previous(self):
        session = FilterSession()
        session.replace({"a", "b"})
        session.replace({"c"})
        assert session.shown == {"c"}

    def test_accumulate_unions(self):
        session = FilterSession()
        session.accumulate({"a"})
        assert session.accumulate({"b", "a"}) == {"a", "b"}

    def test_reset_keeps_mode(self):
        session = FilterSession(DisplayMode.FADE)
        session.replace({"a"})
        session.reset()
        assert session.shown == frozenset()
        assert session.mode == DisplayMode.FADE

    def test_shown_is_a_copy(self):
        session = FilterSession()
        session.replace({"a"})
        shown = session.shown
        session.accumulate({"b"})
        assert shown == {"a"}
