"""Tests for nsdebug.core.colors — palette and first-seen color assignment."""

import pytest

from nsdebug.core.colors import NS_COLORS, ColorAssigner, Colors, colorize


class TestColorize:

    def test_wraps_with_sgr_and_reset(self):
        assert colorize("main", Colors.LIGHT_CYAN) == "\033[1;36mmain\033[0m"


class TestColorAssigner:
    """Colors are handed out in first-seen order and never change."""

    def test_first_seen_order(self):
        colors = ColorAssigner()
        assert colors.color_for("a") == NS_COLORS[0]
        assert colors.color_for("b") == NS_COLORS[1]
        assert colors.color_for("c") == NS_COLORS[2]

    def test_same_namespace_same_color(self):
        colors = ColorAssigner()
        first = colors.color_for("a")
        for i in range(40):
            colors.color_for(f"other{i}")
        assert colors.color_for("a") == first

    def test_palette_is_reused_cyclically(self):
        colors = ColorAssigner()
        for i in range(len(NS_COLORS)):
            colors.color_for(f"ns{i}")
        assert colors.color_for("one-more") == NS_COLORS[0]

    def test_custom_palette(self):
        colors = ColorAssigner(palette=["1", "2"])
        assert [colors.color_for(ns) for ns in "abc"] == ["1", "2", "1"]

    def test_empty_palette_rejected(self):
        with pytest.raises(ValueError):
            ColorAssigner(palette=[])

    def test_assigned_is_a_copy(self):
        colors = ColorAssigner()
        colors.color_for("a")
        table = colors.assigned
        table["b"] = "x"
        assert "b" not in colors
        assert len(colors) == 1

    def test_palette_size(self):
        assert len(NS_COLORS) >= 12
