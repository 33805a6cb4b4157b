"""
Tests for run decoration callbacks.
"""

from html_interpreter.renderers.callbacks import HighlightCallback, StrikeThroughCallback


class TestHighlightCallback:
    """Test background highlight handles."""

    def test_no_colour_leaves_markup(self):
        assert HighlightCallback().decorate("x") == "x"

    def test_colour_set_later(self):
        callback = HighlightCallback()
        callback.set_color("ffff00")

        assert callback.decorate("x") == '<span backColor="#ffff00">x</span>'

    def test_custom_colour_formatter(self):
        callback = HighlightCallback("yellow")
        assert callback.decorate("x", format_color=str.upper) == '<span backColor="YELLOW">x</span>'


class TestStrikeThroughCallback:
    """Test strike-through handles."""

    def test_decorate(self):
        assert StrikeThroughCallback().decorate("<b>x</b>") == "<strike><b>x</b></strike>"
