"""
Tests for list numbering and indentation state.
"""

from html_interpreter.engine.list_state import ListState
from html_interpreter.styles.defaults import DEFAULT_BULLET


class TestListState:
    """Test cases for ListState."""

    def test_initial_state(self):
        state = ListState()

        assert state.margin_accumulator == 0
        assert state.current_ordered_index is None
        assert state.bullet_symbol == ""
        assert state.next_prefix() == ""

    def test_ordered_counter(self):
        state = ListState()
        state.open_list("ol", 15)

        assert state.next_prefix() == "1. "
        assert state.next_prefix() == "2. "
        assert state.current_ordered_index == 3

    def test_unordered_default_bullet(self):
        state = ListState()
        state.open_list("ul", 15, DEFAULT_BULLET)

        assert state.next_prefix() == "• "
        assert state.next_prefix() == "• "

    def test_nested_margin_restored_on_close(self):
        state = ListState()
        state.open_list("ul", 15, DEFAULT_BULLET)
        state.open_list("ul", 20, "-")

        assert state.margin_accumulator == 35
        assert state.bullet_symbol == "-"

        state.close_list()
        assert state.margin_accumulator == 15
        assert state.bullet_symbol == DEFAULT_BULLET

        state.close_list()
        assert state.margin_accumulator == 0

    def test_ordered_counter_survives_nested_list(self):
        state = ListState()
        state.open_list("ol", 15)
        assert state.next_prefix() == "1. "

        state.open_list("ul", 15, DEFAULT_BULLET)
        assert state.next_prefix() == DEFAULT_BULLET
        state.close_list()

        assert state.next_prefix() == "2. "

    def test_close_without_open(self):
        state = ListState()
        assert state.close_list() is None
        assert state.margin_accumulator == 0
