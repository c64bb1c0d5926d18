"""Tests for StatefulList cursor navigation and deletion."""

from __future__ import annotations

import pytest

from task_timer_tui.tui.stateful_list import StatefulList


@pytest.fixture
def abc() -> StatefulList[str]:
    """List with three items and no selection."""
    return StatefulList.with_items(["A", "B", "C"])


class TestConstruction:
    """Tests for creating lists."""

    def test_empty_list_has_no_selection(self) -> None:
        """A new list is empty with no cursor."""
        stateful: StatefulList[str] = StatefulList()

        assert len(stateful) == 0
        assert stateful.selected_index is None
        assert stateful.selected is None
        assert not stateful

    def test_with_items_does_not_select(self, abc: StatefulList[str]) -> None:
        """Items supplied up front are not auto-selected."""
        assert abc.items == ("A", "B", "C")
        assert abc.selected_index is None
        assert abc.selected is None

    def test_with_items_copies_input(self) -> None:
        """Mutating the source list does not affect the StatefulList."""
        source = ["A"]
        stateful = StatefulList.with_items(source)
        source.append("B")

        assert stateful.items == ("A",)


class TestNext:
    """Tests for next()."""

    def test_next_from_none_cycles_and_wraps(self, abc: StatefulList[str]) -> None:
        """Three calls select 0, 1, 2 and the fourth wraps to 0."""
        seen = []
        for _ in range(4):
            abc.next()
            seen.append(abc.selected_index)

        assert seen == [0, 1, 2, 0]

    def test_next_on_empty_list_is_noop(self) -> None:
        """Navigating an empty list keeps the cursor unset."""
        stateful: StatefulList[str] = StatefulList()
        stateful.next()

        assert stateful.selected_index is None

    def test_next_on_single_item_stays_at_zero(self) -> None:
        """A one-item list wraps onto itself."""
        stateful = StatefulList.with_items(["only"])
        stateful.next()
        stateful.next()

        assert stateful.selected_index == 0


class TestPrevious:
    """Tests for previous()."""

    def test_previous_from_none_selects_first(self, abc: StatefulList[str]) -> None:
        """With no selection, previous selects index 0."""
        abc.previous()

        assert abc.selected_index == 0

    def test_previous_wraps_to_last(self, abc: StatefulList[str]) -> None:
        """From index 0, previous wraps to the last index."""
        abc.next()
        abc.previous()

        assert abc.selected_index == 2
        assert abc.selected == "C"

    def test_previous_decrements(self, abc: StatefulList[str]) -> None:
        """From index 2, previous moves to 1."""
        abc.next()
        abc.next()
        abc.next()
        abc.previous()

        assert abc.selected_index == 1

    def test_previous_on_empty_list_is_noop(self) -> None:
        """Navigating an empty list keeps the cursor unset."""
        stateful: StatefulList[str] = StatefulList()
        stateful.previous()

        assert stateful.selected_index is None


class TestCursorBounds:
    """Cursor stays within range for any navigation sequence."""

    @pytest.mark.parametrize("length", [1, 2, 5])
    def test_mixed_navigation_stays_in_range(self, length: int) -> None:
        """Alternating next/previous patterns never leave [0, n)."""
        stateful = StatefulList.with_items(range(length))
        moves = "nnpnppppnnnnnnpnpnpppp"

        for move in moves:
            if move == "n":
                stateful.next()
            else:
                stateful.previous()
            assert stateful.selected_index is not None
            assert 0 <= stateful.selected_index < length


class TestAppend:
    """Tests for append()."""

    def test_append_keeps_cursor(self, abc: StatefulList[str]) -> None:
        """Appending an item leaves the cursor where it was."""
        abc.next()
        abc.append("D")

        assert abc.items == ("A", "B", "C", "D")
        assert abc.selected_index == 0

    def test_append_to_unselected_list_keeps_none(self) -> None:
        """Appending does not establish a selection."""
        stateful: StatefulList[str] = StatefulList()
        stateful.append("A")

        assert stateful.selected_index is None


class TestDeleteSelected:
    """Tests for delete_selected()."""

    def test_delete_without_selection_is_noop(self, abc: StatefulList[str]) -> None:
        """Nothing is removed when there is no cursor."""
        assert abc.delete_selected() is None
        assert len(abc) == 3

    def test_delete_middle_moves_to_previous(self, abc: StatefulList[str]) -> None:
        """Deleting B at index 1 leaves [A, C] with A selected."""
        abc.next()
        abc.next()

        removed = abc.delete_selected()

        assert removed == "B"
        assert abc.items == ("A", "C")
        assert abc.selected_index == 0
        assert abc.selected == "A"

    def test_delete_first_keeps_index_zero(self, abc: StatefulList[str]) -> None:
        """Deleting index 0 selects the new first item."""
        abc.next()

        abc.delete_selected()

        assert abc.items == ("B", "C")
        assert abc.selected_index == 0

    def test_delete_last_selects_new_last(self, abc: StatefulList[str]) -> None:
        """Deleting the last item selects the one before it."""
        abc.previous()
        abc.previous()

        abc.delete_selected()

        assert abc.items == ("A", "B")
        assert abc.selected_index == 1

    def test_delete_only_item_clears_selection(self) -> None:
        """Emptying the list resets the cursor to None."""
        stateful = StatefulList.with_items(["only"])
        stateful.next()

        stateful.delete_selected()

        assert len(stateful) == 0
        assert stateful.selected_index is None
        assert stateful.selected is None

    def test_delete_until_empty(self, abc: StatefulList[str]) -> None:
        """Each delete removes exactly one item; cursor is None only at the end."""
        abc.next()

        for expected_length in (2, 1, 0):
            abc.delete_selected()
            assert len(abc) == expected_length
            assert (abc.selected_index is None) == (expected_length == 0)

        assert abc.delete_selected() is None
