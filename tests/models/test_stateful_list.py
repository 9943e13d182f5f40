"""Unit tests for StatefulList cursor navigation."""

from __future__ import annotations

import pytest

from pomodoro_tui.models.stateful_list import StatefulList


class TestInit:
    def test_selection_starts_unset(self):
        items = StatefulList.with_items(["a", "b"])
        assert items.selected() is None

    def test_keeps_order(self):
        assert StatefulList(["c", "a", "b"]).items == ["c", "a", "b"]

    def test_len_and_iter(self):
        items = StatefulList(["a", "b"])
        assert len(items) == 2
        assert list(items) == ["a", "b"]


class TestNext:
    def test_first_next_selects_zero(self):
        items = StatefulList(["a", "b", "c"])
        items.next()
        assert items.selected() == 0

    def test_next_advances(self):
        items = StatefulList(["a", "b", "c"])
        items.next()
        items.next()
        assert items.selected() == 1

    def test_next_wraps_after_last(self):
        items = StatefulList(["a", "b"])
        items.select(1)
        items.next()
        assert items.selected() == 0

    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_n_calls_return_to_start(self, size):
        items = StatefulList(range(size))
        items.next()
        first = items.selected()
        for _ in range(size):
            items.next()
        assert items.selected() == first


class TestPrevious:
    def test_previous_from_zero_wraps_to_last(self):
        items = StatefulList(["a", "b", "c"])
        items.next()
        items.previous()
        assert items.selected() == 2

    def test_previous_moves_back(self):
        items = StatefulList(["a", "b", "c"])
        items.select(2)
        items.previous()
        assert items.selected() == 1

    def test_previous_from_unset_selects_first(self):
        items = StatefulList(["a", "b", "c"])
        items.previous()
        assert items.selected() == 0

    def test_single_item_stays_put(self):
        items = StatefulList(["only"])
        items.next()
        items.previous()
        assert items.selected() == 0


class TestEmpty:
    def test_next_on_empty_keeps_none(self):
        items = StatefulList([])
        items.next()
        assert items.selected() is None

    def test_previous_on_empty_keeps_none(self):
        items = StatefulList([])
        items.previous()
        assert items.selected() is None

    def test_selected_item_on_empty(self):
        assert StatefulList([]).selected_item() is None


class TestSelect:
    def test_selected_item(self):
        items = StatefulList(["a", "b"])
        items.select(1)
        assert items.selected_item() == "b"

    def test_select_none_clears(self):
        items = StatefulList(["a"])
        items.next()
        items.select(None)
        assert items.selected() is None

    def test_select_out_of_range(self):
        with pytest.raises(IndexError):
            StatefulList(["a"]).select(3)
