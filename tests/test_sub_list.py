# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ListView (sub_list) and ListCursor (iterator, list_iterator)."""

import pytest

from observable_collection import (
    ConcurrentModificationError,
    ListCursor,
    ListView,
    NoSuchElementError,
    ObservableList,
    OutOfBoundsError,
)


@pytest.fixture
def lst():
    return ObservableList.from_iterable([0, 9, 2, 5])


class TestListView:
    """Tests for live range views."""

    def test_sub_list_contents(self, lst):
        """Test sub_list exposes the requested range."""
        view = lst.sub_list(1, 3)
        assert isinstance(view, ListView)
        assert view.to_list() == [9, 2]
        assert len(view) == 2
        assert view == [9, 2]

    def test_write_through_view(self, lst):
        """Test writing through the view updates the parent."""
        view = lst.sub_list(1, 3)
        view[0] = 7
        assert lst.get(1) == 7
        assert view.set(1, 8) == 2
        assert lst.to_list() == [0, 7, 8, 5]

    def test_parent_write_visible_in_view(self, lst):
        """Test writes to the parent show through the view."""
        view = lst.sub_list(1, 3)
        lst.set(2, 'x')
        assert view.get(1) == 'x'

    def test_write_through_view_notifies_parent(self, lst):
        """Test the parent's change listener fires for view writes."""
        events = []
        lst.add_on_change_listener(lambda elements, old, new: events.append((old, new)))
        lst.sub_list(1, 3).set(0, 4)
        assert events == [(9, 4)]

    @pytest.mark.parametrize('bounds', [(-1, 2), (0, 5), (3, 1)])
    def test_sub_list_invalid_range(self, lst, bounds):
        """Test invalid ranges are rejected."""
        with pytest.raises(OutOfBoundsError, match="Range"):
            lst.sub_list(*bounds)

    def test_empty_range(self, lst):
        """Test from_index == to_index gives an empty view."""
        view = lst.sub_list(4, 4)
        assert view.is_empty() is True
        assert view.to_list() == []

    def test_view_index_out_of_bounds(self, lst):
        """Test view indices are relative to the view bounds."""
        view = lst.sub_list(1, 3)
        with pytest.raises(OutOfBoundsError):
            view.get(2)
        assert view[-1] == 2

    def test_insert_through_view(self, lst):
        """Test insertion through the view grows both view and parent."""
        events = []
        lst.add_on_add_listener(lambda elements, added: events.append(list(added)))
        view = lst.sub_list(1, 3)
        view.insert(1, 'a')
        view.append('b')
        assert view.to_list() == [9, 'a', 2, 'b']
        assert lst.to_list() == [0, 9, 'a', 2, 'b', 5]
        assert events == [['a'], ['b']]

    def test_remove_through_view(self, lst):
        """Test removal through the view shrinks both view and parent."""
        events = []
        lst.add_on_remove_listener(lambda elements, removed: events.append(list(removed)))
        view = lst.sub_list(1, 3)
        assert view.remove_at(0) == 9
        assert view.to_list() == [2]
        assert lst.to_list() == [0, 2, 5]
        assert events == [[9]]

    def test_clear_view(self, lst):
        """Test clearing a view removes its range from the parent."""
        view = lst.sub_list(1, 3)
        view.clear()
        assert view.to_list() == []
        assert lst.to_list() == [0, 5]

    def test_queries(self, lst):
        """Test view lookups use view indices."""
        lst.add(9)
        view = lst.sub_list(1, 5)
        assert view.index_of(9) == 0
        assert view.last_index_of(9) == 3
        assert view.index_of(0) == -1
        assert view.contains(2) is True
        assert 0 not in view

    def test_nested_views(self, lst):
        """Test a view of a view maps back to the root list."""
        outer = lst.sub_list(1, 4)
        inner = outer.sub_list(1, 3)
        assert inner.to_list() == [2, 5]
        inner[0] = 'z'
        assert lst.to_list() == [0, 9, 'z', 5]
        inner.remove_at(1)
        assert outer.to_list() == [9, 'z']
        assert lst.to_list() == [0, 9, 'z']

    def test_view_stale_after_parent_structural_change(self, lst):
        """Test a view cannot be used after the parent changes size."""
        view = lst.sub_list(1, 3)
        lst.add(1)
        with pytest.raises(ConcurrentModificationError):
            view.get(0)
        with pytest.raises(ConcurrentModificationError):
            len(view)

    def test_sibling_view_goes_stale(self, lst):
        """Test changing size through one view invalidates another."""
        first = lst.sub_list(0, 2)
        second = lst.sub_list(2, 4)
        first.remove_at(0)
        with pytest.raises(ConcurrentModificationError):
            second.to_list()

    def test_view_survives_parent_set(self, lst):
        """Test replacing elements in the parent keeps the view valid."""
        view = lst.sub_list(0, 2)
        lst.set(0, 'new')
        assert view.to_list() == ['new', 9]

    def test_listener_insert_during_view_insert(self, lst):
        """Test a root insert made by the add listener makes the view stale."""
        def push_front(elements, added):
            lst.remove_on_add_listener()
            lst.insert(0, 'front')

        lst.add_on_add_listener(push_front)
        view = lst.sub_list(1, 3)
        view.insert(0, 'a')
        assert lst.to_list() == ['front', 'a', 0, 9, 2, 5]
        with pytest.raises(ConcurrentModificationError):
            view.to_list()

    def test_listener_add_during_view_remove(self, lst):
        """Test a root append made by the remove listener makes the view stale."""
        def push_back(elements, removed):
            lst.remove_on_remove_listener()
            lst.add('tail')

        lst.add_on_remove_listener(push_back)
        view = lst.sub_list(1, 3)
        view.remove_at(0)
        with pytest.raises(ConcurrentModificationError):
            view.get(0)

    def test_listener_change_keeps_view_valid(self, lst):
        """Test a listener that only replaces elements leaves the view usable."""
        lst.add_on_add_listener(lambda elements, added: lst.set(0, 'x'))
        view = lst.sub_list(1, 3)
        view.insert(0, 'a')
        assert view.to_list() == ['a', 9, 2]


class TestListViewBulk:
    """Tests for value-based and bulk operations on views."""

    def test_remove_absent_returns_false(self, lst):
        """Test remove of a missing element reports False and still notifies."""
        events = []
        lst.add_on_remove_listener(lambda elements, removed: events.append(list(removed)))
        view = lst.sub_list(1, 3)
        assert view.remove(42) is False
        assert events == [[42]]
        assert lst.to_list() == [0, 9, 2, 5]

    def test_remove_only_looks_inside_view(self, lst):
        """Test remove ignores matching elements outside the view."""
        view = lst.sub_list(1, 4)
        assert view.remove(0) is False
        assert view.remove(2) is True
        assert view.to_list() == [9, 5]
        assert lst.to_list() == [0, 9, 5]

    def test_add_all(self, lst):
        """Test add_all appends to the view and notifies the root once."""
        events = []
        lst.add_on_add_listener(
            lambda elements, added: events.append((list(elements), list(added)))
        )
        view = lst.sub_list(1, 3)
        assert view.add_all(['a', 'b']) is True
        assert view.to_list() == [9, 2, 'a', 'b']
        assert lst.to_list() == [0, 9, 2, 'a', 'b', 5]
        assert events == [([0, 9, 2, 5], ['a', 'b'])]

    def test_add_all_at_index(self, lst):
        """Test add_all with a view index."""
        view = lst.sub_list(1, 3)
        view.add_all(['x'], index=0)
        assert view.to_list() == ['x', 9, 2]
        assert lst.to_list() == [0, 'x', 9, 2, 5]

    def test_add_all_empty(self, lst):
        """Test add_all with nothing to add reports no change."""
        events = []
        lst.add_on_add_listener(lambda elements, added: events.append(list(added)))
        view = lst.sub_list(1, 3)
        assert view.add_all([]) is False
        assert events == [[]]
        assert len(view) == 2

    def test_add_all_out_of_bounds(self, lst):
        """Test add_all rejects a position outside the view."""
        view = lst.sub_list(1, 3)
        with pytest.raises(OutOfBoundsError):
            view.add_all(['x'], index=3)

    def test_extend_notifies_once(self, lst):
        """Test extend goes through add_all."""
        events = []
        lst.add_on_add_listener(lambda elements, added: events.append(list(added)))
        view = lst.sub_list(0, 1)
        view.extend([1, 2])
        assert view.to_list() == [0, 1, 2]
        assert events == [[1, 2]]

    def test_remove_all(self):
        """Test remove_all only removes inside the view."""
        lst = ObservableList.from_iterable([1, 2, 1, 2, 1])
        events = []
        lst.add_on_remove_listener(lambda elements, removed: events.append(list(removed)))
        view = lst.sub_list(1, 4)
        assert view.remove_all([2]) is True
        assert view.to_list() == [1]
        assert lst.to_list() == [1, 1, 1]
        assert events == [[2]]
        assert view.remove_all([7]) is False

    def test_retain_all(self):
        """Test retain_all notifies with the view elements it discards."""
        lst = ObservableList.from_iterable(['a', 'b', 'c', 'b', 'a'])
        events = []
        lst.add_on_remove_listener(lambda elements, removed: events.append(list(removed)))
        view = lst.sub_list(1, 4)
        assert view.retain_all(['c']) is True
        assert view.to_list() == ['c']
        assert lst.to_list() == ['a', 'c', 'a']
        assert events == [['b', 'b']]

    def test_contains_all(self, lst):
        """Test contains_all checks against the view only."""
        view = lst.sub_list(1, 3)
        assert view.contains_all([9, 2]) is True
        assert view.contains_all([9, 0]) is False

    def test_iterator(self, lst):
        """Test iterator() on a view returns a fresh cursor each call."""
        view = lst.sub_list(1, 3)
        assert isinstance(view.iterator(), ListCursor)
        assert list(view.iterator()) == [9, 2]
        assert list(view.iterator()) == [9, 2]

    def test_nested_bulk_keeps_outer_valid(self, lst):
        """Test bulk changes through an inner view keep the outer view usable."""
        outer = lst.sub_list(0, 4)
        inner = outer.sub_list(1, 3)
        inner.add_all(['a'])
        inner.remove_all([9])
        assert inner.to_list() == [2, 'a']
        assert outer.to_list() == [0, 2, 'a', 5]
        assert lst.to_list() == [0, 2, 'a', 5]

    def test_identity_match(self):
        """Test view lookups match by identity like `in`."""
        nan = float('nan')
        lst = ObservableList.from_iterable([0, nan, nan])
        view = lst.sub_list(1, 3)
        assert view.index_of(nan) == 0
        assert view.last_index_of(nan) == 1
        assert view.remove(nan) is True


class TestListCursor:
    """Tests for cursors."""

    def test_iterator_walks_in_order(self, lst):
        """Test iterator() yields elements in index order."""
        assert list(lst.iterator()) == [0, 9, 2, 5]

    def test_iterator_is_restartable(self, lst):
        """Test each call returns a fresh cursor."""
        first = lst.iterator()
        list(first)
        assert list(lst.iterator()) == [0, 9, 2, 5]
        assert first.has_next() is False

    def test_list_iterator_from_index(self, lst):
        """Test list_iterator starts before the given index."""
        cursor = lst.list_iterator(2)
        assert isinstance(cursor, ListCursor)
        assert cursor.next_index() == 2
        assert cursor.previous_index() == 1
        assert list(cursor) == [2, 5]

    def test_bidirectional(self, lst):
        """Test moving forward and back."""
        cursor = lst.list_iterator()
        assert cursor.has_previous() is False
        assert cursor.next() == 0
        assert cursor.next() == 9
        assert cursor.previous() == 9
        assert cursor.previous() == 0
        assert cursor.has_previous() is False

    def test_list_iterator_at_end(self, lst):
        """Test a cursor may start at size and walk backwards."""
        cursor = lst.list_iterator(4)
        assert cursor.has_next() is False
        assert cursor.previous() == 5

    def test_list_iterator_out_of_bounds(self, lst):
        """Test start index outside [0, size] is rejected."""
        with pytest.raises(OutOfBoundsError):
            lst.list_iterator(5)

    def test_move_past_ends(self):
        """Test next/previous past the ends raise NoSuchElementError."""
        cursor = ObservableList(1, lambda i: i).list_iterator()
        with pytest.raises(NoSuchElementError):
            cursor.previous()
        cursor.next()
        with pytest.raises(NoSuchElementError):
            cursor.next()

    def test_cursor_stale_after_structural_change(self, lst):
        """Test a cursor rejects moves after the list changes size."""
        cursor = lst.list_iterator()
        cursor.next()
        lst.remove_at(0)
        with pytest.raises(ConcurrentModificationError):
            cursor.next()

    def test_cursor_over_view(self, lst):
        """Test cursors work over views."""
        view = lst.sub_list(1, 3)
        assert list(view.list_iterator()) == [9, 2]
