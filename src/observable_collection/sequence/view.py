# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ListView - live view over a range of an ObservableList."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar, TYPE_CHECKING

from ..exceptions import ConcurrentModificationError
from .bounds import check_index, check_position, check_range
from .cursor import ListCursor

if TYPE_CHECKING:
    from .core import ObservableList

T = TypeVar('T')


class ListView(MutableSequence, Generic[T]):
    """A window of ``size`` elements starting at ``offset`` in a parent list.

    The view holds no elements of its own. Every read and write goes to
    the parent (an ObservableList or another ListView), so the parent's
    listeners fire for changes made through the view.

    Adding or removing through the view resizes it. Adding or removing
    through anything else makes it stale: any later access raises
    ConcurrentModificationError.

    Example:
        >>> lst = ObservableList.from_iterable([0, 9, 2, 5])
        >>> view = lst.sub_list(1, 3)
        >>> view.to_list()
        [9, 2]
        >>> view[0] = 7
        >>> lst[1]
        7
    """

    __slots__ = ('_parent', '_root', '_offset', '_size', '_expected')

    def __init__(
        self,
        parent: ObservableList[T] | ListView[T],
        from_index: int,
        to_index: int,
    ) -> None:
        """Initialize a ListView.

        The range is validated by the parent's ``sub_list``.

        Args:
            parent: The list or view this view is taken from.
            from_index: First parent index in the view (inclusive).
            to_index: Last parent index of the view (exclusive).
        """
        self._parent = parent
        self._root = parent._root if isinstance(parent, ListView) else parent
        self._offset = from_index
        self._size = to_index - from_index
        self._expected = self._root._structure_version()

    def _check_comodification(self) -> None:
        if self._root._structure_version() != self._expected:
            raise ConcurrentModificationError(
                "List was structurally modified outside this view"
            )

    def _structure_version(self) -> int:
        self._check_comodification()
        return self._expected

    def _resized(self, delta: int) -> None:
        # one step per change made through this view; anything else the
        # root saw in the meantime must still make the view stale
        self._size += delta
        self._expected += 1

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"ListView({self.to_list()!r})"

    def __len__(self) -> int:
        self._check_comodification()
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(len(self)):
            yield self.get(i)

    def __contains__(self, element: Any) -> bool:
        return self.index_of(element) >= 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ListView):
            return self.to_list() == other.to_list()
        if isinstance(other, list):
            return self.to_list() == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return self.to_list()[index]
        return self.get(self._normalize(index))

    def __setitem__(self, index: int, value: T) -> None:
        if isinstance(index, slice):
            raise TypeError("ListView does not support slice assignment")
        self.set(self._normalize(index), value)

    def __delitem__(self, index: int) -> None:
        if isinstance(index, slice):
            raise TypeError("ListView does not support slice deletion")
        self.remove_at(self._normalize(index))

    def _normalize(self, index: int) -> int:
        if index < 0:
            return len(self) + index
        return index

    @property
    def size(self) -> int:
        """Number of elements in the view."""
        return len(self)

    # ==================== Access ====================

    def get(self, index: int) -> T:
        """Return the element at ``index`` of the view.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size)``.
            ConcurrentModificationError: If the view is stale.
        """
        check_index(index, len(self))
        return self._parent.get(self._offset + index)

    def set(self, index: int, value: T) -> T:
        """Replace the element at ``index`` and return the previous one.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size)``.
            ConcurrentModificationError: If the view is stale.
        """
        check_index(index, len(self))
        return self._parent.set(self._offset + index, value)

    def index_of(self, element: Any) -> int:
        """Return the first view index of ``element``, or -1 if absent."""
        for i in range(len(self)):
            item = self.get(i)
            if item is element or item == element:
                return i
        return -1

    def last_index_of(self, element: Any) -> int:
        """Return the last view index of ``element``, or -1 if absent."""
        for i in range(len(self) - 1, -1, -1):
            item = self.get(i)
            if item is element or item == element:
                return i
        return -1

    def is_empty(self) -> bool:
        return len(self) == 0

    def contains(self, element: Any) -> bool:
        return self.index_of(element) >= 0

    def contains_all(self, elements: Iterable[Any]) -> bool:
        """True if every element of ``elements`` is in the view."""
        return all(self.contains(element) for element in elements)

    def to_list(self) -> list[T]:
        """Return a plain list copy of the elements in the view."""
        return [self.get(i) for i in range(len(self))]

    # ==================== Structural Changes ====================

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` at view position ``index``.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size]``.
            ConcurrentModificationError: If the view is stale.
        """
        check_position(index, len(self))
        self._parent.insert(self._offset + index, element)
        self._resized(1)

    def add(self, element: T) -> bool:
        """Insert ``element`` at the end of the view."""
        self.insert(len(self), element)
        return True

    def append(self, element: T) -> None:
        self.add(element)

    def add_all(self, elements: Iterable[T], index: int | None = None) -> bool:
        """Add every element of ``elements`` to the view, preserving order.

        The root list's add listener is called once, with all the
        elements, before anything is added.

        Args:
            elements: The elements to add.
            index: View position in ``[0, size]``. If None, elements go to
                the end of the view.

        Returns:
            True if at least one element was added.

        Raises:
            OutOfBoundsError: If index is out of range.
            ConcurrentModificationError: If the view is stale.
        """
        added = list(elements)
        position = len(self) if index is None else index
        check_position(position, len(self))
        self._root._notify_add(self._root._elements, added)
        if not added:
            return False
        self._insert_all(position, added)
        return True

    def extend(self, elements: Iterable[T]) -> None:
        self.add_all(elements)

    def remove_at(self, index: int) -> T:
        """Remove and return the element at view position ``index``.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size)``.
            ConcurrentModificationError: If the view is stale.
        """
        check_index(index, len(self))
        element = self._parent.remove_at(self._offset + index)
        self._resized(-1)
        return element

    def remove(self, element: Any) -> bool:
        """Remove the first occurrence of ``element`` within the view.

        The root list's remove listener is called before the lookup, so it
        fires even when ``element`` is not in the view.

        Returns:
            True if an element was removed, False if it was not present.
        """
        self._check_comodification()
        self._root._notify_remove(self._root._elements, [element])
        idx = self.index_of(element)
        if idx < 0:
            return False
        self._delete(idx)
        return True

    def remove_all(self, elements: Iterable[Any]) -> bool:
        """Remove every occurrence of each of ``elements`` from the view.

        The root list's remove listener is called once with the given
        elements.

        Returns:
            True if the view changed.
        """
        targets = list(elements)
        self._check_comodification()
        self._root._notify_remove(self._root._elements, targets)
        return self._filter_range(
            0, len(self), lambda item: item not in targets
        ) > 0

    def retain_all(self, elements: Iterable[Any]) -> bool:
        """Keep only the view elements that are also in ``elements``.

        The root list's remove listener is called once with the elements
        about to be discarded, in view order.

        Returns:
            True if anything was removed.
        """
        keep = list(elements)
        discarded = [item for item in self.to_list() if item not in keep]
        self._root._notify_remove(self._root._elements, discarded)
        return self._filter_range(
            0, len(self), lambda item: item in keep
        ) > 0

    def clear(self) -> None:
        """Remove the view's elements from the parent, last to first."""
        while len(self):
            self.remove_at(self._size - 1)

    # ==================== Structural Primitives ====================

    def _insert_all(self, index: int, items: list[T]) -> None:
        self._check_comodification()
        self._parent._insert_all(self._offset + index, items)
        self._resized(len(items))

    def _delete(self, index: int) -> T:
        self._check_comodification()
        element = self._parent._delete(self._offset + index)
        self._resized(-1)
        return element

    def _filter_range(
        self, start: int, stop: int, predicate: Callable[[Any], bool]
    ) -> int:
        self._check_comodification()
        removed = self._parent._filter_range(
            self._offset + start, self._offset + stop, predicate
        )
        if removed:
            self._resized(-removed)
        return removed

    # ==================== Iteration and Views ====================

    def iterator(self) -> ListCursor[T]:
        """Return a fresh cursor at the start of the view."""
        return ListCursor(self, 0)

    def list_iterator(self, index: int = 0) -> ListCursor[T]:
        """Return a bidirectional cursor positioned before ``index``."""
        return ListCursor(self, index)

    def sub_list(self, from_index: int, to_index: int) -> ListView[T]:
        """Return a live view of ``[from_index, to_index)`` within this view.

        Raises:
            OutOfBoundsError: If the range is invalid.
        """
        check_range(from_index, to_index, len(self))
        return ListView(self, from_index, to_index)
