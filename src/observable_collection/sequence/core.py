# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ObservableList - An ordered, mutable list that reports its changes.

This module provides the ObservableList class, the core container of the
observable-collection library. It behaves like a Python list and calls a
bound listener around each category of content change.

Events:
    - **change**: an element was replaced with a different value
      (``set``, ``lst[i] = v``). Fired after the write.
    - **add**: elements are about to be added (``add``, ``insert``,
      ``add_all``, ``append``, ``extend``). Fired before the mutation.
    - **remove**: elements are about to be removed (``remove``,
      ``remove_at``, ``remove_all``, ``retain_all``, ``del lst[i]``,
      ``pop``). Fired before the mutation.
    - **clear**: the list is about to be emptied. Fired before the mutation.

Each event kind has a single listener slot. Binding a new listener
replaces the old one.

Example:
    Basic usage::

        items = ObservableList(3, lambda i: i)
        items.add_on_change_listener(
            lambda elements, old, new: print(f'{old} -> {new}')
        )
        items[1] = 9          # prints '1 -> 9'
        items.append(5)
        items.remove(9)
        print(items)          # ObservableList([0, 2, 5])
"""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from ..listeners import ListenerMixin
from .bounds import check_index, check_position, check_range
from .cursor import ListCursor
from .view import ListView

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ObservableList(ListenerMixin, MutableSequence, Generic[T]):
    """A list that notifies single-slot listeners when its contents change.

    ObservableList provides:
    - get(i) / set(i, v): Indexed access, ``set`` notifies on value change
    - add / insert / add_all: Additions, notify before mutating
    - remove / remove_at / remove_all / retain_all: Removals, notify before
    - clear(): Empties the list, notifies before
    - sub_list(a, b): Live view over a range of the list

    The full MutableSequence protocol is supported on top of these
    operations, so ``lst[i] = v``, ``del lst[i]``, ``append``, ``extend``,
    ``pop`` and ``reverse`` all notify as well.

    Indices passed to the named operations must lie in ``[0, size)``
    (``[0, size]`` for insertion). The subscript operators accept negative
    indices the way a Python list does.

    Example:
        >>> lst = ObservableList(3, lambda i: i * i)
        >>> lst.to_list()
        [0, 1, 4]
        >>> lst.set(1, 7)
        1
        >>> lst[1]
        7
    """

    __slots__ = (
        '_elements', '_mod_count',
        '_on_change', '_on_add', '_on_remove', '_on_clear',
    )

    def __init__(
        self,
        size: int = 0,
        initializer: Callable[[int], T] | None = None,
    ) -> None:
        """Initialize an ObservableList.

        Args:
            size: Number of initial elements.
            initializer: Function called once per index, in ascending order
                starting at 0, returning the element for that index.
                Required when size is greater than 0.

        Raises:
            ValueError: If size is negative.
            TypeError: If size is positive and no initializer is given.

        Example:
            >>> ObservableList()
            >>> ObservableList(3, lambda i: i)
            >>> ObservableList(2, lambda i: f'item_{i}')
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, not {size}")
        if size > 0 and initializer is None:
            raise TypeError("initializer is required when size is positive")

        self._elements: list[T] = []
        self._mod_count = 0
        self._init_listeners()

        for i in range(size):
            self._elements.append(initializer(i))
        logger.debug("created ObservableList with %d element(s)", size)

    @classmethod
    def create(
        cls, size: int, initializer: Callable[[int], T]
    ) -> ObservableList[T]:
        """Create a list of ``size`` elements produced by ``initializer``."""
        return cls(size, initializer)

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> ObservableList[T]:
        """Create a list holding the elements of ``items`` in order.

        No listener can be bound yet, so nothing is notified.
        """
        result = cls()
        result._elements.extend(items)
        return result

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"ObservableList({self._elements!r})"

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        """Iterate over elements in index order."""
        return iter(self._elements)

    def __contains__(self, element: Any) -> bool:
        return element in self._elements

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ObservableList):
            return self._elements == other._elements
        if isinstance(other, ListView):
            return self._elements == other.to_list()
        if isinstance(other, list):
            return self._elements == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int | slice) -> Any:
        """Get element by index, or a plain list copy for a slice.

        Negative indices count from the end.

        Raises:
            OutOfBoundsError: If index is out of range.
        """
        if isinstance(index, slice):
            return self._elements[index]
        return self.get(self._normalize(index))

    def __setitem__(self, index: int, value: T) -> None:
        """Replace element by index, notifying the change listener.

        Raises:
            OutOfBoundsError: If index is out of range.
            TypeError: If index is a slice.
        """
        if isinstance(index, slice):
            raise TypeError("ObservableList does not support slice assignment")
        self.set(self._normalize(index), value)

    def __delitem__(self, index: int) -> None:
        """Remove element by index, notifying the remove listener.

        Raises:
            OutOfBoundsError: If index is out of range.
            TypeError: If index is a slice.
        """
        if isinstance(index, slice):
            raise TypeError("ObservableList does not support slice deletion")
        self.remove_at(self._normalize(index))

    def _normalize(self, index: int) -> int:
        if index < 0:
            return len(self._elements) + index
        return index

    def _structure_version(self) -> int:
        return self._mod_count

    @property
    def size(self) -> int:
        """Number of elements in the list."""
        return len(self._elements)

    # ==================== Queries ====================

    def get(self, index: int) -> T:
        """Return the element at ``index``.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size)``.
        """
        check_index(index, len(self._elements))
        return self._elements[index]

    def index_of(self, element: Any) -> int:
        """Return the first index of ``element``, or -1 if absent.

        Elements match by identity or equality, as with ``in``.
        """
        for i, item in enumerate(self._elements):
            if item is element or item == element:
                return i
        return -1

    def last_index_of(self, element: Any) -> int:
        """Return the last index of ``element``, or -1 if absent."""
        for i in range(len(self._elements) - 1, -1, -1):
            item = self._elements[i]
            if item is element or item == element:
                return i
        return -1

    def is_empty(self) -> bool:
        """True if the list holds no elements."""
        return not self._elements

    def contains(self, element: Any) -> bool:
        """True if an element equal to ``element`` is in the list."""
        return element in self._elements

    def contains_all(self, elements: Iterable[Any]) -> bool:
        """True if every element of ``elements`` is in the list."""
        return all(element in self._elements for element in elements)

    def to_list(self) -> list[T]:
        """Return a plain list copy of the elements."""
        return list(self._elements)

    # ==================== Replacement ====================

    def set(self, index: int, value: T) -> T:
        """Replace the element at ``index`` and return the previous one.

        The change listener is called after the write, with
        ``(elements, old_value, value)``, and only if the two values
        are neither identical nor equal.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size)``.
        """
        check_index(index, len(self._elements))
        old_value = self._elements[index]
        self._elements[index] = value
        if not (old_value is value or old_value == value):
            self._notify_change(self._elements, old_value, value)
        return old_value

    # ==================== Addition ====================

    def add(self, element: T) -> bool:
        """Append ``element`` to the end of the list.

        The add listener sees the list before the element is appended.

        Returns:
            Always True.
        """
        self._notify_add(self._elements, [element])
        self._elements.append(element)
        self._mod_count += 1
        return True

    def append(self, element: T) -> None:
        """Append ``element``, as ``add``."""
        self.add(element)

    def insert(self, index: int, element: T) -> None:
        """Insert ``element`` at ``index``, shifting later elements right.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size]``.
        """
        check_position(index, len(self._elements))
        self._notify_add(self._elements, [element])
        self._insert_all(index, [element])

    def add_all(self, elements: Iterable[T], index: int | None = None) -> bool:
        """Add every element of ``elements``, preserving their order.

        The add listener is called once, with all the elements, before
        anything is added.

        Args:
            elements: The elements to add.
            index: Insertion position in ``[0, size]``. If None, elements
                are appended to the end.

        Returns:
            True if at least one element was added.

        Raises:
            OutOfBoundsError: If index is out of range.
        """
        added = list(elements)
        if index is not None:
            check_position(index, len(self._elements))
        self._notify_add(self._elements, added)
        if not added:
            return False
        if index is None:
            for element in added:
                self._elements.append(element)
            self._mod_count += 1
        else:
            self._insert_all(index, added)
        return True

    def extend(self, elements: Iterable[T]) -> None:
        """Append every element of ``elements``, as ``add_all``."""
        self.add_all(elements)

    # ==================== Removal ====================

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``.

        The remove listener sees the list before the removal.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size)``.
        """
        check_index(index, len(self._elements))
        self._notify_remove(self._elements, [self._elements[index]])
        return self._delete(index)

    def remove(self, element: Any) -> bool:
        """Remove the first occurrence of ``element``.

        The remove listener is called before the lookup, so it fires even
        when ``element`` is not in the list.

        Returns:
            True if an element was removed, False if it was not present.
        """
        self._notify_remove(self._elements, [element])
        idx = self.index_of(element)
        if idx < 0:
            return False
        self._delete(idx)
        return True

    def remove_all(self, elements: Iterable[Any]) -> bool:
        """Remove every occurrence of every element in ``elements``.

        The remove listener is called once with the given elements.

        Returns:
            True if the list changed.
        """
        targets = list(elements)
        self._notify_remove(self._elements, targets)
        return self._filter_range(
            0, len(self._elements), lambda item: item not in targets
        ) > 0

    def retain_all(self, elements: Iterable[Any]) -> bool:
        """Keep only the elements that are also in ``elements``.

        The remove listener is called once with the elements about to be
        discarded, in list order.

        Returns:
            True if anything was removed.
        """
        keep = list(elements)
        discarded = [item for item in self._elements if item not in keep]
        self._notify_remove(self._elements, discarded)
        return self._filter_range(
            0, len(self._elements), lambda item: item in keep
        ) > 0

    def clear(self) -> None:
        """Remove all elements.

        The clear listener sees the list before it is emptied.
        """
        self._notify_clear(self._elements)
        if self._elements:
            self._elements.clear()
            self._mod_count += 1

    # ==================== Iteration and Views ====================

    def iterator(self) -> ListCursor[T]:
        """Return a fresh cursor at the start of the list."""
        return ListCursor(self, 0)

    def list_iterator(self, index: int = 0) -> ListCursor[T]:
        """Return a fresh bidirectional cursor positioned before ``index``.

        Raises:
            OutOfBoundsError: If index is not in ``[0, size]``.
        """
        return ListCursor(self, index)

    def sub_list(self, from_index: int, to_index: int) -> ListView[T]:
        """Return a live view of ``[from_index, to_index)``.

        Writes through the view are visible in this list and the other way
        round. Adding or removing through the view goes through this list's
        operations, so its listeners fire.

        Raises:
            OutOfBoundsError: If the range is invalid.
        """
        check_range(from_index, to_index, len(self._elements))
        return ListView(self, from_index, to_index)

    # ==================== Structural Primitives ====================
    # Silent mutations shared with ListView. Each bumps _mod_count once.

    def _insert_all(self, index: int, items: list[T]) -> None:
        self._elements[index:index] = items
        self._mod_count += 1

    def _delete(self, index: int) -> T:
        element = self._elements.pop(index)
        self._mod_count += 1
        return element

    def _filter_range(
        self, start: int, stop: int, predicate: Callable[[Any], bool]
    ) -> int:
        """Drop elements of ``[start, stop)`` failing ``predicate``.

        Returns:
            The number of elements removed.
        """
        window = self._elements[start:stop]
        kept = [item for item in window if predicate(item)]
        removed = len(window) - len(kept)
        if removed:
            # slice assignment keeps the backing list identity seen by listeners
            self._elements[start:stop] = kept
            self._mod_count += 1
        return removed
