# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Read-only bidirectional cursor over an ObservableList or ListView."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar, TYPE_CHECKING

from ..exceptions import ConcurrentModificationError, NoSuchElementError
from .bounds import check_position

if TYPE_CHECKING:
    from .core import ObservableList
    from .view import ListView

T = TypeVar('T')


class ListCursor(Iterator, Generic[T]):
    """A cursor positioned between elements of a sequence.

    The cursor starts before the element at ``index``. ``next()`` returns
    the element after the cursor and advances; ``previous()`` steps back
    and returns the element it passed. It is also a plain Python iterator
    running forward to the end.

    The cursor cannot mutate its sequence. If the sequence changes size
    by any other means after the cursor was created, the next move raises
    ConcurrentModificationError.

    Example:
        >>> cursor = ObservableList(3, lambda i: i * 10).list_iterator(1)
        >>> cursor.next()
        10
        >>> cursor.previous()
        10
    """

    __slots__ = ('_seq', '_cursor', '_expected')

    def __init__(self, seq: ObservableList[T] | ListView[T], index: int = 0) -> None:
        """Initialize a ListCursor.

        Args:
            seq: The sequence to walk.
            index: Starting position, in ``[0, len(seq)]``.

        Raises:
            OutOfBoundsError: If index is out of range.
        """
        check_position(index, len(seq))
        self._seq = seq
        self._cursor = index
        self._expected = seq._structure_version()

    def __repr__(self) -> str:
        return f"ListCursor(at={self._cursor})"

    def _check_comodification(self) -> None:
        if self._seq._structure_version() != self._expected:
            raise ConcurrentModificationError(
                "List was structurally modified after the cursor was created"
            )

    def has_next(self) -> bool:
        """True if there is an element after the cursor."""
        return self._cursor < len(self._seq)

    def has_previous(self) -> bool:
        """True if there is an element before the cursor."""
        return self._cursor > 0

    def next_index(self) -> int:
        """Index of the element ``next()`` would return."""
        return self._cursor

    def previous_index(self) -> int:
        """Index of the element ``previous()`` would return, -1 at the start."""
        return self._cursor - 1

    def next(self) -> T:
        """Return the element after the cursor and advance.

        Raises:
            NoSuchElementError: If the cursor is at the end.
            ConcurrentModificationError: If the sequence changed size.
        """
        self._check_comodification()
        if not self.has_next():
            raise NoSuchElementError(f"No element after position {self._cursor}")
        value = self._seq.get(self._cursor)
        self._cursor += 1
        return value

    def previous(self) -> T:
        """Step back and return the element before the cursor.

        Raises:
            NoSuchElementError: If the cursor is at the start.
            ConcurrentModificationError: If the sequence changed size.
        """
        self._check_comodification()
        if not self.has_previous():
            raise NoSuchElementError("No element before position 0")
        self._cursor -= 1
        return self._seq.get(self._cursor)

    def __next__(self) -> Any:
        self._check_comodification()
        if not self.has_next():
            raise StopIteration
        return self.next()
