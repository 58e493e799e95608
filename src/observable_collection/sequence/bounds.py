# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Index validation shared by ObservableList, ListView and ListCursor."""

from __future__ import annotations

from ..exceptions import OutOfBoundsError


def check_index(index: int, size: int) -> None:
    """Validate an element index against ``[0, size)``.

    Raises:
        OutOfBoundsError: If index is out of range.
    """
    if index < 0 or index >= size:
        if size == 0:
            raise OutOfBoundsError(f"Index {index} out of range (list is empty)")
        raise OutOfBoundsError(f"Index {index} out of range (0-{size - 1})")


def check_position(index: int, size: int) -> None:
    """Validate an insertion position against ``[0, size]``.

    Raises:
        OutOfBoundsError: If index is out of range.
    """
    if index < 0 or index > size:
        raise OutOfBoundsError(f"Position {index} out of range (0-{size})")


def check_range(from_index: int, to_index: int, size: int) -> None:
    """Validate a half-open range with ``0 <= from_index <= to_index <= size``.

    Raises:
        OutOfBoundsError: If the range is invalid.
    """
    if from_index < 0 or to_index > size or from_index > to_index:
        raise OutOfBoundsError(
            f"Range [{from_index}:{to_index}) out of bounds for size {size}"
        )
