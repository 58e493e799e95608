# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ObservableList exceptions."""

from __future__ import annotations


class ObservableListError(Exception):
    """Base exception for ObservableList errors."""

    pass


class OutOfBoundsError(ObservableListError, IndexError):
    """Raised when an index falls outside the valid range of an operation."""

    pass


class ConcurrentModificationError(ObservableListError, RuntimeError):
    """Raised when a view or cursor is used after its list changed size elsewhere."""

    pass


class NoSuchElementError(ObservableListError, LookupError):
    """Raised when a cursor is moved past either end of its list."""

    pass
