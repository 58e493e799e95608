# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Observable-Collection - Ordered lists that report their changes.

A lightweight, zero-dependency library providing a list container with
single-slot change, add, remove, and clear listeners.
"""

__version__ = "0.1.0"

from .exceptions import (
    ConcurrentModificationError,
    NoSuchElementError,
    ObservableListError,
    OutOfBoundsError,
)
from .listeners import AddListener, ChangeListener, ClearListener, RemoveListener
from .sequence import ListCursor, ListView, ObservableList

__all__ = [
    # Core classes
    "ObservableList",
    "ListView",
    "ListCursor",
    # Listener types
    "ChangeListener",
    "AddListener",
    "RemoveListener",
    "ClearListener",
    # Exceptions
    "ObservableListError",
    "OutOfBoundsError",
    "ConcurrentModificationError",
    "NoSuchElementError",
]
