# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Sequence package - Observable ordered containers.

This package provides the ObservableList class, a mutable list that calls
single-slot listeners when its contents change.

The package is organized into:
- core: Main ObservableList class with access, mutation, and notification
- view: Live range views returned by ObservableList.sub_list
- cursor: Bidirectional read-only cursors returned by list_iterator
- bounds: Index validation shared by the above

Example:
    >>> from observable_collection import ObservableList
    >>> lst = ObservableList(3, lambda i: i)
    >>> lst.add(3)
    True
    >>> lst.to_list()
    [0, 1, 2, 3]
"""

from .core import ObservableList
from .cursor import ListCursor
from .view import ListView

__all__ = ["ObservableList", "ListView", "ListCursor"]
