# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Listener slots for ObservableList.

Each event kind (change, add, remove, clear) has exactly one slot. Binding
a callback replaces whatever was bound before; the replaced callback is
dropped without being called. Dispatch helpers invoke a slot only when it
is bound.

Callback signatures:
    - change: ``(elements, old_value, new_value)``
    - add: ``(elements, added)``
    - remove: ``(elements, removed)``
    - clear: ``(elements)``

``elements`` is the live backing list of the ObservableList. Callbacks
must treat it as read-only.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

ChangeListener = Callable[[list, Any, Any], None]
AddListener = Callable[[list, list], None]
RemoveListener = Callable[[list, list], None]
ClearListener = Callable[[list], None]


class ListenerMixin:
    """Single-slot listener bindings and their dispatch helpers.

    Subclasses must declare the ``_on_change``, ``_on_add``, ``_on_remove``
    and ``_on_clear`` slots and call ``_init_listeners()`` from their
    constructor.
    """

    __slots__ = ()

    _on_change: ChangeListener | None
    _on_add: AddListener | None
    _on_remove: RemoveListener | None
    _on_clear: ClearListener | None

    def _init_listeners(self) -> None:
        self._on_change = None
        self._on_add = None
        self._on_remove = None
        self._on_clear = None

    # ==================== Binding ====================

    def add_on_change_listener(self, on_change: ChangeListener) -> None:
        """Bind the listener called when an element is replaced.

        Args:
            on_change: Callable receiving ``(elements, old_value, new_value)``.
                Called after the slot has been written, only when the old and
                new values differ.
        """
        logger.debug("binding change listener %r", on_change)
        self._on_change = on_change

    def remove_on_change_listener(self) -> None:
        """Unbind the change listener, if any."""
        logger.debug("unbinding change listener")
        self._on_change = None

    def add_on_add_listener(self, on_add: AddListener) -> None:
        """Bind the listener called before elements are added.

        Args:
            on_add: Callable receiving ``(elements, added)``.
        """
        logger.debug("binding add listener %r", on_add)
        self._on_add = on_add

    def remove_on_add_listener(self) -> None:
        """Unbind the add listener, if any."""
        logger.debug("unbinding add listener")
        self._on_add = None

    def add_on_remove_listener(self, on_remove: RemoveListener) -> None:
        """Bind the listener called before elements are removed.

        Args:
            on_remove: Callable receiving ``(elements, removed)``.
        """
        logger.debug("binding remove listener %r", on_remove)
        self._on_remove = on_remove

    def remove_on_remove_listener(self) -> None:
        """Unbind the remove listener, if any."""
        logger.debug("unbinding remove listener")
        self._on_remove = None

    def add_on_clear_listener(self, on_clear: ClearListener) -> None:
        """Bind the listener called before the list is cleared.

        Args:
            on_clear: Callable receiving ``(elements)``.
        """
        logger.debug("binding clear listener %r", on_clear)
        self._on_clear = on_clear

    def remove_on_clear_listener(self) -> None:
        """Unbind the clear listener, if any."""
        logger.debug("unbinding clear listener")
        self._on_clear = None

    # ==================== Dispatch ====================

    def _notify_change(self, elements: list, old_value: Any, new_value: Any) -> None:
        if self._on_change is not None:
            logger.debug("change: %r -> %r", old_value, new_value)
            self._on_change(elements, old_value, new_value)

    def _notify_add(self, elements: list, added: list) -> None:
        if self._on_add is not None:
            logger.debug("add: %d element(s)", len(added))
            self._on_add(elements, added)

    def _notify_remove(self, elements: list, removed: list) -> None:
        if self._on_remove is not None:
            logger.debug("remove: %d element(s)", len(removed))
            self._on_remove(elements, removed)

    def _notify_clear(self, elements: list) -> None:
        if self._on_clear is not None:
            logger.debug("clear: %d element(s)", len(elements))
            self._on_clear(elements)
