"""
Module: engine.observers

Purpose:
    Change notification from the partition engine to its host. The host
    subclasses CollageObserver and registers it; the engine keeps weak
    references only, so it never extends the lifetime of a view.

Key Classes:
    - CollageObserver: Base class with no-op notification hooks
    - ObserverRegistry: Weakly-referenced listener list

Dependencies:
    - weakref (std)

Used By:
    - engine.collage.Collage
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Iterator, List

if TYPE_CHECKING:
    from collage_toolkit.core.models import CollageCell, CollageState
    from .collage import Collage

logger = logging.getLogger(__name__)


class CollageObserver:
    """
    Receiver of collage change notifications.

    Override the hooks you need; the defaults do nothing. Hooks run
    synchronously inside the mutating call, after the engine has either
    committed or rolled back.
    """

    def collage_selection_changed(self, collage: Collage, cell: CollageCell) -> None:
        """The selected cell changed."""

    def collage_changed(self, collage: Collage) -> None:
        """The partition changed as a whole (split, merge, reset, rejected resize)."""

    def collage_state_changed(self, collage: Collage, state: CollageState) -> None:
        """
        A resize was committed.

        ``state`` holds only the cells whose frames changed, with their
        new frames, so the host can animate them precisely.
        """


class ObserverRegistry:
    """
    Registered observers held by weak reference.

    Observers that have been garbage collected are dropped silently the
    next time the registry is iterated.
    """

    def __init__(self) -> None:
        self._refs: List[weakref.ReferenceType[CollageObserver]] = []

    def add(self, observer: CollageObserver) -> None:
        """Register ``observer``; registering twice has no effect."""
        if observer in self:
            return
        self._refs.append(weakref.ref(observer))

    def remove(self, observer: CollageObserver) -> None:
        """Unregister ``observer`` if present."""
        self._refs = [ref for ref in self._refs if ref() is not None and ref() is not observer]

    def __contains__(self, observer: object) -> bool:
        return any(ref() is observer for ref in self._refs)

    def __iter__(self) -> Iterator[CollageObserver]:
        alive = []
        for ref in self._refs:
            observer = ref()
            if observer is not None:
                alive.append(observer)
        if len(alive) != len(self._refs):
            logger.debug(f"Dropped {len(self._refs) - len(alive)} collected observer(s)")
            self._refs = [weakref.ref(observer) for observer in alive]
        return iter(alive)

    def __len__(self) -> int:
        return sum(1 for ref in self._refs if ref() is not None)

    # ─────────────────────────────────────────────────────────────────────────
    # Dispatch
    # ─────────────────────────────────────────────────────────────────────────

    def selection_changed(self, collage: Collage, cell: CollageCell) -> None:
        for observer in self:
            observer.collage_selection_changed(collage, cell)

    def changed(self, collage: Collage) -> None:
        for observer in self:
            observer.collage_changed(collage)

    def state_changed(self, collage: Collage, state: CollageState) -> None:
        for observer in self:
            observer.collage_state_changed(collage, state)
