"""Per-path observer registry with one registration per (observer, path)."""

from __future__ import annotations

import logging
from typing import Any

from configstore.types import ChangeHandler, Subscription

logger = logging.getLogger(__name__)

__all__ = ["ObserverRegistry"]


class ObserverRegistry:
    """Handler sequences keyed by exact path string.

    Observers are tracked by identity in a side table owned by the registry;
    the observer object itself is never touched. Each registration is a
    Subscription handle, so removing one observer's handler never disturbs
    another observer's record for the same path.

    Not thread-safe on its own; ConfigStore serialises access.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Subscription]] = {}
        self._index: dict[tuple[int, str], Subscription] = {}

    def _sequence(self, path: str) -> list[Subscription]:
        # Created on first observation and kept even when emptied.
        return self._handlers.setdefault(path, [])

    def add(self, observer: Any, path: str, handler: ChangeHandler) -> bool:
        """Append *handler* for (*observer*, *path*).

        Returns False without changing anything if the pair is already registered;
        the first handler stays active.
        """
        sequence = self._sequence(path)
        key = (id(observer), path)
        if key in self._index:
            logger.debug("Observer %r already registered for '%s', ignoring", observer, path)
            return False
        subscription = Subscription(observer=observer, path=path, handler=handler)
        sequence.append(subscription)
        self._index[key] = subscription
        logger.debug("Registered observer %r for '%s' (%d handlers)", observer, path, len(sequence))
        return True

    def remove(self, observer: Any, path: str) -> bool:
        """Drop the handler registered for (*observer*, *path*).

        Returns False if the pair had no registration.
        """
        sequence = self._sequence(path)
        subscription = self._index.pop((id(observer), path), None)
        if subscription is None:
            logger.debug("Observer %r not registered for '%s', nothing to remove", observer, path)
            return False
        sequence.remove(subscription)
        logger.debug("Removed observer %r from '%s' (%d handlers)", observer, path, len(sequence))
        return True

    def snapshot(self, path: str) -> list[ChangeHandler]:
        """Return the handlers for *path*, most recently registered first.

        The list is a copy; later registry changes do not affect it.
        """
        sequence = self._handlers.get(path)
        if not sequence:
            return []
        return [sub.handler for sub in reversed(sequence)]

    def count(self, path: str) -> int:
        """Number of handlers currently registered for *path*."""
        return len(self._handlers.get(path, ()))

    def has(self, observer: Any, path: str) -> bool:
        return (id(observer), path) in self._index

    def paths(self) -> list[str]:
        """Every path that has ever been observed, in first-observed order."""
        return list(self._handlers)
