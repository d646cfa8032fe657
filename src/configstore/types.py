"""Store types: ConfigChange, Subscription."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "ConfigChange",
    "ChangeHandler",
    "Subscription",
]


@dataclass(frozen=True)
class ConfigChange:
    """Notification record passed to a handler after a write.

    Attributes:
        property: The full path that was written, exactly as given to the store.
        value: The written value, by identity.
    """

    property: str
    value: Any


ChangeHandler = Callable[[ConfigChange], Any]


@dataclass(eq=False)
class Subscription:
    """One observer's registration for one path.

    Compared by identity, so a handler sequence can drop this exact entry
    regardless of where earlier removals have shifted it.
    """

    observer: Any
    path: str
    handler: ChangeHandler
