"""Path-addressed configuration store with synchronous change notification."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Any

from configstore.errors import InvalidHandlerError, InvalidPathError
from configstore.observers import ObserverRegistry
from configstore.options import StoreOptions, build_options
from configstore.tree import ConfigBranch, ensure_parent, find_parent, lookup, split_path
from configstore.types import ChangeHandler, ConfigChange

logger = logging.getLogger(__name__)

__all__ = ["ConfigStore", "create_config", "get_default_store"]


class ConfigStore:
    """A nested value tree plus the observers watching paths in it.

    Every instance is fully isolated: its own tree, its own observer registry,
    its own ``instance_id``. Writes notify the observers of the exact path that
    was written, synchronously and before ``set_config_property`` returns.
    """

    def __init__(self, options: StoreOptions | dict[str, Any] | None = None) -> None:
        """Initialize an empty store.

        Args:
            options: StoreOptions or a dict of option values. Defaults apply when omitted.

        Raises:
            ConfigError: If an option value is invalid.
        """
        self._options = build_options(options)
        self._instance_id = str(uuid.uuid4())
        self._root = ConfigBranch()
        self._observers = ObserverRegistry()
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"ConfigStore(instance_id={self._instance_id!r}, separator={self._options.separator!r})"

    @property
    def instance_id(self) -> str:
        """Unique identifier of this store instance."""
        return self._instance_id

    @property
    def options(self) -> StoreOptions:
        return self._options

    def _check_path(self, path: str) -> None:
        if self._options.strict and (not isinstance(path, str) or not path):
            raise InvalidPathError(path)

    def _segments(self, path: str) -> list[str]:
        self._check_path(path)
        return split_path(path, self._options.separator)

    # ----- Values -----

    def get_config_property(self, path: str, default: Any = None) -> Any:
        """Return the value stored at *path*, or *default* if nothing is there.

        Reading never creates intermediate branches.
        """
        segments = self._segments(path)
        with self._lock:
            return lookup(self._root, segments, default)

    def has_config_property(self, path: str) -> bool:
        """Check whether a value, including None, is stored at *path*."""
        segments = self._segments(path)
        with self._lock:
            parent = find_parent(self._root, segments)
            return parent is not None and segments[-1] in parent

    def set_config_property(self, path: str, value: Any) -> None:
        """Store *value* at *path* and notify the observers of *path*.

        Missing intermediate branches are created, and a leaf standing where a
        branch is needed is overwritten. Handlers run newest-first against a
        snapshot taken after the write, so handlers may observe, unobserve or
        write re-entrantly without affecting the current round.

        Raises:
            Exception: Whatever a handler raises, when ``handler_errors`` is "raise".
        """
        segments = self._segments(path)
        with self._lock:
            parent = ensure_parent(self._root, segments)
            parent[segments[-1]] = value
            handlers = self._observers.snapshot(path)

        if handlers:
            self._notify(handlers, ConfigChange(property=path, value=value))

    def _notify(self, handlers: list[ChangeHandler], change: ConfigChange) -> None:
        for handler in handlers:
            if self._options.handler_errors == "raise":
                handler(change)
                continue
            try:
                handler(change)
            except Exception as e:
                logger.error("Handler error for property '%s': %s", change.property, e, exc_info=True)

    # ----- Observers -----

    def observe_config(self, observer: Any, path: str, handler: ChangeHandler) -> bool:
        """Call *handler* with a ConfigChange whenever *path* is written.

        The observer is only an identity key. One registration per
        (observer, path): a repeat call is a no-op and returns False.

        Raises:
            InvalidPathError: In strict mode, if *path* is empty or not a string.
            InvalidHandlerError: In strict mode, if *handler* is not callable.
        """
        if self._options.strict:
            self._check_path(path)
            if not callable(handler):
                raise InvalidHandlerError(path=path, handler=handler)
        with self._lock:
            return self._observers.add(observer, path, handler)

    def unobserve_config(self, observer: Any, path: str) -> bool:
        """Remove the handler registered for (*observer*, *path*).

        Returns False if there was none.
        """
        self._check_path(path)
        with self._lock:
            return self._observers.remove(observer, path)

    def observer_count(self, path: str) -> int:
        """Number of handlers that a write to *path* would currently call."""
        with self._lock:
            return self._observers.count(path)


def create_config(options: StoreOptions | dict[str, Any] | None = None, **overrides: Any) -> ConfigStore:
    """Return a new store isolated from every other store, the default one included.

    Example::

        store = create_config(separator="/")
        store.set_config_property("db/host", "localhost")
    """
    return ConfigStore(build_options(options, **overrides))


_default_store = ConfigStore()


def get_default_store() -> ConfigStore:
    """Return the process-wide store behind the module-level functions."""
    return _default_store
