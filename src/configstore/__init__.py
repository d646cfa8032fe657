"""configstore - Path-addressed configuration store with change observers.

The module-level functions operate on one process-wide store::

    import configstore

    configstore.set_config_property("hello.world", "hi")
    configstore.get_config_property("hello.world")  # 'hi'

``create_config()`` returns an isolated store with the same methods.
"""

from __future__ import annotations

# Store
from configstore.store import ConfigStore, create_config, get_default_store

# Types
from configstore.types import ChangeHandler, ConfigChange

# Options
from configstore.options import StoreOptions

# Errors
from configstore.errors import (
    ConfigError,
    ConfigStoreError,
    ErrorCodes,
    InvalidHandlerError,
    InvalidPathError,
)

_default = get_default_store()

get_config_property = _default.get_config_property
has_config_property = _default.has_config_property
set_config_property = _default.set_config_property
observe_config = _default.observe_config
unobserve_config = _default.unobserve_config

__version__ = "0.1.0"

__all__ = [
    # Default store operations
    "get_config_property",
    "has_config_property",
    "set_config_property",
    "observe_config",
    "unobserve_config",
    # Store
    "ConfigStore",
    "create_config",
    "get_default_store",
    # Types
    "ConfigChange",
    "ChangeHandler",
    # Options
    "StoreOptions",
    # Errors
    "ErrorCodes",
    "ConfigStoreError",
    "ConfigError",
    "InvalidPathError",
    "InvalidHandlerError",
]
