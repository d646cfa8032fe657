"""Tests for StoreOptions, strict mode, and the error hierarchy."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from configstore import (
    ConfigError,
    ConfigStore,
    ConfigStoreError,
    ErrorCodes,
    InvalidHandlerError,
    InvalidPathError,
    StoreOptions,
    create_config,
)
from configstore.options import build_options


class TestStoreOptions:
    def test_defaults(self) -> None:
        options = StoreOptions()
        assert options.separator == "."
        assert options.strict is False
        assert options.handler_errors == "raise"

    def test_frozen(self) -> None:
        options = StoreOptions()
        with pytest.raises(ValidationError):
            options.separator = "/"  # type: ignore[misc]

    def test_build_from_instance_with_overrides(self) -> None:
        base = StoreOptions(separator="/")
        merged = build_options(base, strict=True)
        assert merged.separator == "/"
        assert merged.strict is True
        assert base.strict is False

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            create_config(separator="")
        assert exc_info.value.code == ErrorCodes.CONFIG_INVALID
        assert exc_info.value.errors[0]["field"] == "separator"

    def test_unknown_option_rejected(self) -> None:
        with pytest.raises(ConfigError, match="Invalid store options"):
            ConfigStore({"colour": "blue"})

    def test_bad_handler_policy_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            create_config(handler_errors="ignore")
        assert exc_info.value.cause is not None


class TestStrictMode:
    def test_empty_path_rejected(self, strict_store: ConfigStore) -> None:
        with pytest.raises(InvalidPathError, match="non-empty string"):
            strict_store.set_config_property("", 1)

    def test_non_string_path_rejected(self, strict_store: ConfigStore) -> None:
        with pytest.raises(InvalidPathError) as exc_info:
            strict_store.get_config_property(42)  # type: ignore[arg-type]
        assert exc_info.value.path == 42
        assert exc_info.value.code == ErrorCodes.INVALID_PATH

    def test_non_callable_handler_rejected(self, strict_store: ConfigStore) -> None:
        with pytest.raises(InvalidHandlerError) as exc_info:
            strict_store.observe_config(object(), "p", "nope")  # type: ignore[arg-type]
        assert exc_info.value.code == ErrorCodes.INVALID_HANDLER
        assert strict_store.observer_count("p") == 0

    def test_unobserve_validates_path(self, strict_store: ConfigStore) -> None:
        with pytest.raises(InvalidPathError):
            strict_store.unobserve_config(object(), "")

    def test_well_formed_inputs_unchanged(self, strict_store: ConfigStore) -> None:
        """Strict mode keeps absent reads and no-op removals silent."""
        assert strict_store.get_config_property("missing.path") is None
        assert strict_store.unobserve_config(object(), "missing.path") is False


class TestErrors:
    def test_str_format(self) -> None:
        err = InvalidPathError("")
        assert str(err) == "[INVALID_PATH] Property path must be a non-empty string, got ''"

    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ConfigStoreError)
        assert issubclass(InvalidPathError, ConfigStoreError)
        assert issubclass(InvalidHandlerError, ConfigStoreError)

    def test_timestamp_and_details(self) -> None:
        err = ConfigStoreError(code="X", message="boom", details={"k": 1})
        assert err.details == {"k": 1}
        assert err.timestamp

    def test_error_codes_immutable(self) -> None:
        with pytest.raises(AttributeError):
            ErrorCodes().INVALID_PATH = "other"
