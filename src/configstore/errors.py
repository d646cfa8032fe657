"""Error hierarchy for the configstore package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ConfigStoreError",
    "ConfigError",
    "InvalidPathError",
    "InvalidHandlerError",
    "ErrorCodes",
]


class ConfigStoreError(Exception):
    """Base error for all configstore errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigError(ConfigStoreError):
    """Raised when store options are invalid."""

    def __init__(
        self,
        message: str = "Invalid store options",
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="CONFIG_INVALID",
            message=message,
            details={"errors": errors or []},
            **kwargs,
        )

    @property
    def errors(self) -> list[dict[str, Any]]:
        """Field-level validation errors, each with 'field', 'code', 'message' keys."""
        return self.details["errors"]


class InvalidPathError(ConfigStoreError):
    """Raised in strict mode when a property path is not a non-empty string."""

    def __init__(self, path: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH",
            message=f"Property path must be a non-empty string, got {path!r}",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> Any:
        """The rejected path."""
        return self.details["path"]


class InvalidHandlerError(ConfigStoreError):
    """Raised in strict mode when an observer handler is not callable."""

    def __init__(self, path: str, handler: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_HANDLER",
            message=f"Handler for '{path}' is not callable: {type(handler).__name__}",
            details={"path": path, "handler": handler},
            **kwargs,
        )


class ErrorCodes:
    """All configstore error codes as constants.

    Example:
        if error.code == ErrorCodes.INVALID_PATH:
            handle_bad_path()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_PATH = "INVALID_PATH"
    INVALID_HANDLER = "INVALID_HANDLER"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
