"""Store behaviour options and their validation."""

from __future__ import annotations

from typing import Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from configstore.errors import ConfigError

__all__ = ["StoreOptions", "build_options"]


class StoreOptions(BaseModel):
    """Options controlling how a ConfigStore parses paths and dispatches changes.

    Attributes:
        separator: Delimiter between path segments.
        strict: Reject empty or non-string paths and non-callable handlers.
        handler_errors: "raise" propagates a failing handler's exception out of
            the write; "log" logs it and continues with the next handler.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    separator: str = Field(default=".", min_length=1)
    strict: bool = False
    handler_errors: Literal["raise", "log"] = "raise"


def build_options(options: StoreOptions | dict[str, Any] | None = None, **overrides: Any) -> StoreOptions:
    """Build StoreOptions from an instance, a plain dict, and keyword overrides.

    Raises:
        ConfigError: If any option value fails validation.
    """
    if isinstance(options, StoreOptions):
        if not overrides:
            return options
        data = {**options.model_dump(), **overrides}
    else:
        data = {**(options or {}), **overrides}

    try:
        return StoreOptions.model_validate(data)
    except pydantic.ValidationError as e:
        errors = [
            {
                "field": ".".join(str(loc) for loc in err["loc"]),
                "code": err["type"],
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        raise ConfigError(message="Invalid store options", errors=errors, cause=e) from e
