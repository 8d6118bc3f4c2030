# In src/greeter/schemas.py

from collections.abc import Mapping
from typing import Any, TypedDict

import pydantic
from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import InvalidEventError

# --- Static Type Hinting (for mypy and IDEs) ---


class GreetingEventDict(TypedDict, total=False):
    """The JSON shape the runtime delivers: ``{"name": "<string>"}``."""

    name: str


# --- Runtime Validation (using Pydantic) ---


class GreetingEvent(BaseModel):
    """
    Pydantic model for a single greeting request.

    A missing or null ``name`` becomes the empty string and unknown keys are
    dropped, matching how the event has always been decoded.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def null_name_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


def parse_event(raw: Any) -> GreetingEvent | None:
    """
    Validates a raw runtime event.

    ``None`` is passed through untouched so callers decide whether an absent
    event is an error. Anything that is not a JSON object, or an object that
    fails validation, raises InvalidEventError.
    """
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise InvalidEventError(
            f"Event must be a JSON object, got {type(raw).__name__}",
            context={"event_type": type(raw).__name__},
        )
    try:
        return GreetingEvent.model_validate(dict(raw))
    except pydantic.ValidationError as e:
        raise InvalidEventError(
            "Event failed schema validation",
            errors=e.errors(include_url=False, include_input=False),
        ) from e
