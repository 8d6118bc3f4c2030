"""
Core business logic for the Greeter service.

Everything in here is pure: no I/O, no AWS, no module state. The Lambda
adapter in ``app.py`` owns logging, tracing and metrics.
"""

from typing import Any

from .config import AppConfig
from .exceptions import MissingInputError
from .schemas import GreetingEvent, parse_event

GREETING_TEMPLATE = "Hello, {name}; We are delighted to have you in Version {version}"
STATIC_GREETING_TEMPLATE = "Hello; We are delighted to have you in Version {version}"


def build_greeting(event: GreetingEvent | None, version: str) -> str:
    """Greets the caller by name, failing when no event was delivered."""
    if event is None:
        raise MissingInputError()
    return GREETING_TEMPLATE.format(name=event.name, version=version)


def build_static_greeting(config: AppConfig) -> str:
    """Returns the fixed greeting; the event plays no part in it."""
    if config.static_greeting:
        return config.static_greeting
    return STATIC_GREETING_TEMPLATE.format(version=config.release_version)


def respond(raw_event: Any, config: AppConfig) -> str:
    """
    Produces the response for one invocation according to ``greeting_mode``.

    In ``static`` mode the raw event is never inspected, so even a malformed
    payload gets the fixed greeting.
    """
    if not config.validates_input:
        return build_static_greeting(config)

    event = parse_event(raw_event)
    return build_greeting(event, config.release_version)
