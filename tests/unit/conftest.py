"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import types
import uuid

import pytest

# The handler module reads its configuration at import time, so the
# environment has to be deterministic before any test module imports it.
os.environ["POWERTOOLS_SERVICE_NAME"] = "greeter-test"
os.environ["POWERTOOLS_TRACE_DISABLED"] = "true"
os.environ["POWERTOOLS_METRICS_NAMESPACE"] = "GreeterTest"
os.environ["SERVICE_NAME"] = "greeter-test"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "INFO"
os.environ["GREETING_MODE"] = "validating"
os.environ["RELEASE_VERSION"] = "1.1.2"
os.environ.pop("STATIC_GREETING", None)

from greeter.config import AppConfig  # noqa: E402


# ---------- Minimal, realistic dummy events ---------- #
@pytest.fixture
def named_event() -> dict:
    """What the runtime hands over for ``{"name": "Ada"}``."""
    return {"name": "Ada"}


@pytest.fixture
def lambda_context():
    """A *very* small stand-in for the LambdaContext object."""
    return types.SimpleNamespace(
        function_name="greeter-test",
        memory_limit_in_mb=128,
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:greeter-test",
        aws_request_id="req-" + uuid.uuid4().hex,
        get_remaining_time_in_millis=lambda: 3000,
    )


@pytest.fixture
def make_config():
    """Builds an AppConfig without touching the environment."""

    def _make(**overrides) -> AppConfig:
        values = {
            "service_name": "greeter-test",
            "environment": "test",
            "log_level": "INFO",
            "metrics_namespace": "GreeterTest",
            "greeting_mode": "validating",
            "release_version": "1.1.2",
            "static_greeting": None,
        }
        values.update(overrides)
        return AppConfig(**values)

    return _make
