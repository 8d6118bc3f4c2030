# tests/unit/test_schemas.py

import pydantic
import pytest

from greeter.exceptions import InvalidEventError
from greeter.schemas import GreetingEvent, parse_event


class TestGreetingEvent:
    """Test suite for the GreetingEvent Pydantic model."""

    def test_valid_event(self):
        parsed = GreetingEvent.model_validate({"name": "Ada"})
        assert parsed.name == "Ada"

    def test_missing_name_defaults_to_empty(self):
        parsed = GreetingEvent.model_validate({})
        assert parsed.name == ""

    def test_null_name_becomes_empty(self):
        parsed = GreetingEvent.model_validate({"name": None})
        assert parsed.name == ""

    def test_unknown_fields_are_ignored(self):
        parsed = GreetingEvent.model_validate({"name": "Ada", "surname": "Lovelace"})
        assert parsed.model_dump() == {"name": "Ada"}

    def test_non_string_name_is_rejected(self):
        with pytest.raises(pydantic.ValidationError) as exc_info:
            GreetingEvent.model_validate({"name": 123})

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("name",)

    def test_model_is_frozen(self):
        parsed = GreetingEvent(name="Ada")
        with pytest.raises(pydantic.ValidationError):
            parsed.name = "Grace"


class TestParseEvent:
    """Test suite for the parse_event adapter."""

    def test_none_passes_through(self):
        assert parse_event(None) is None

    def test_mapping_is_parsed(self):
        parsed = parse_event({"name": "Ada"})
        assert isinstance(parsed, GreetingEvent)
        assert parsed.name == "Ada"

    @pytest.mark.parametrize("raw", ["Ada", 42, ["Ada"], True])
    def test_non_object_raises_invalid_event(self, raw):
        with pytest.raises(InvalidEventError) as exc_info:
            parse_event(raw)

        assert exc_info.value.error_code == "INVALID_EVENT"
        assert exc_info.value.context["event_type"] == type(raw).__name__

    def test_schema_failure_carries_errors(self):
        with pytest.raises(InvalidEventError) as exc_info:
            parse_event({"name": 42})

        error = exc_info.value
        assert isinstance(error.__cause__, pydantic.ValidationError)
        assert error.context["errors"][0]["loc"] == ("name",)
        # The raw value never ends up in the log context.
        assert "input" not in error.context["errors"][0]
