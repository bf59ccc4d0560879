"""Unit tests for the tool capability contract."""

from types import SimpleNamespace

import pytest

from tooldeck.tools import ToolDescriptor, ValidationFailure, validate_tool


def _run(args):
    return "ok"


def test_valid_mapping():
    """Test that a mapping with all required keys becomes a ToolDescriptor."""
    result = validate_tool(
        {
            "name": "echo",
            "description": "Echoes back the input message",
            "input_schema": {"type": "object"},
            "run": _run,
        }
    )

    assert isinstance(result, ToolDescriptor)
    assert result.name == "echo"
    assert result.description == "Echoes back the input message"
    assert result.input_schema == {"type": "object"}
    assert result.run is _run


def test_valid_object_attributes():
    """Test that any object exposing the required attributes is accepted."""
    value = SimpleNamespace(name="echo", input_schema={}, run=_run)

    result = validate_tool(value)

    assert isinstance(result, ToolDescriptor)
    assert result.description is None


def test_tool_descriptor_is_accepted():
    """Test that a ready-made ToolDescriptor passes as is."""
    descriptor = ToolDescriptor(name="echo", input_schema={}, run=_run)

    result = validate_tool(descriptor)

    assert result == descriptor


def test_missing_run():
    """Test that a missing run callable is reported."""
    result = validate_tool({"name": "echo", "input_schema": {}})

    assert isinstance(result, ValidationFailure)
    assert result.failed_checks == ("run",)
    assert result.value_type == "dict"


def test_all_failures_reported():
    """Test that every failing check is listed, not just the first."""
    result = validate_tool({"name": 42, "run": "not callable", "input_schema": None})

    assert isinstance(result, ValidationFailure)
    assert result.failed_checks == ("name", "run", "input_schema")


@pytest.mark.parametrize("value", [None, "echo", 3, True, b"bytes"])
def test_unstructured_values(value):
    """Test that None and primitives fail the structured check."""
    result = validate_tool(value)

    assert isinstance(result, ValidationFailure)
    assert result.failed_checks[0] == "structured"


def test_empty_name_rejected():
    """Test that the name must be a non-empty string."""
    result = validate_tool({"name": "", "input_schema": {}, "run": _run})

    assert isinstance(result, ValidationFailure)
    assert result.failed_checks == ("name",)


def test_non_mapping_schema_rejected():
    """Test that input_schema must be a mapping."""
    result = validate_tool({"name": "echo", "input_schema": ["x"], "run": _run})

    assert isinstance(result, ValidationFailure)
    assert result.failed_checks == ("input_schema",)


def test_non_string_description_dropped():
    """Test that a non-string description is ignored rather than rejected."""
    result = validate_tool(
        {"name": "echo", "description": 5, "input_schema": {}, "run": _run}
    )

    assert isinstance(result, ToolDescriptor)
    assert result.description is None
