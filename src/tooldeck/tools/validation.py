"""Capability contract checks for loaded tool values."""

from collections.abc import Mapping
from typing import Any

from tooldeck.tools.types import ToolDescriptor, ValidationFailure

_PRIMITIVES = (str, bytes, bytearray, int, float, complex, bool)


def _field(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def validate_tool(value: Any) -> ToolDescriptor | ValidationFailure:
    """Check a loaded value against the tool capability contract.

    The value may be a mapping or any object exposing ``name``, ``run`` and
    ``input_schema``. Every failing check is reported, not just the first.

    Returns:
        A ToolDescriptor on success, otherwise a ValidationFailure naming the
        checks that failed
    """
    value_type = type(value).__name__

    if value is None or isinstance(value, _PRIMITIVES):
        return ValidationFailure(
            value_type=value_type,
            failed_checks=("structured", "name", "run", "input_schema"),
        )

    name = _field(value, "name")
    run = _field(value, "run")
    input_schema = _field(value, "input_schema")
    description = _field(value, "description")

    failed: list[str] = []
    if not isinstance(name, str) or not name:
        failed.append("name")
    if not callable(run):
        failed.append("run")
    if not isinstance(input_schema, Mapping):
        failed.append("input_schema")

    if failed:
        return ValidationFailure(value_type=value_type, failed_checks=tuple(failed))

    return ToolDescriptor(
        name=name,
        description=description if isinstance(description, str) else None,
        input_schema=input_schema,
        run=run,
    )
