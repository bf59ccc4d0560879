"""Exception types raised by tooldeck.

Path resolution errors (``ConfigError``, ``SecurityError``) are fatal to the
call that raised them. Directory, load and validation errors are absorbed by
the scanner and turned into warnings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tooldeck.tools.types import ValidationFailure


class TooldeckError(Exception):
    """Base class for all tooldeck errors."""


class ConfigError(TooldeckError, ValueError):
    """A resolved tools path is malformed (e.g. not absolute)."""


class SecurityError(TooldeckError, PermissionError):
    """A resolved tools path points into a protected system directory."""


class DirectoryError(TooldeckError, NotADirectoryError):
    """A scan target is missing or is not a directory."""


class ToolLoadError(TooldeckError, ImportError):
    """A tool file could not be imported or exports no usable value."""


class ToolValidationError(TooldeckError, ValueError):
    """A loaded value does not satisfy the tool capability contract."""

    def __init__(self, filename: str, failure: ValidationFailure):
        self.filename = filename
        self.failure = failure
        checks = ", ".join(failure.failed_checks)
        super().__init__(
            f"Tool in {filename} does not match the expected interface "
            f"(failed checks: {checks})"
        )


class ToolNotFoundError(TooldeckError, KeyError):
    """No published tool has the requested name."""

    def __str__(self) -> str:
        return f"Tool not found: {self.args[0]}"


class ToolExecutionError(TooldeckError, RuntimeError):
    """A tool's run callable raised."""
