"""Tool discovery, validation, merging and execution.

This package discovers Python tool files from a global and a local directory,
checks them against the tool capability contract, merges both sources so
that local tools override global ones, and exposes the result for execution.
"""

from tooldeck.tools.discovery import ToolDiscoveryService
from tooldeck.tools.loader import ToolLoader, load_tool_module
from tooldeck.tools.merge import merge_results
from tooldeck.tools.paths import (
    expand_home_path,
    resolve_global_tools_path,
    resolve_local_tools_path,
    validate_global_path,
)
from tooldeck.tools.registry import ToolRegistry
from tooldeck.tools.scanner import SourceScanner
from tooldeck.tools.types import (
    DiscoveredEntry,
    DiscoveryResult,
    DiscoverySummary,
    ResolutionSource,
    ResolvedPath,
    SourceKind,
    ToolDescriptor,
    ValidationFailure,
)
from tooldeck.tools.validation import validate_tool

__all__ = [
    # Services
    "ToolDiscoveryService",
    "SourceScanner",
    "ToolRegistry",
    # Functions
    "expand_home_path",
    "load_tool_module",
    "merge_results",
    "resolve_global_tools_path",
    "resolve_local_tools_path",
    "validate_global_path",
    "validate_tool",
    # Types
    "DiscoveredEntry",
    "DiscoveryResult",
    "DiscoverySummary",
    "ResolutionSource",
    "ResolvedPath",
    "SourceKind",
    "ToolDescriptor",
    "ToolLoader",
    "ValidationFailure",
]
