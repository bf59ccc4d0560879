"""Tool discovery across the global and local tool directories.

This module provides the ToolDiscoveryService class which handles:
- Resolving the global tools path (explicit override, environment, default)
- Scanning the global and local directories concurrently
- Merging both results so that local tools override global ones
"""

import asyncio
import logging
from pathlib import Path

from tooldeck.constants import GLOBAL_DEPENDENCY_MANIFESTS, GLOBAL_TOOLS_SUBDIR
from tooldeck.tools.merge import merge_results
from tooldeck.tools.paths import resolve_global_tools_path, resolve_local_tools_path
from tooldeck.tools.scanner import SourceScanner
from tooldeck.tools.types import DiscoveryResult, ResolvedPath

logger = logging.getLogger(__name__)


class ToolDiscoveryService:
    """Discovers tools from a global and a local directory.

    Nothing is cached: each call to discover() resolves the global path and
    loads every tool file again.
    """

    def __init__(
        self,
        local_dir: str | Path,
        *,
        global_override: str | None = None,
        environment_value: str | None = None,
        home: Path | None = None,
        validate_global_path: bool = True,
        scanner: SourceScanner | None = None,
    ):
        """Initialize the ToolDiscoveryService.

        Args:
            local_dir: Project-specific tools directory (``~`` is expanded)
            global_override: Explicit global tools path, e.g. from the CLI
            environment_value: Global tools path taken from the environment
            home: Home directory used for ``~`` expansion and the default path
            validate_global_path: Whether to reject unsafe global paths
            scanner: Scanner to use for both directories
        """
        self.local_dir = local_dir
        self.global_override = global_override
        self.environment_value = environment_value
        self.home = home
        self.validate_global_path = validate_global_path
        self.scanner = scanner or SourceScanner()
        self.last_resolved: ResolvedPath | None = None

    def resolve_global(self) -> ResolvedPath:
        """Resolve the global tools path.

        Raises:
            ConfigError: If the resolved path is not absolute
            SecurityError: If the resolved path is in a protected directory
        """
        resolved = resolve_global_tools_path(
            self.global_override,
            self.environment_value,
            home=self.home,
            validate=self.validate_global_path,
        )
        self.last_resolved = resolved
        return resolved

    def local_tools_dir(self) -> Path:
        return resolve_local_tools_path(self.local_dir, self.home)

    async def discover(self) -> DiscoveryResult:
        """Run one discovery pass over both sources.

        The global path is resolved first; an unsafe path aborts the pass.
        Both directories are then scanned concurrently and merged.

        Returns:
            The merged DiscoveryResult

        Raises:
            ConfigError: If the global path is not absolute
            SecurityError: If the global path is in a protected directory
        """
        resolved = self.resolve_global()
        local_dir = self.local_tools_dir()

        global_result, local_result = await asyncio.gather(
            asyncio.to_thread(self._discover_global, resolved),
            asyncio.to_thread(self.scanner.scan, local_dir, "local"),
        )

        merged = merge_results(global_result, local_result)
        logger.info(
            f"Found {merged.summary.global_count} global + "
            f"{merged.summary.local_count} local tools "
            f"({merged.summary.total} total)"
        )
        if merged.summary.conflict_names:
            logger.info(
                f"{len(merged.summary.conflict_names)} conflicts resolved "
                f"(local tools override global): "
                f"{', '.join(merged.summary.conflict_names)}"
            )
        return merged

    def _discover_global(self, resolved: ResolvedPath) -> DiscoveryResult:
        if not resolved.exists:
            message = f"Global tools directory not found: {resolved.path}"
            logger.warning(message)
            return DiscoveryResult.empty(warnings=[message])

        tools_dir = resolved.path / GLOBAL_TOOLS_SUBDIR
        if not tools_dir.is_dir():
            # A global directory without a tools folder simply has no tools
            logger.debug(f"No {GLOBAL_TOOLS_SUBDIR}/ folder in {resolved.path}")
            return DiscoveryResult.empty()

        result = self.scanner.scan(tools_dir, "global")
        if result.entries:
            self._check_dependencies(resolved.path, result)
        return result

    def _check_dependencies(self, root: Path, result: DiscoveryResult) -> None:
        if any((root / name).is_file() for name in GLOBAL_DEPENDENCY_MANIFESTS):
            logger.debug(
                f"Global tools dependency manifest present: "
                f"{len(result.entries)} tools"
            )
            return

        logger.warning(
            f"Global tools directory {root} has no "
            f"{' or '.join(GLOBAL_DEPENDENCY_MANIFESTS)}; "
            f"tools may fail to import their dependencies"
        )
