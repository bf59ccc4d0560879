"""Single-directory tool scanning.

This module provides the SourceScanner class which turns one directory of
tool files into a DiscoveryResult. Bad files never abort a scan: each load or
validation failure is logged, recorded as a warning, and the file is skipped.
"""

import logging
from pathlib import Path

from tooldeck.constants import TOOL_FILE_EXTENSIONS
from tooldeck.errors import DirectoryError, ToolValidationError
from tooldeck.tools.loader import ToolLoader, load_tool_module
from tooldeck.tools.types import (
    DiscoveredEntry,
    DiscoveryResult,
    SourceKind,
    ToolDescriptor,
    ValidationFailure,
)
from tooldeck.tools.validation import validate_tool

logger = logging.getLogger(__name__)


class SourceScanner:
    """Discovers the tools defined in one directory.

    The scanner is stateless between calls; every scan loads each file again.
    """

    def __init__(
        self,
        loader: ToolLoader = load_tool_module,
        extensions: tuple[str, ...] = TOOL_FILE_EXTENSIONS,
    ):
        """Initialize the SourceScanner.

        Args:
            loader: Callable that loads a tool file and returns its export
            extensions: File extensions considered loadable
        """
        self.loader = loader
        self.extensions = extensions

    def scan(self, directory: Path, source_kind: SourceKind) -> DiscoveryResult:
        """Scan a directory for tool files.

        Files are visited in directory listing order and kept in that order.
        A missing directory, or a path that is not a directory, yields an
        empty result with a warning.

        Args:
            directory: Directory to scan
            source_kind: Whether this directory is the global or local source

        Returns:
            DiscoveryResult with one entry per valid tool file and no conflicts
        """
        directory = Path(directory).absolute()

        try:
            self._check_directory(directory)
            candidates = self._list_directory(directory)
        except DirectoryError as e:
            message = f"{e}. Continuing with no {source_kind} tools loaded"
            logger.warning(message)
            return DiscoveryResult.empty(warnings=[message])

        entries: list[DiscoveredEntry] = []
        warnings: list[str] = []

        for file_path in candidates:
            if not self._is_tool_file(file_path):
                continue

            try:
                tool = self._load_tool(file_path)
            except ToolValidationError as e:
                logger.warning(str(e))
                warnings.append(str(e))
                continue
            except (Exception, SystemExit) as e:
                message = f"Failed to load tool from {file_path.name}: {e}"
                logger.warning(message)
                warnings.append(message)
                continue

            entries.append(
                DiscoveredEntry(
                    tool=tool,
                    source_kind=source_kind,
                    source_directory=directory,
                    origin_file=file_path.name,
                )
            )

        logger.debug(f"Found {len(entries)} {source_kind} tools in {directory}")
        return DiscoveryResult.from_entries(entries, warnings=warnings)

    def _check_directory(self, directory: Path) -> None:
        if not directory.exists():
            raise DirectoryError(f"Tools path does not exist: {directory}")
        if not directory.is_dir():
            raise DirectoryError(f"Tools path is not a directory: {directory}")

    def _list_directory(self, directory: Path) -> list[Path]:
        try:
            return list(directory.iterdir())
        except OSError as e:
            raise DirectoryError(f"Tools path cannot be listed: {directory} ({e})") from e

    def _is_tool_file(self, file_path: Path) -> bool:
        return file_path.suffix in self.extensions and file_path.is_file()

    def _load_tool(self, file_path: Path) -> ToolDescriptor:
        value = self.loader(file_path)
        checked = validate_tool(value)
        if isinstance(checked, ValidationFailure):
            raise ToolValidationError(file_path.name, checked)
        return checked
