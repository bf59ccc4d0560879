"""Resolution and safety checks for tool directory paths.

The global tools path is resolved from, in order of precedence:
1. An explicit override (the ``--global-tools-path`` CLI flag)
2. The ``TOOLDECK_GLOBAL_TOOLS_PATH`` environment value
3. The default ``~/.tooldeck`` directory

The resolved path is refused if it equals or sits under a protected system
directory. Nothing is created on disk and nothing is cached between calls.
"""

import logging
import os
import sys
import tempfile
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from tooldeck.constants import DEFAULT_GLOBAL_TOOLS_DIR
from tooldeck.errors import ConfigError, SecurityError
from tooldeck.tools.types import ResolutionSource, ResolvedPath

logger = logging.getLogger(__name__)

_POSIX_FORBIDDEN = (
    "/",
    "/bin",
    "/sbin",
    "/usr",
    "/usr/bin",
    "/usr/local",
    "/usr/local/bin",
    "/etc",
    "/var",
    "/tmp",
)

_DARWIN_FORBIDDEN = ("/System", "/Library")

_WINDOWS_FORBIDDEN = (
    "C:\\",
    "C:\\Windows",
    "C:\\Program Files",
    "C:\\Program Files (x86)",
)


def forbidden_paths() -> list[PurePath]:
    """Return the protected directories for the current platform."""
    if os.name == "nt":
        paths: list[PurePath] = [PureWindowsPath(p) for p in _WINDOWS_FORBIDDEN]
    else:
        candidates = _POSIX_FORBIDDEN
        if sys.platform == "darwin":
            candidates += _DARWIN_FORBIDDEN
        paths = [PurePosixPath(p) for p in candidates]

    paths.append(PurePath(tempfile.gettempdir()))
    return paths


def expand_home_path(raw: str, home: Path | None = None) -> str:
    """Expand a leading ``~`` or ``~/`` to the home directory.

    Other forms (``~user``, ``~`` in the middle of a path) are left alone.
    """
    if raw == "~" or raw.startswith("~/") or raw.startswith("~" + os.sep):
        home = home if home is not None else Path.home()
        return str(home / raw[2:]) if len(raw) > 1 else str(home)
    return raw


def default_global_tools_path(home: Path | None = None) -> Path:
    home = home if home is not None else Path.home()
    return home / DEFAULT_GLOBAL_TOOLS_DIR


def _absolute(raw: str) -> Path:
    return Path(os.path.abspath(raw))


def _folded(path: PurePath) -> str:
    # Case-insensitive comparison, matching case-insensitive filesystems
    return str(path).lower()


def _is_same_or_nested(path: PurePath, parent: PurePath) -> bool:
    folded_path = _folded(path)
    folded_parent = _folded(parent)
    if folded_path == folded_parent:
        return True

    # Only an exact match rejects the filesystem root itself
    if parent.parent == parent:
        return False

    return folded_path.startswith(folded_parent.rstrip("/\\") + os.sep)


def validate_global_path(path: Path, home: Path | None = None) -> None:
    """Check that a global tools path is safe to use.

    Args:
        path: Path to validate
        home: Home directory; defaults to the current user's

    Raises:
        ConfigError: If the path is not absolute
        SecurityError: If the path is, or is inside, a protected system directory
    """
    if not path.is_absolute():
        raise ConfigError(f"Global tools path must be absolute: {path}")

    for forbidden in forbidden_paths():
        if _is_same_or_nested(path, forbidden):
            raise SecurityError(
                f"Global tools path cannot be in system directory: {path} "
                f"(inside {forbidden})"
            )

    home = home if home is not None else Path.home()
    if not _is_same_or_nested(path, home):
        logger.warning(
            f"Global tools path is outside home directory: {path}. "
            f"Ensure you have proper permissions for this location."
        )


def resolve_global_tools_path(
    explicit_override: str | None = None,
    environment_value: str | None = None,
    *,
    home: Path | None = None,
    validate: bool = True,
) -> ResolvedPath:
    """Resolve the global tools path.

    Args:
        explicit_override: Path given explicitly by the caller (CLI flag)
        environment_value: Value of the global tools environment variable
        home: Home directory used for ``~`` expansion and the default path
        validate: Whether to run the safety checks

    Returns:
        The absolute path, where it came from, and whether it exists

    Raises:
        ConfigError: If the resolved path is not absolute
        SecurityError: If the resolved path is in a protected system directory
    """
    home = home if home is not None else Path.home()

    source: ResolutionSource
    if explicit_override:
        raw = expand_home_path(explicit_override, home)
        source = "explicit-override"
    elif environment_value:
        raw = expand_home_path(environment_value, home)
        source = "environment"
    else:
        raw = str(default_global_tools_path(home))
        source = "default"

    path = _absolute(raw)

    if validate:
        validate_global_path(path, home)

    resolved = ResolvedPath(path=path, resolution_source=source, exists=path.exists())
    logger.debug(
        f"Resolved global tools path {resolved.path} "
        f"(source={resolved.resolution_source}, exists={resolved.exists})"
    )
    return resolved


def resolve_local_tools_path(raw: str | Path, home: Path | None = None) -> Path:
    """Expand and absolutize the local tools directory. No safety checks."""
    return _absolute(expand_home_path(str(raw), home))
