"""Dynamic loading of tool files.

A loader is any callable that takes the path of a tool file and returns the
value the file exports, or raises ``ToolLoadError``. The scanner only talks
to this interface, so an isolating loader (subprocess, sandbox) can be
swapped in without touching the discovery logic.
"""

import importlib.machinery
import importlib.util
import logging
import sys
import uuid
from pathlib import Path
from typing import Any, Protocol

from tooldeck.constants import TOOL_EXPORT_NAME
from tooldeck.errors import ToolLoadError

logger = logging.getLogger(__name__)


class _NoBytecodeLoader(importlib.machinery.SourceFileLoader):
    """Source loader that never writes __pycache__ into tool directories."""

    def set_data(self, path, data, *, _mode=0o666):
        pass


class ToolLoader(Protocol):
    """Loads one tool file and returns its exported value."""

    def __call__(self, path: Path) -> Any: ...


def load_tool_module(path: Path) -> Any:
    """Import a Python tool file and return its module-level ``tool`` value.

    The file is executed under a unique module name that is removed from
    ``sys.modules`` afterwards, so every call runs the file afresh and two
    files with the same name in different directories never clash. No bytecode
    cache is written next to the file.

    Args:
        path: Path to the ``.py`` file

    Returns:
        The value bound to ``tool`` in the module

    Raises:
        ToolLoadError: If the file cannot be imported, raises while executing,
            or does not define ``tool``
    """
    module_name = f"tooldeck_tool_{path.stem}_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(
        module_name, path, loader=_NoBytecodeLoader(module_name, str(path))
    )
    if spec is None or spec.loader is None:
        raise ToolLoadError(f"Cannot create an import spec for {path.name}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except (Exception, SystemExit) as e:
        # sys.exit() at import time must not end the discovery pass
        raise ToolLoadError(f"Error loading tool from {path.name}: {e}") from e
    finally:
        sys.modules.pop(module_name, None)

    exported = getattr(module, TOOL_EXPORT_NAME, None)
    if exported is None:
        raise ToolLoadError(
            f"Tool in {path.name} does not define a module-level "
            f"'{TOOL_EXPORT_NAME}' value"
        )

    logger.debug(f"Loaded tool module {path.name}")
    return exported
