"""Deployment constants shared across tooldeck modules."""

# Environment variable holding the global tools path
GLOBAL_TOOLS_ENV_VAR = "TOOLDECK_GLOBAL_TOOLS_PATH"

# Default global tools directory, relative to the user's home directory
DEFAULT_GLOBAL_TOOLS_DIR = ".tooldeck"

# Tool files inside a global tools directory live in this subdirectory
GLOBAL_TOOLS_SUBDIR = "tools"

# Files that mark a global tools directory as carrying its own dependencies
GLOBAL_DEPENDENCY_MANIFESTS = ("requirements.txt", "pyproject.toml")

# Module-level attribute a tool file must define
TOOL_EXPORT_NAME = "tool"

# File extensions the scanner will try to load
TOOL_FILE_EXTENSIONS = (".py",)
