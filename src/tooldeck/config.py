"""Configuration module for tooldeck using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TooldeckSettings(BaseSettings):
    """Main configuration settings for tooldeck.

    All settings can be overridden via environment variables with the TOOLDECK_
    prefix. For example, TOOLDECK_PORT will override the port setting and
    TOOLDECK_GLOBAL_TOOLS_PATH supplies the global tools directory.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    server_name: str = "tooldeck"

    # Local tools directory (relative to data_dir unless absolute)
    data_dir: str = "."
    tools_dir: str = "tools"

    # Global tools directory; None falls back to ~/.tooldeck
    global_tools_path: str | None = None
    validate_global_path: bool = True

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="TOOLDECK_")

    @property
    def resolved_tools_dir(self) -> Path:
        """Get the full path to the local tools directory."""
        return Path(self.data_dir) / self.tools_dir
