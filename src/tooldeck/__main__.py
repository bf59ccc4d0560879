"""CLI entry point for tooldeck.

This module provides the command-line interface for starting the tooldeck
server. It can be invoked as `tooldeck` (via the script entry point) or
`python -m tooldeck`.
"""

import argparse
import sys

import uvicorn

from tooldeck import __version__, create_app
from tooldeck.config import TooldeckSettings


def main() -> None:
    """Main entry point for the tooldeck CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="tooldeck",
        description="Serve Python tools discovered from global and local folders",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"tooldeck {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via TOOLDECK_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via TOOLDECK_PORT)",
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Base directory for the local tools folder (default: ., can be set via TOOLDECK_DATA_DIR)",
    )

    parser.add_argument(
        "--tools-dir",
        type=str,
        default=None,
        help="Local tools folder (default: tools, can be set via TOOLDECK_TOOLS_DIR)",
    )

    parser.add_argument(
        "--global-tools-path",
        type=str,
        default=None,
        help="Global tools directory; overrides TOOLDECK_GLOBAL_TOOLS_PATH (default: ~/.tooldeck)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via TOOLDECK_LOG_LEVEL)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.data_dir is not None:
        settings_kwargs["data_dir"] = args.data_dir
    if args.tools_dir is not None:
        settings_kwargs["tools_dir"] = args.tools_dir
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = TooldeckSettings(**settings_kwargs)

    app = create_app(settings=settings, global_tools_override=args.global_tools_path)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
