"""tooldeck: discover Python tools from global and local folders and serve them.

This package resolves a global tools directory, scans it together with a
project-local tools directory, merges both so that local tools win, and
publishes the result through a small REST API.
"""

from tooldeck.app import create_app

__version__ = "0.1.0"

__all__ = ["create_app", "__version__"]
