"""git-mcp core - shared runtime support for the git tool servers.

This package provides the pieces used by both transports:
- MCP stdio server
- HTTP API

Usage:
    from gitmcp_core import init_server, get_config

    # Load configuration, set up logging and build the tool registry
    registry = init_server()
"""

from pathlib import Path

# Read version from VERSION file
_VERSION_FILE = Path(__file__).parent.parent / "VERSION"
__version__ = _VERSION_FILE.read_text().strip() if _VERSION_FILE.exists() else "1.0.0"


def get_version() -> str:
    """Get the current git-mcp version."""
    return __version__

from gitmcp_core.config import GitMCPConfig, get_config, init_server

__all__ = [
    "__version__",
    "get_version",
    "GitMCPConfig",
    "get_config",
    "init_server",
]
