"""Centralized configuration for the git MCP server.

Loads environment variables (and a .env file, if present) and provides a
unified configuration interface.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar

from dotenv import load_dotenv

from gitmcp_core import get_version


@dataclass
class GitMCPConfig:
    """Configuration for the git MCP server."""

    # Git execution
    git_binary: str = "git"
    git_timeout: float = 120.0  # seconds, 0 disables
    default_cwd: str = ""

    # MCP server identity
    server_name: str = "git-mcp"
    server_version: str = "1.0.0"

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: str = ""

    # Logging
    log_level: str = "INFO"

    # Singleton instance
    _instance: ClassVar["GitMCPConfig | None"] = None

    @classmethod
    def get_instance(cls) -> "GitMCPConfig":
        """Get the singleton configuration instance."""
        if cls._instance is None:
            cls._instance = cls._load_from_env()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the loaded configuration. Useful for testing."""
        cls._instance = None

    @classmethod
    def _load_from_env(cls) -> "GitMCPConfig":
        """Load configuration from environment variables."""
        load_dotenv()

        timeout = float(os.getenv("GIT_MCP_TIMEOUT", "120"))
        if timeout < 0:
            raise ValueError(f"GIT_MCP_TIMEOUT must be >= 0, got {timeout}")

        return cls(
            # Git execution
            git_binary=os.getenv("GIT_MCP_GIT_BINARY", "git"),
            git_timeout=timeout,
            default_cwd=os.getenv("GIT_MCP_DEFAULT_CWD", ""),
            # MCP server identity
            server_name=os.getenv("GIT_MCP_SERVER_NAME", "git-mcp"),
            server_version=get_version(),
            # HTTP API
            api_host=os.getenv("GIT_MCP_API_HOST", "0.0.0.0"),
            api_port=int(os.getenv("GIT_MCP_API_PORT", "8000")),
            cors_origins=os.getenv("CORS_ORIGINS", ""),
            # Logging
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def cors_origin_list(self) -> list[str]:
        """CORS origins as a list; empty config allows all origins."""
        if not self.cors_origins:
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


def get_config() -> GitMCPConfig:
    """Get the current configuration."""
    return GitMCPConfig.get_instance()


def init_server(log_level: str | None = None):
    """Initialize shared state for a transport.

    Call this once at startup to:
    1. Load configuration
    2. Initialize logging
    3. Build the ToolRegistry singleton

    Returns:
        The ToolRegistry instance
    """
    from git_tools import ToolRegistry
    from logging_config import get_logger, init_logging

    config = get_config()
    init_logging(console_level=log_level or config.log_level)

    registry = ToolRegistry.get_instance()
    get_logger("server").info(
        f"Loaded {len(registry)} git tools (binary={config.git_binary}, "
        f"timeout={config.git_timeout or 'none'})"
    )
    return registry
