"""Core types for the git tool system.

ToolDef describes a single tool (name, description, JSON schema and async
handler). ToolContext carries the per-call execution settings and
ToolResult is what the registry hands back to transports.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ._errors import GitToolError


class Operation(str, Enum):
    """The fixed set of git operations exposed as tools."""

    INIT = "init"
    CLONE = "clone"
    STATUS = "status"
    ADD = "add"
    COMMIT = "commit"
    PUSH = "push"
    PULL = "pull"
    BRANCH = "branch"
    CHECKOUT = "checkout"
    MERGE = "merge"
    LOG = "log"
    DIFF = "diff"
    STASH = "stash"
    REMOTE = "remote"
    TAG = "tag"
    RESET = "reset"

    @property
    def tool_name(self) -> str:
        return f"git_{self.value}"


@dataclass(frozen=True)
class ToolContext:
    """Execution settings shared by every call made through a registry."""

    git_binary: str = "git"
    timeout: float | None = 120.0
    default_cwd: str | None = None

    @classmethod
    def from_config(cls) -> ToolContext:
        """Build a context from the environment-backed configuration."""
        from gitmcp_core.config import get_config

        config = get_config()
        return cls(
            git_binary=config.git_binary,
            timeout=config.git_timeout or None,
            default_cwd=config.default_cwd or None,
        )


ToolHandler = Callable[[dict[str, Any], ToolContext], Awaitable[str]]


@dataclass
class ToolDef:
    """Definition of a single tool."""

    name: str
    description: str
    parameters: dict[str, Any]
    handler: ToolHandler
    operation: Operation | None = None

    def to_mcp_format(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }

    def to_openai_format(self) -> dict[str, Any]:
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }

    def to_claude_format(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.parameters,
        }


@dataclass(frozen=True)
class ToolResult:
    """Outcome of one tool call: output text or a typed error."""

    tool: str
    text: str
    error: GitToolError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> str | None:
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls, tool: str, text: str) -> ToolResult:
        return cls(tool=tool, text=text)

    @classmethod
    def failure(cls, tool: str, error: GitToolError) -> ToolResult:
        return cls(tool=tool, text=error.message, error=error)
