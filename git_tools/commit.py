"""
Git commit and log operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ._arguments import Arguments, GitRequest, get_bool, get_int, get_string
from ._base import Operation, ToolDef
from ._dispatch import request_handler


@dataclass(frozen=True, kw_only=True)
class CommitRequest(GitRequest):
    operation = Operation.COMMIT
    DEFAULT_MESSAGE = "Changes committed"

    message: str
    all: bool = False
    amend: bool = False
    author: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> CommitRequest:
        return cls(
            message=get_string(arguments, "message", required=True),
            path=get_string(arguments, "path"),
            all=get_bool(arguments, "all"),
            amend=get_bool(arguments, "amend"),
            author=get_string(arguments, "author"),
        )

    def to_argv(self) -> list[str]:
        # The message is its own token, so quotes and shell syntax stay literal
        args = ['commit', '-m', self.message]
        if self.all:
            args.append('--all')
        if self.amend:
            args.append('--amend')
        if self.author:
            args.append(f'--author={self.author}')
        return args


@dataclass(frozen=True, kw_only=True)
class LogRequest(GitRequest):
    operation = Operation.LOG
    DEFAULT_MESSAGE = "No commits found"

    limit: int = 10
    oneline: bool = False
    graph: bool = False
    author: Optional[str] = None
    since: Optional[str] = None
    until: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> LogRequest:
        return cls(
            path=get_string(arguments, "path"),
            limit=get_int(arguments, "limit", default=10, minimum=0),
            oneline=get_bool(arguments, "oneline"),
            graph=get_bool(arguments, "graph"),
            author=get_string(arguments, "author"),
            since=get_string(arguments, "since"),
            until=get_string(arguments, "until"),
        )

    def to_argv(self) -> list[str]:
        args = ['log']
        # 0 means no limit
        if self.limit:
            args.append(f'-{self.limit}')
        if self.oneline:
            args.append('--oneline')
        if self.graph:
            args.append('--graph')
        if self.author:
            args.append(f'--author={self.author}')
        if self.since:
            args.append(f'--since={self.since}')
        if self.until:
            args.append(f'--until={self.until}')
        return args


TOOLS = [
    ToolDef(
        name=Operation.COMMIT.tool_name,
        description="Commit changes",
        parameters={
            "type": "object",
            "properties": {
                "message": {
                    "type": "string",
                    "description": "Commit message"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "all": {
                    "type": "boolean",
                    "default": False,
                    "description": "Stage all modified and deleted files before committing"
                },
                "amend": {
                    "type": "boolean",
                    "default": False,
                    "description": "Amend the last commit"
                },
                "author": {
                    "type": "string",
                    "description": "Author name and email (e.g., 'Jane Doe <jane@example.com>')"
                }
            },
            "required": ["message"]
        },
        handler=request_handler(CommitRequest),
        operation=Operation.COMMIT,
    ),
    ToolDef(
        name=Operation.LOG.tool_name,
        description="Show commit logs",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "limit": {
                    "type": "integer",
                    "default": 10,
                    "minimum": 0,
                    "description": "Number of commits to show (0: no limit)"
                },
                "oneline": {
                    "type": "boolean",
                    "default": False,
                    "description": "One line per commit"
                },
                "graph": {
                    "type": "boolean",
                    "default": False,
                    "description": "Draw the commit graph"
                },
                "author": {
                    "type": "string",
                    "description": "Filter by author"
                },
                "since": {
                    "type": "string",
                    "description": "Show commits since date"
                },
                "until": {
                    "type": "string",
                    "description": "Show commits until date"
                }
            },
            "required": []
        },
        handler=request_handler(LogRequest),
        operation=Operation.LOG,
    ),
]
