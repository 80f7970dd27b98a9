"""
Git status and diff operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ._arguments import Arguments, GitRequest, get_bool, get_string, positional
from ._base import Operation, ToolDef
from ._dispatch import request_handler


@dataclass(frozen=True, kw_only=True)
class StatusRequest(GitRequest):
    operation = Operation.STATUS
    DEFAULT_MESSAGE = "Nothing to report"

    short: bool = False
    branch: bool = True
    porcelain: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> StatusRequest:
        return cls(
            path=get_string(arguments, "path"),
            short=get_bool(arguments, "short"),
            branch=get_bool(arguments, "branch", default=True),
            porcelain=get_bool(arguments, "porcelain"),
        )

    def to_argv(self) -> list[str]:
        args = ['status']
        if self.short:
            args.append('--short')
        if self.branch:
            args.append('--branch')
        if self.porcelain:
            args.append('--porcelain')
        return args


@dataclass(frozen=True, kw_only=True)
class DiffRequest(GitRequest):
    operation = Operation.DIFF
    DEFAULT_MESSAGE = "No differences found"

    cached: bool = False
    stat: bool = False
    name_only: bool = False
    commit: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> DiffRequest:
        return cls(
            path=get_string(arguments, "path"),
            cached=get_bool(arguments, "cached"),
            stat=get_bool(arguments, "stat"),
            name_only=get_bool(arguments, "nameOnly"),
            commit=get_string(arguments, "commit"),
        )

    def to_argv(self) -> list[str]:
        args = ['diff']
        if self.cached:
            args.append('--cached')
        if self.stat:
            args.append('--stat')
        if self.name_only:
            args.append('--name-only')
        if self.commit:
            args.append(positional("commit", self.commit))
        return args


TOOLS = [
    ToolDef(
        name=Operation.STATUS.tool_name,
        description="Show working tree status",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "short": {
                    "type": "boolean",
                    "default": False,
                    "description": "Give the output in the short format"
                },
                "branch": {
                    "type": "boolean",
                    "default": True,
                    "description": "Show branch and tracking info"
                },
                "porcelain": {
                    "type": "boolean",
                    "default": False,
                    "description": "Machine-readable output"
                }
            },
            "required": []
        },
        handler=request_handler(StatusRequest),
        operation=Operation.STATUS,
    ),
    ToolDef(
        name=Operation.DIFF.tool_name,
        description="Show changes between commits",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "cached": {
                    "type": "boolean",
                    "default": False,
                    "description": "Show staged changes instead of unstaged"
                },
                "commit": {
                    "type": "string",
                    "description": "Specific commit to diff"
                },
                "stat": {
                    "type": "boolean",
                    "default": False,
                    "description": "Show a diffstat instead of the patch"
                },
                "nameOnly": {
                    "type": "boolean",
                    "default": False,
                    "description": "Show only names of changed files"
                }
            },
            "required": []
        },
        handler=request_handler(DiffRequest),
        operation=Operation.DIFF,
    ),
]
