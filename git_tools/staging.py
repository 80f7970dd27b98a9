"""
Git staging operations - add and reset.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._arguments import (
    Arguments,
    GitRequest,
    get_bool,
    get_choice,
    get_string,
    get_string_list,
    positional,
)
from ._base import Operation, ToolDef
from ._dispatch import request_handler

RESET_MODES = ("soft", "mixed", "hard")


@dataclass(frozen=True, kw_only=True)
class AddRequest(GitRequest):
    operation = Operation.ADD
    DEFAULT_MESSAGE = "Files added to staging area"

    files: list[str] = field(default_factory=list)
    all: bool = False
    update: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> AddRequest:
        return cls(
            path=get_string(arguments, "path"),
            files=get_string_list(arguments, "files"),
            all=get_bool(arguments, "all"),
            update=get_bool(arguments, "update"),
        )

    def to_argv(self) -> list[str]:
        args = ['add']
        if self.all:
            args.append('--all')
        elif self.update:
            args.append('--update')
        elif self.files:
            args.extend(positional("files", f) for f in self.files)
        else:
            args.append('.')
        return args


@dataclass(frozen=True, kw_only=True)
class ResetRequest(GitRequest):
    operation = Operation.RESET
    DEFAULT_MESSAGE = "Reset completed"

    mode: str = "mixed"
    commit: str = "HEAD"

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> ResetRequest:
        return cls(
            path=get_string(arguments, "path"),
            mode=get_choice(arguments, "mode", RESET_MODES, default="mixed"),
            commit=get_string(arguments, "commit", default="HEAD"),
        )

    def to_argv(self) -> list[str]:
        return ['reset', f'--{self.mode}', positional("commit", self.commit)]


TOOLS = [
    ToolDef(
        name=Operation.ADD.tool_name,
        description="Add files to staging area",
        parameters={
            "type": "object",
            "properties": {
                "files": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Files to add (default: everything under the repository path)"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "all": {
                    "type": "boolean",
                    "default": False,
                    "description": "Stage all changes including deletions (--all)"
                },
                "update": {
                    "type": "boolean",
                    "default": False,
                    "description": "Stage modifications and deletions of tracked files only (--update)"
                }
            },
            "required": []
        },
        handler=request_handler(AddRequest),
        operation=Operation.ADD,
    ),
    ToolDef(
        name=Operation.RESET.tool_name,
        description="Reset current HEAD to specified state",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "mode": {
                    "type": "string",
                    "enum": list(RESET_MODES),
                    "default": "mixed",
                    "description": "Reset mode (hard discards working tree changes)"
                },
                "commit": {
                    "type": "string",
                    "default": "HEAD",
                    "description": "Commit to reset to"
                }
            },
            "required": []
        },
        handler=request_handler(ResetRequest),
        operation=Operation.RESET,
    ),
]
