"""
Git stash operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ._arguments import Arguments, GitRequest, get_bool, get_choice, get_int, get_string
from ._base import Operation, ToolDef
from ._dispatch import request_handler

STASH_ACTIONS = ("save", "pop", "list", "apply", "drop", "clear")


@dataclass(frozen=True, kw_only=True)
class StashRequest(GitRequest):
    operation = Operation.STASH
    DEFAULT_MESSAGE = "Stash operation completed"

    action: str = "save"
    message: Optional[str] = None
    index: Optional[int] = None
    include_untracked: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> StashRequest:
        return cls(
            path=get_string(arguments, "path"),
            action=get_choice(arguments, "action", STASH_ACTIONS, default="save"),
            message=get_string(arguments, "message"),
            index=get_int(arguments, "index", minimum=0),
            include_untracked=get_bool(arguments, "includeUntracked"),
        )

    def to_argv(self) -> list[str]:
        args = ['stash']

        if self.action == "save":
            args.append('push')
            if self.message:
                args.extend(['-m', self.message])
            if self.include_untracked:
                args.append('--include-untracked')
        elif self.action in ("pop", "apply", "drop"):
            args.append(self.action)
            if self.index is not None:
                args.append(f'stash@{{{self.index}}}')
        elif self.action == "clear":
            args.append('clear')
        else:
            args.append('list')

        return args


TOOLS = [
    ToolDef(
        name=Operation.STASH.tool_name,
        description="Stash changes",
        parameters={
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": list(STASH_ACTIONS),
                    "default": "save",
                    "description": "Stash action (save runs 'git stash push')"
                },
                "message": {
                    "type": "string",
                    "description": "Stash message (for save)"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "index": {
                    "type": "integer",
                    "minimum": 0,
                    "description": "Stash index for pop, apply and drop (default: latest)"
                },
                "includeUntracked": {
                    "type": "boolean",
                    "default": False,
                    "description": "Also stash untracked files (for save)"
                }
            },
            "required": []
        },
        handler=request_handler(StashRequest),
        operation=Operation.STASH,
    ),
]
