"""
Git tag operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ._arguments import (
    Arguments,
    GitRequest,
    get_bool,
    get_choice,
    get_string,
    positional,
)
from ._base import Operation, ToolDef
from ._dispatch import request_handler

TAG_ACTIONS = ("list", "create", "delete")


@dataclass(frozen=True, kw_only=True)
class TagRequest(GitRequest):
    operation = Operation.TAG
    DEFAULT_MESSAGE = "Tag operation completed"

    action: str = "list"
    name: Optional[str] = None
    message: Optional[str] = None
    annotated: bool = False
    force: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> TagRequest:
        return cls(
            path=get_string(arguments, "path"),
            action=get_choice(arguments, "action", TAG_ACTIONS, default="list"),
            name=get_string(arguments, "name"),
            message=get_string(arguments, "message"),
            annotated=get_bool(arguments, "annotated"),
            force=get_bool(arguments, "force"),
        )

    def to_argv(self) -> list[str]:
        args = ['tag']

        if self.action == "create":
            name = positional("name", self.name)
            # An annotated tag without a message would open an editor
            if self.annotated and self.message:
                args.extend(['-a', name, '-m', self.message])
            else:
                args.append(name)
            if self.force:
                args.append('-f')
        elif self.action == "delete":
            args.extend(['-d', positional("name", self.name)])

        return args


TOOLS = [
    ToolDef(
        name=Operation.TAG.tool_name,
        description="Manage tags",
        parameters={
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": list(TAG_ACTIONS),
                    "default": "list",
                    "description": "What to do with tags"
                },
                "name": {
                    "type": "string",
                    "description": "Tag name (create, delete)"
                },
                "message": {
                    "type": "string",
                    "description": "Tag message (used with annotated)"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "annotated": {
                    "type": "boolean",
                    "default": False,
                    "description": "Create an annotated tag (needs a message)"
                },
                "force": {
                    "type": "boolean",
                    "default": False,
                    "description": "Replace an existing tag"
                }
            },
            "required": []
        },
        handler=request_handler(TagRequest),
        operation=Operation.TAG,
    ),
]
