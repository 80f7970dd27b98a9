"""
Git branch operations - branch, checkout and merge.
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
from ._errors import GitCompositionError

BRANCH_ACTIONS = ("list", "create", "delete", "rename")


@dataclass(frozen=True, kw_only=True)
class BranchRequest(GitRequest):
    operation = Operation.BRANCH
    DEFAULT_MESSAGE = "Branch operation completed"

    action: str = "list"
    name: Optional[str] = None
    new_name: Optional[str] = None
    start_point: Optional[str] = None
    all: bool = False
    remote: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> BranchRequest:
        return cls(
            path=get_string(arguments, "path"),
            action=get_choice(arguments, "action", BRANCH_ACTIONS, default="list"),
            name=get_string(arguments, "name"),
            new_name=get_string(arguments, "newName"),
            start_point=get_string(arguments, "startPoint"),
            all=get_bool(arguments, "all"),
            remote=get_bool(arguments, "remote"),
        )

    def to_argv(self) -> list[str]:
        args = ['branch']

        if self.action == "create":
            args.append(positional("name", self.name))
            if self.start_point:
                args.append(positional("startPoint", self.start_point))
        elif self.action == "delete":
            args.extend(['-d', positional("name", self.name)])
        elif self.action == "rename":
            args.extend(['-m', positional("name", self.name), positional("newName", self.new_name)])
        else:
            if self.all:
                args.append('--all')
            if self.remote:
                args.append('--remote')

        return args


@dataclass(frozen=True, kw_only=True)
class CheckoutRequest(GitRequest):
    operation = Operation.CHECKOUT

    branch: str
    create: bool = False
    force: bool = False
    start_point: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> CheckoutRequest:
        return cls(
            branch=get_string(arguments, "branch", required=True),
            path=get_string(arguments, "path"),
            create=get_bool(arguments, "create"),
            force=get_bool(arguments, "force"),
            start_point=get_string(arguments, "startPoint"),
        )

    def to_argv(self) -> list[str]:
        args = ['checkout']
        if self.create:
            args.append('-b')
        if self.force:
            args.append('--force')
        args.append(positional("branch", self.branch))
        if self.start_point:
            if not self.create:
                raise GitCompositionError("'startPoint' can only be used together with 'create'")
            args.append(positional("startPoint", self.start_point))
        return args

    def default_message(self) -> str:
        return f"Switched to branch '{self.branch}'"


@dataclass(frozen=True, kw_only=True)
class MergeRequest(GitRequest):
    operation = Operation.MERGE
    DEFAULT_MESSAGE = "Merge completed"

    branch: str
    message: Optional[str] = None
    no_ff: bool = False
    squash: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> MergeRequest:
        return cls(
            branch=get_string(arguments, "branch", required=True),
            path=get_string(arguments, "path"),
            message=get_string(arguments, "message"),
            no_ff=get_bool(arguments, "noFf"),
            squash=get_bool(arguments, "squash"),
        )

    def to_argv(self) -> list[str]:
        args = ['merge', positional("branch", self.branch)]
        if self.message:
            args.extend(['-m', self.message])
        if self.no_ff:
            args.append('--no-ff')
        if self.squash:
            args.append('--squash')
        return args


TOOLS = [
    ToolDef(
        name=Operation.BRANCH.tool_name,
        description="Manage branches",
        parameters={
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": list(BRANCH_ACTIONS),
                    "default": "list",
                    "description": "What to do with branches"
                },
                "name": {
                    "type": "string",
                    "description": "Branch name (create, delete, rename)"
                },
                "newName": {
                    "type": "string",
                    "description": "New branch name (for rename)"
                },
                "startPoint": {
                    "type": "string",
                    "description": "Commit or branch the new branch starts at (for create, default: HEAD)"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "all": {
                    "type": "boolean",
                    "default": False,
                    "description": "List local and remote-tracking branches"
                },
                "remote": {
                    "type": "boolean",
                    "default": False,
                    "description": "List remote-tracking branches"
                }
            },
            "required": []
        },
        handler=request_handler(BranchRequest),
        operation=Operation.BRANCH,
    ),
    ToolDef(
        name=Operation.CHECKOUT.tool_name,
        description="Switch branches or restore files",
        parameters={
            "type": "object",
            "properties": {
                "branch": {
                    "type": "string",
                    "description": "Branch or commit to checkout"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "create": {
                    "type": "boolean",
                    "default": False,
                    "description": "Create the branch before switching (-b)"
                },
                "force": {
                    "type": "boolean",
                    "default": False,
                    "description": "Discard local changes when switching"
                },
                "startPoint": {
                    "type": "string",
                    "description": "Starting commit or branch for a created branch (requires create)"
                }
            },
            "required": ["branch"]
        },
        handler=request_handler(CheckoutRequest),
        operation=Operation.CHECKOUT,
    ),
    ToolDef(
        name=Operation.MERGE.tool_name,
        description="Merge branches",
        parameters={
            "type": "object",
            "properties": {
                "branch": {
                    "type": "string",
                    "description": "Branch to merge"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "message": {
                    "type": "string",
                    "description": "Merge commit message"
                },
                "noFf": {
                    "type": "boolean",
                    "default": False,
                    "description": "Always create a merge commit"
                },
                "squash": {
                    "type": "boolean",
                    "default": False,
                    "description": "Squash the merged changes into the working tree"
                }
            },
            "required": ["branch"]
        },
        handler=request_handler(MergeRequest),
        operation=Operation.MERGE,
    ),
]
