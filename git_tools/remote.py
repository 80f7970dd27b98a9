"""
Git remote operations - push, pull and remote management.

Credentials are not handled here; git uses whatever helper or SSH agent
the environment provides, and prompts are disabled by the runner.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ._arguments import (
    Arguments,
    GitRequest,
    get_bool,
    get_choice,
    get_optional_bool,
    get_string,
    positional,
)
from ._base import Operation, ToolDef
from ._dispatch import request_handler
from ._errors import GitCompositionError

REMOTE_ACTIONS = ("list", "add", "remove", "show", "set-url")


@dataclass(frozen=True, kw_only=True)
class PushRequest(GitRequest):
    operation = Operation.PUSH
    DEFAULT_MESSAGE = "Push completed successfully"

    remote: str = "origin"
    branch: Optional[str] = None
    force: bool = False
    set_upstream: bool = False
    tags: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> PushRequest:
        return cls(
            path=get_string(arguments, "path"),
            remote=get_string(arguments, "remote", default="origin"),
            branch=get_string(arguments, "branch"),
            force=get_bool(arguments, "force"),
            set_upstream=get_bool(arguments, "setUpstream"),
            tags=get_bool(arguments, "tags"),
        )

    def to_argv(self) -> list[str]:
        args = ['push']
        if self.force:
            args.append('--force')
        if self.set_upstream:
            args.append('--set-upstream')
        if self.tags:
            args.append('--tags')
        args.append(positional("remote", self.remote))
        if self.branch:
            args.append(positional("branch", self.branch))
        return args


@dataclass(frozen=True, kw_only=True)
class PullRequest(GitRequest):
    operation = Operation.PULL
    DEFAULT_MESSAGE = "Pull completed successfully"

    remote: str = "origin"
    branch: Optional[str] = None
    rebase: bool = False
    # None leaves the fast-forward policy to git's configuration
    ff: Optional[bool] = None
    ff_only: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> PullRequest:
        return cls(
            path=get_string(arguments, "path"),
            remote=get_string(arguments, "remote", default="origin"),
            branch=get_string(arguments, "branch"),
            rebase=get_bool(arguments, "rebase"),
            ff=get_optional_bool(arguments, "ff"),
            ff_only=get_bool(arguments, "ffOnly"),
        )

    def to_argv(self) -> list[str]:
        if self.ff is False and self.ff_only:
            raise GitCompositionError("'ff': false and 'ffOnly': true cannot be combined")

        args = ['pull']
        if self.rebase:
            args.append('--rebase')
        if self.ff is False:
            args.append('--no-ff')
        elif self.ff is True:
            args.append('--ff')
        if self.ff_only:
            args.append('--ff-only')
        args.append(positional("remote", self.remote))
        if self.branch:
            args.append(positional("branch", self.branch))
        return args


@dataclass(frozen=True, kw_only=True)
class RemoteRequest(GitRequest):
    operation = Operation.REMOTE
    DEFAULT_MESSAGE = "Remote operation completed"

    action: str = "list"
    name: Optional[str] = None
    url: Optional[str] = None
    verbose: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> RemoteRequest:
        return cls(
            path=get_string(arguments, "path"),
            action=get_choice(arguments, "action", REMOTE_ACTIONS, default="list"),
            name=get_string(arguments, "name"),
            url=get_string(arguments, "url"),
            verbose=get_bool(arguments, "verbose"),
        )

    def to_argv(self) -> list[str]:
        args = ['remote']

        if self.action in ("add", "set-url"):
            args.extend([self.action, positional("name", self.name), positional("url", self.url)])
        elif self.action == "remove":
            args.extend(['remove', positional("name", self.name)])
        elif self.action == "show":
            args.append('show')
            if self.name:
                args.append(positional("name", self.name))
        elif self.verbose:
            args.append('-v')

        return args


TOOLS = [
    ToolDef(
        name=Operation.PUSH.tool_name,
        description="Push commits to remote",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "remote": {
                    "type": "string",
                    "default": "origin",
                    "description": "Remote name"
                },
                "branch": {
                    "type": "string",
                    "description": "Branch to push (default: git's push.default behaviour)"
                },
                "force": {
                    "type": "boolean",
                    "default": False,
                    "description": "Force push (overwrites remote history)"
                },
                "setUpstream": {
                    "type": "boolean",
                    "default": False,
                    "description": "Set upstream tracking for the branch"
                },
                "tags": {
                    "type": "boolean",
                    "default": False,
                    "description": "Push all tags"
                }
            },
            "required": []
        },
        handler=request_handler(PushRequest),
        operation=Operation.PUSH,
    ),
    ToolDef(
        name=Operation.PULL.tool_name,
        description="Pull changes from remote",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "remote": {
                    "type": "string",
                    "default": "origin",
                    "description": "Remote name"
                },
                "branch": {
                    "type": "string",
                    "description": "Branch to pull"
                },
                "rebase": {
                    "type": "boolean",
                    "default": False,
                    "description": "Rebase instead of merge"
                },
                "ff": {
                    "type": "boolean",
                    "description": "true: allow fast-forward (--ff), false: always create a merge commit (--no-ff); omit to use git config"
                },
                "ffOnly": {
                    "type": "boolean",
                    "default": False,
                    "description": "Refuse to pull unless the merge is a fast-forward (--ff-only)"
                }
            },
            "required": []
        },
        handler=request_handler(PullRequest),
        operation=Operation.PULL,
    ),
    ToolDef(
        name=Operation.REMOTE.tool_name,
        description="Manage remotes",
        parameters={
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": list(REMOTE_ACTIONS),
                    "default": "list",
                    "description": "What to do with remotes"
                },
                "name": {
                    "type": "string",
                    "description": "Remote name"
                },
                "url": {
                    "type": "string",
                    "description": "Remote URL (add, set-url)"
                },
                "path": {
                    "type": "string",
                    "description": "Repository path"
                },
                "verbose": {
                    "type": "boolean",
                    "default": False,
                    "description": "Show remote URLs when listing"
                }
            },
            "required": []
        },
        handler=request_handler(RemoteRequest),
        operation=Operation.REMOTE,
    ),
]
