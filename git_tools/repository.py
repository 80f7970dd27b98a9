"""
Git repository creation - init and clone.

Both commands take `path` as the target directory positional rather than
as the working directory; they run in the context's default directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ._arguments import (
    Arguments,
    GitRequest,
    get_bool,
    get_int,
    get_string,
    positional,
)
from ._base import Operation, ToolDef
from ._dispatch import request_handler


@dataclass(frozen=True, kw_only=True)
class InitRequest(GitRequest):
    operation = Operation.INIT
    DEFAULT_MESSAGE = "Git repository initialized successfully"

    initial_branch: Optional[str] = "main"
    bare: bool = False

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> InitRequest:
        return cls(
            path=get_string(arguments, "path"),
            initial_branch=get_string(arguments, "initialBranch", default="main"),
            bare=get_bool(arguments, "bare"),
        )

    @property
    def cwd(self) -> Optional[str]:
        return None

    def to_argv(self) -> list[str]:
        args = ['init']
        if self.initial_branch:
            args.append(f'--initial-branch={self.initial_branch}')
        if self.bare:
            args.append('--bare')
        if self.path:
            args.append(positional("path", self.path))
        return args


@dataclass(frozen=True, kw_only=True)
class CloneRequest(GitRequest):
    operation = Operation.CLONE
    DEFAULT_MESSAGE = "Repository cloned successfully"

    url: str
    branch: Optional[str] = None
    depth: Optional[int] = None
    recursive: bool = True

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> CloneRequest:
        return cls(
            url=get_string(arguments, "url", required=True),
            path=get_string(arguments, "path"),
            branch=get_string(arguments, "branch"),
            depth=get_int(arguments, "depth", minimum=1),
            recursive=get_bool(arguments, "recursive", default=True),
        )

    @property
    def cwd(self) -> Optional[str]:
        return None

    def to_argv(self) -> list[str]:
        args = ['clone', positional("url", self.url)]
        if self.path:
            args.append(positional("path", self.path))
        if self.branch:
            args.extend(['--branch', positional("branch", self.branch)])
        if self.depth:
            args.extend(['--depth', str(self.depth)])
        if self.recursive:
            args.append('--recursive')
        return args


TOOLS = [
    ToolDef(
        name=Operation.INIT.tool_name,
        description="Initialize a new Git repository",
        parameters={
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Directory path to initialize (default: current directory)"
                },
                "initialBranch": {
                    "type": "string",
                    "default": "main",
                    "description": "Name of the initial branch"
                },
                "bare": {
                    "type": "boolean",
                    "default": False,
                    "description": "Create a bare repository"
                }
            },
            "required": []
        },
        handler=request_handler(InitRequest),
        operation=Operation.INIT,
    ),
    ToolDef(
        name=Operation.CLONE.tool_name,
        description="Clone a repository",
        parameters={
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "Repository URL to clone"
                },
                "path": {
                    "type": "string",
                    "description": "Destination path"
                },
                "branch": {
                    "type": "string",
                    "description": "Branch to checkout"
                },
                "depth": {
                    "type": "integer",
                    "minimum": 1,
                    "description": "Shallow clone depth (number of commits)"
                },
                "recursive": {
                    "type": "boolean",
                    "default": True,
                    "description": "Initialize submodules"
                }
            },
            "required": ["url"]
        },
        handler=request_handler(CloneRequest),
        operation=Operation.CLONE,
    ),
]
