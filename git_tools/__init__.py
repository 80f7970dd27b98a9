"""
Git tools package.

This package exposes git CLI operations as agent tools. Each call is
parsed into a typed request, turned into an argument list and run as a
single git process.

Tools:
    git_init        - Initialize a repository
    git_clone       - Clone a repository
    git_status      - Working tree status
    git_add         - Stage files
    git_commit      - Commit changes
    git_push        - Push to remote
    git_pull        - Pull from remote
    git_branch      - List, create, delete or rename branches
    git_checkout    - Switch/create branches
    git_merge       - Merge a branch
    git_log         - View history
    git_diff        - Show changes
    git_stash       - Save, apply or list stashes
    git_remote      - Manage remotes
    git_tag         - List, create or delete tags
    git_reset       - Reset HEAD
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ._arguments import GitRequest
from ._base import Operation, ToolContext, ToolDef, ToolResult
from ._dispatch import build_command, run_request
from ._errors import (
    GitCommandError,
    GitCompositionError,
    GitExecutionError,
    GitToolError,
    GitValidationError,
    UnknownToolError,
)
from ._registry import ToolRegistry
from ._runner import GitResult, run_git
from .branch import BranchRequest, CheckoutRequest, MergeRequest, TOOLS as BRANCH_TOOLS
from .commit import CommitRequest, LogRequest, TOOLS as COMMIT_TOOLS
from .remote import PullRequest, PushRequest, RemoteRequest, TOOLS as REMOTE_TOOLS
from .repository import CloneRequest, InitRequest, TOOLS as REPOSITORY_TOOLS
from .staging import AddRequest, ResetRequest, TOOLS as STAGING_TOOLS
from .stash import StashRequest, TOOLS as STASH_TOOLS
from .status import DiffRequest, StatusRequest, TOOLS as STATUS_TOOLS
from .tags import TagRequest, TOOLS as TAG_TOOLS

# Module metadata
MODULE_NAME = "git"
MODULE_VERSION = "1.0.0"

SYSTEM_PROMPT = """## Git CLI Tools
You have access to git CLI tools that run git directly in a repository directory.

**Workflow:**
1. `git_clone` or `git_init` - Get a repository
2. `git_checkout` - Switch to or create a branch
3. Make changes to files
4. `git_add` - Stage your changes
5. `git_commit` - Commit with a message
6. `git_push` - Push to remote

**Available Tools:**
- **Repository:** `git_init`, `git_clone`
- **Status:** `git_status`, `git_diff`, `git_log`
- **Staging:** `git_add`, `git_reset`, `git_stash`
- **Commits:** `git_commit`, `git_tag`
- **Branches:** `git_branch`, `git_checkout`, `git_merge`
- **Remotes:** `git_push`, `git_pull`, `git_remote`

**Notes:**
- Pass `path` to run in a specific repository (for init and clone it is the target directory)
- Output is git's own text; errors carry git's diagnostic message
- Credentials must already be configured; git will not prompt
"""

# Aggregate all tools, in operation order
TOOLS = sorted(
    REPOSITORY_TOOLS +
    STATUS_TOOLS +
    STAGING_TOOLS +
    COMMIT_TOOLS +
    BRANCH_TOOLS +
    REMOTE_TOOLS +
    STASH_TOOLS +
    TAG_TOOLS,
    key=lambda tool: list(Operation).index(tool.operation),
)

OPERATIONS: Mapping[Operation, ToolDef] = MappingProxyType(
    {tool.operation: tool for tool in TOOLS}
)

REQUEST_TYPES: Mapping[Operation, type[GitRequest]] = MappingProxyType({
    Operation.INIT: InitRequest,
    Operation.CLONE: CloneRequest,
    Operation.STATUS: StatusRequest,
    Operation.ADD: AddRequest,
    Operation.COMMIT: CommitRequest,
    Operation.PUSH: PushRequest,
    Operation.PULL: PullRequest,
    Operation.BRANCH: BranchRequest,
    Operation.CHECKOUT: CheckoutRequest,
    Operation.MERGE: MergeRequest,
    Operation.LOG: LogRequest,
    Operation.DIFF: DiffRequest,
    Operation.STASH: StashRequest,
    Operation.REMOTE: RemoteRequest,
    Operation.TAG: TagRequest,
    Operation.RESET: ResetRequest,
})


def parse_request(operation: Operation | str, arguments: Mapping[str, Any]) -> GitRequest:
    """Parse an argument bundle into the typed request for an operation.

    Raises:
        UnknownToolError: `operation` names no git operation
    """
    try:
        operation = Operation(operation)
    except ValueError:
        raise UnknownToolError(str(operation), [op.value for op in Operation]) from None
    return REQUEST_TYPES[operation].from_arguments(arguments)


async def dispatch(
    operation: Operation | str,
    arguments: Mapping[str, Any] | None = None,
    context: ToolContext | None = None,
) -> ToolResult:
    """Run one operation through the shared registry.

    `operation` may be an Operation, its value ("commit") or the tool
    name ("git_commit").
    """
    name = operation.tool_name if isinstance(operation, Operation) else operation
    if not name.startswith("git_"):
        name = f"git_{name}"
    return await ToolRegistry.get_instance().execute(name, arguments, context)


__all__ = [
    # Metadata
    'MODULE_NAME',
    'MODULE_VERSION',
    'SYSTEM_PROMPT',
    # Catalog
    'TOOLS',
    'OPERATIONS',
    'REQUEST_TYPES',
    'Operation',
    'ToolDef',
    'ToolContext',
    'ToolResult',
    'ToolRegistry',
    # Dispatch
    'dispatch',
    'parse_request',
    'build_command',
    'run_request',
    'run_git',
    'GitResult',
    # Requests
    'GitRequest',
    'InitRequest',
    'CloneRequest',
    'StatusRequest',
    'AddRequest',
    'CommitRequest',
    'PushRequest',
    'PullRequest',
    'BranchRequest',
    'CheckoutRequest',
    'MergeRequest',
    'LogRequest',
    'DiffRequest',
    'StashRequest',
    'RemoteRequest',
    'TagRequest',
    'ResetRequest',
    # Errors
    'GitToolError',
    'GitValidationError',
    'UnknownToolError',
    'GitCompositionError',
    'GitExecutionError',
    'GitCommandError',
]
