"""Turn parsed requests into git processes and their output into text."""

from __future__ import annotations

import asyncio
from typing import Any

from logging_config import get_logger

from ._arguments import GitRequest
from ._base import ToolContext, ToolHandler
from ._errors import GitCommandError
from ._runner import run_git

logger = get_logger("git")


def build_command(request: GitRequest, context: ToolContext) -> list[str]:
    """Full argv for a request, binary included."""
    return [context.git_binary, *request.to_argv()]


async def run_request(request: GitRequest, context: ToolContext) -> str:
    """Run one request and return git's stdout or the default message.

    Raises GitCommandError on a non-zero exit and GitExecutionError when
    the process cannot be run.
    """
    argv = request.to_argv()
    cwd = request.cwd or context.default_cwd

    result = await asyncio.to_thread(
        run_git,
        *argv,
        cwd=cwd,
        git_binary=context.git_binary,
        timeout=context.timeout,
    )

    if not result.success:
        error = GitCommandError(result.argv, result.returncode, result.stdout, result.stderr)
        logger.warning(
            f"git {argv[0]} failed (exit {result.returncode}): {error.message}",
            extra={"tool": request.operation.tool_name, "cwd": cwd},
        )
        raise error

    return result.stdout or request.default_message()


def request_handler(request_type: type[GitRequest]) -> ToolHandler:
    """Build the async tool handler for a request class."""

    async def handler(arguments: dict[str, Any], context: ToolContext) -> str:
        request = request_type.from_arguments(arguments)
        return await run_request(request, context)

    handler.__name__ = f"_handle_git_{request_type.operation.value}"
    return handler
