"""
Git command runner.

This module provides the process execution layer for git commands. It
only ever passes an argument list to subprocess, never a shell string.
"""

import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Optional

from logging_config import get_logger

from ._errors import GitExecutionError

logger = get_logger("git")


@dataclass(frozen=True)
class GitResult:
    """Captured outcome of one git process."""

    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


def _git_env() -> dict[str, str]:
    """Environment for git child processes.

    Prompts for credentials would block forever with stdin closed, so they
    are turned into immediate failures.
    """
    env = os.environ.copy()
    env['GIT_TERMINAL_PROMPT'] = '0'
    return env


def run_git(
    *args: str,
    cwd: Optional[str] = None,
    git_binary: str = "git",
    timeout: Optional[float] = None
) -> GitResult:
    """
    Run a git command and return its captured result.

    Args:
        *args: Git command arguments (e.g., 'status', '--short')
        cwd: Working directory (default: current directory)
        git_binary: Executable to run
        timeout: Seconds before the process is killed (None: wait forever)

    Returns:
        GitResult with exit status and decoded output

    Raises:
        GitExecutionError: git could not be started or timed out
    """
    cmd = [git_binary] + list(args)

    if cwd and not os.path.isdir(cwd):
        raise GitExecutionError(f"Working directory does not exist: {cwd}")

    logger.debug(f"Running: {shlex.join(cmd)}", extra={"cwd": cwd})

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='replace',
            timeout=timeout,
            env=_git_env()
        )
    except subprocess.TimeoutExpired:
        verb = args[0] if args else "command"
        raise GitExecutionError(f"git {verb} timed out after {timeout:g} seconds")
    except FileNotFoundError:
        raise GitExecutionError(f"Git is not installed or not in PATH ({git_binary})")
    except PermissionError as e:
        raise GitExecutionError(f"Permission denied running git: {e}")
    except OSError as e:
        raise GitExecutionError(f"Error running git: {e}")

    return GitResult(
        argv=cmd,
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or ""
    )
