"""Error types raised while building or running git commands.

Every failure a tool call can produce is a GitToolError. The `kind`
attribute tells callers (transports, tests) which stage failed without
parsing messages.
"""

from __future__ import annotations

from typing import ClassVar


class GitToolError(Exception):
    """Base class for all tool call failures."""

    kind: ClassVar[str] = "internal"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class GitValidationError(GitToolError):
    """A required argument is missing or has the wrong type or value."""

    kind = "validation"


class UnknownToolError(GitValidationError):
    """The requested tool is not in the registry."""

    def __init__(self, tool_name: str, available: list[str]) -> None:
        super().__init__(
            f"Unknown tool '{tool_name}'. Available tools: {', '.join(available)}"
        )
        self.tool_name = tool_name


class GitCompositionError(GitToolError):
    """The arguments are individually valid but cannot form a command."""

    kind = "composition"


class GitExecutionError(GitToolError):
    """The git process could not be started or did not finish in time."""

    kind = "execution"


class GitCommandError(GitToolError):
    """git ran and exited non-zero."""

    kind = "command"

    def __init__(
        self,
        argv: list[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        # pull and merge report progress on stderr and conflicts on stdout
        diagnostic = "\n".join(part for part in (stderr.strip(), stdout.strip()) if part)
        if not diagnostic:
            verb = argv[1] if len(argv) > 1 else "command"
            diagnostic = f"git {verb} exited with status {returncode}"
        super().__init__(diagnostic)
        self.argv = argv
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
