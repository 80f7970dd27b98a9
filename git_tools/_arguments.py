"""Argument parsing for git tool requests.

Tool calls arrive as loosely typed JSON objects. The helpers here pull
single fields out of that mapping, apply defaults and reject values of
the wrong type. GitRequest is the base for the per-operation request
dataclasses.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from ._base import Operation
from ._errors import GitCompositionError, GitValidationError

Arguments = Mapping[str, Any]


def _reject_nul(key: str, value: str) -> None:
    if "\x00" in value:
        raise GitCompositionError(f"Argument '{key}' must not contain NUL bytes")


def get_string(
    arguments: Arguments,
    key: str,
    *,
    required: bool = False,
    default: str | None = None,
) -> str | None:
    """Return a string argument; empty strings count as omitted."""
    value = arguments.get(key)
    if value is not None and not isinstance(value, str):
        raise GitValidationError(f"Argument '{key}' must be a string")
    if not value:
        if required:
            raise GitValidationError(f"Missing required argument: {key}")
        return default
    _reject_nul(key, value)
    return value


def get_bool(arguments: Arguments, key: str, default: bool = False) -> bool:
    value = get_optional_bool(arguments, key)
    return default if value is None else value


def get_optional_bool(arguments: Arguments, key: str) -> bool | None:
    value = arguments.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise GitValidationError(f"Argument '{key}' must be a boolean")
    return value


def get_int(
    arguments: Arguments,
    key: str,
    *,
    default: int | None = None,
    minimum: int | None = None,
) -> int | None:
    value = arguments.get(key)
    if value is None:
        return default
    # JSON numbers may come through as floats; bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GitValidationError(f"Argument '{key}' must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise GitValidationError(f"Argument '{key}' must be an integer")
        value = int(value)
    if minimum is not None and value < minimum:
        raise GitCompositionError(f"Argument '{key}' must be >= {minimum}, got {value}")
    return value


def get_choice(
    arguments: Arguments,
    key: str,
    choices: Sequence[str],
    default: str,
) -> str:
    value = get_string(arguments, key, default=default)
    if value not in choices:
        raise GitValidationError(
            f"Argument '{key}' must be one of {', '.join(choices)}; got '{value}'"
        )
    return value


def get_string_list(arguments: Arguments, key: str) -> list[str]:
    """Return a list of strings; a single string is accepted as one item."""
    value = arguments.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise GitValidationError(f"Argument '{key}' must be an array of strings")
    for item in value:
        _reject_nul(key, item)
    return list(value)


def positional(key: str, value: str | None) -> str:
    """Check a value that will be passed to git as a positional token.

    Positionals that start with a dash would be parsed by git as options,
    so they are refused outright.
    """
    if not value:
        raise GitCompositionError(f"Argument '{key}' is required for this action")
    if value.startswith("-"):
        raise GitCompositionError(
            f"Argument '{key}' must not start with '-': {value!r}"
        )
    return value


@dataclass(frozen=True, kw_only=True)
class GitRequest:
    """Base class for a parsed, validated tool call.

    Subclasses hold exactly the fields of one operation. `path` is the
    repository directory the command runs in, unless the subclass uses it
    as a positional (init, clone).
    """

    operation: ClassVar[Operation]
    DEFAULT_MESSAGE: ClassVar[str] = "Git operation completed"

    path: str | None = None

    @classmethod
    def from_arguments(cls, arguments: Arguments) -> GitRequest:
        raise NotImplementedError

    def to_argv(self) -> list[str]:
        """Return the git arguments, verb first, without the binary."""
        raise NotImplementedError

    @property
    def cwd(self) -> str | None:
        return self.path

    def default_message(self) -> str:
        return self.DEFAULT_MESSAGE
