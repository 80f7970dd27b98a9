"""Execution and error translation through ToolRegistry.execute."""

import subprocess

import pytest

from git_tools import (
    GitCommandError,
    GitExecutionError,
    Operation,
    OPERATIONS,
    ToolContext,
    dispatch,
)


@pytest.mark.asyncio
async def test_stdout_is_returned_verbatim(registry, fake_git):
    fake_git.stdout = "## main\n M README.md\n"

    result = await registry.execute("git_status", {"short": True})

    assert result.ok
    assert result.text == "## main\n M README.md\n"
    assert fake_git.argv == ["git", "status", "--short", "--branch"]


@pytest.mark.asyncio
async def test_empty_output_uses_default_message(registry, fake_git):
    result = await registry.execute("git_add", {})

    assert result.ok
    assert result.text == "Files added to staging area"


@pytest.mark.parametrize(
    "tool, arguments, message",
    [
        ("git_init", {}, "Git repository initialized successfully"),
        ("git_clone", {"url": "u"}, "Repository cloned successfully"),
        ("git_push", {}, "Push completed successfully"),
        ("git_pull", {}, "Pull completed successfully"),
        ("git_branch", {"action": "create", "name": "x"}, "Branch operation completed"),
        ("git_checkout", {"branch": "dev"}, "Switched to branch 'dev'"),
        ("git_diff", {}, "No differences found"),
        ("git_stash", {}, "Stash operation completed"),
        ("git_remote", {}, "Remote operation completed"),
        ("git_tag", {}, "Tag operation completed"),
        ("git_reset", {}, "Reset completed"),
        ("git_log", {}, "No commits found"),
        ("git_commit", {"message": "m"}, "Changes committed"),
        ("git_merge", {"branch": "f"}, "Merge completed"),
    ],
)
@pytest.mark.asyncio
async def test_default_messages(registry, fake_git, tool, arguments, message):
    result = await registry.execute(tool, arguments)
    assert result.text == message


@pytest.mark.asyncio
async def test_non_zero_exit_is_a_failure(registry, fake_git):
    fake_git.returncode = 1
    fake_git.stderr = "merge: nope - not something we can merge\n"

    result = await registry.execute("git_merge", {"branch": "nope"})

    assert not result.ok
    assert result.kind == "command"
    assert result.text == "merge: nope - not something we can merge"
    assert isinstance(result.error, GitCommandError)
    assert result.error.returncode == 1
    assert result.error.argv == ["git", "merge", "nope"]


@pytest.mark.asyncio
async def test_non_zero_exit_without_output_still_has_text(registry, fake_git):
    fake_git.returncode = 128

    result = await registry.execute("git_push", {})

    assert not result.ok
    assert result.text == "git push exited with status 128"


@pytest.mark.asyncio
async def test_failure_with_only_stdout(registry, fake_git):
    fake_git.returncode = 1
    fake_git.stdout = "nothing to commit, working tree clean\n"

    result = await registry.execute("git_commit", {"message": "m"})

    assert not result.ok
    assert result.text == "nothing to commit, working tree clean"


@pytest.mark.asyncio
async def test_failure_keeps_both_streams(registry, fake_git):
    fake_git.returncode = 1
    fake_git.stderr = "From ../up\n * branch            main       -> FETCH_HEAD\n"
    fake_git.stdout = "Auto-merging f\nCONFLICT (content): Merge conflict in f\n"

    result = await registry.execute("git_pull", {"branch": "main"})

    assert result.text == (
        "From ../up\n * branch            main       -> FETCH_HEAD\n"
        "Auto-merging f\nCONFLICT (content): Merge conflict in f"
    )


@pytest.mark.asyncio
async def test_failures_are_logged_with_tool(registry, fake_git, caplog, tmp_path):
    fake_git.returncode = 1
    fake_git.stderr = "fatal: bad\n"

    with caplog.at_level("DEBUG"):
        await registry.execute("git_status", {"path": str(tmp_path)})
        await registry.execute("git_commit", {})

    failed = next(r for r in caplog.records if r.levelname == "WARNING")
    assert failed.tool == "git_status"
    assert failed.cwd == str(tmp_path)

    running = next(r for r in caplog.records if r.getMessage().startswith("Running:"))
    assert running.cwd == str(tmp_path)

    rejected = next(r for r in caplog.records if r.getMessage().startswith("Rejected:"))
    assert rejected.tool == "git_commit"


@pytest.mark.asyncio
async def test_default_message_never_replaces_a_failure(registry, fake_git):
    fake_git.returncode = 1
    fake_git.stderr = "fatal: pathspec 'x' did not match any files"

    result = await registry.execute("git_add", {"files": ["x"]})

    assert not result.ok
    assert "Files added" not in result.text


@pytest.mark.parametrize(
    "tool, arguments",
    [
        ("git_clone", {}),
        ("git_commit", {}),
        ("git_checkout", {}),
        ("git_merge", {}),
        ("git_branch", {"action": "delete"}),
        ("git_commit", {"message": 'x', "author": 5}),
    ],
)
@pytest.mark.asyncio
async def test_invalid_requests_never_spawn(registry, fake_git, tool, arguments):
    result = await registry.execute(tool, arguments)

    assert not result.ok
    assert result.kind in ("validation", "composition")
    assert fake_git.calls == []


@pytest.mark.asyncio
async def test_unknown_tool(registry, fake_git):
    result = await registry.execute("git_rebase", {})

    assert not result.ok
    assert result.kind == "validation"
    assert "Unknown tool 'git_rebase'" in result.text
    assert fake_git.calls == []


@pytest.mark.asyncio
async def test_arguments_must_be_an_object(registry, fake_git):
    result = await registry.execute("git_status", ["--short"])

    assert result.kind == "validation"
    assert fake_git.calls == []


@pytest.mark.asyncio
async def test_none_arguments_mean_empty(registry, fake_git):
    result = await registry.execute("git_status", None)

    assert result.ok
    assert fake_git.argv == ["git", "status", "--branch"]


@pytest.mark.asyncio
async def test_missing_binary_is_an_execution_error(registry, fake_git):
    fake_git.exception = FileNotFoundError(2, "No such file or directory", "git")

    result = await registry.execute("git_status", {})

    assert not result.ok
    assert result.kind == "execution"
    assert isinstance(result.error, GitExecutionError)
    assert "not installed" in result.text


@pytest.mark.asyncio
async def test_permission_denied_is_an_execution_error(registry, fake_git):
    fake_git.exception = PermissionError(13, "Permission denied")

    result = await registry.execute("git_status", {})

    assert result.kind == "execution"


@pytest.mark.asyncio
async def test_timeout_is_an_execution_error(registry, fake_git):
    fake_git.exception = subprocess.TimeoutExpired(["git", "clone"], 30)

    result = await registry.execute("git_clone", {"url": "https://example.com/r.git"})

    assert result.kind == "execution"
    assert result.text == "git clone timed out after 30 seconds"


@pytest.mark.asyncio
async def test_missing_working_directory(registry, fake_git, tmp_path):
    result = await registry.execute("git_status", {"path": str(tmp_path / "missing")})

    assert result.kind == "execution"
    assert "does not exist" in result.text
    assert fake_git.calls == []


@pytest.mark.asyncio
async def test_unexpected_exception_is_wrapped(registry, fake_git):
    fake_git.exception = RuntimeError("boom")

    result = await registry.execute("git_status", {})

    assert not result.ok
    assert result.kind == "internal"
    assert "boom" in result.text


@pytest.mark.asyncio
async def test_process_settings(registry, fake_git, tmp_path):
    await registry.execute("git_status", {"path": str(tmp_path)})
    call = fake_git.calls[-1]

    assert call["cwd"] == str(tmp_path)
    assert call["timeout"] == 30
    assert call["stdin"] == subprocess.DEVNULL
    assert call["env"]["GIT_TERMINAL_PROMPT"] == "0"
    assert not call.get("shell")
    assert isinstance(call["argv"], list)


@pytest.mark.asyncio
async def test_injection_payload_reaches_git_as_one_argument(registry, fake_git):
    message = 'a"; rm -rf /; echo "'

    await registry.execute("git_commit", {"message": message})

    assert fake_git.argv == ["git", "commit", "-m", message]
    assert not fake_git.calls[-1].get("shell")


@pytest.mark.asyncio
async def test_init_and_clone_run_in_default_directory(fake_git, tmp_path):
    from git_tools import ToolRegistry

    registry = ToolRegistry.with_git_tools(ToolContext(default_cwd=str(tmp_path)))

    await registry.execute("git_init", {"path": "/somewhere/else"})
    assert fake_git.calls[-1]["cwd"] == str(tmp_path)
    assert fake_git.argv[-1] == "/somewhere/else"

    await registry.execute("git_clone", {"url": "u", "path": "dest"})
    assert fake_git.calls[-1]["cwd"] == str(tmp_path)

    await registry.execute("git_status", {})
    assert fake_git.calls[-1]["cwd"] == str(tmp_path)


@pytest.mark.asyncio
async def test_context_override_per_call(registry, fake_git):
    await registry.execute("git_log", {}, ToolContext(git_binary="/opt/git/bin/git", timeout=None))

    assert fake_git.argv[0] == "/opt/git/bin/git"
    assert fake_git.calls[-1]["timeout"] is None


@pytest.mark.asyncio
async def test_dispatch_accepts_operation_names(fake_git):
    result = await dispatch(Operation.TAG, {})
    assert result.tool == "git_tag"

    result = await dispatch("tag", {"action": "list"})
    assert result.tool == "git_tag"

    result = await dispatch("git_tag")
    assert result.ok


def test_operation_table_is_read_only():
    assert set(OPERATIONS) == set(Operation)
    with pytest.raises(TypeError):
        OPERATIONS[Operation.INIT] = OPERATIONS[Operation.CLONE]
