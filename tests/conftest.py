import asyncio
import inspect
import subprocess

import pytest

from git_tools import ToolContext, ToolRegistry
from gitmcp_core.config import GitMCPConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "asyncio: mark test to run in event loop")


def pytest_pyfunc_call(pyfuncitem):
    if "asyncio" not in pyfuncitem.keywords:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    params = inspect.signature(test_func).parameters
    kwargs = {name: pyfuncitem.funcargs[name] for name in params}

    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        loop.run_until_complete(test_func(**kwargs))
    finally:
        loop.close()
        asyncio.set_event_loop(None)

    return True


class FakeGit:
    """Stands in for subprocess.run and records every command."""

    def __init__(self):
        self.calls = []
        self.stdout = ""
        self.stderr = ""
        self.returncode = 0
        self.exception = None

    def __call__(self, cmd, **kwargs):
        self.calls.append({"argv": list(cmd), **kwargs})
        if self.exception is not None:
            raise self.exception
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)

    @property
    def argv(self):
        assert self.calls, "git was never run"
        return self.calls[-1]["argv"]


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    for var in (
        "GIT_MCP_GIT_BINARY",
        "GIT_MCP_TIMEOUT",
        "GIT_MCP_DEFAULT_CWD",
        "GIT_MCP_SERVER_NAME",
        "GIT_MCP_API_HOST",
        "GIT_MCP_API_PORT",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(var, raising=False)
    ToolRegistry.reset()
    GitMCPConfig.reset()
    yield
    ToolRegistry.reset()
    GitMCPConfig.reset()


@pytest.fixture
def fake_git(monkeypatch):
    fake = FakeGit()
    monkeypatch.setattr("git_tools._runner.subprocess.run", fake)
    return fake


@pytest.fixture
def registry():
    return ToolRegistry.with_git_tools(ToolContext(git_binary="git", timeout=30))
