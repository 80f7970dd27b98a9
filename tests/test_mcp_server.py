import mcp.types as types
import pytest

from mcp_server import GitToolServer, build_server, parse_args


@pytest.fixture
def tool_server(registry):
    return GitToolServer(registry)


@pytest.mark.asyncio
async def test_list_tools(tool_server):
    tools = await tool_server.list_tools()

    assert len(tools) == 16
    assert all(isinstance(tool, types.Tool) for tool in tools)
    clone = next(tool for tool in tools if tool.name == "git_clone")
    assert clone.inputSchema["required"] == ["url"]


@pytest.mark.asyncio
async def test_call_tool_returns_text(tool_server, fake_git):
    fake_git.stdout = "On branch main\n"

    content = await tool_server.call_tool("git_status", {})

    assert content == [types.TextContent(type="text", text="On branch main\n")]


@pytest.mark.asyncio
async def test_call_tool_without_arguments(tool_server, fake_git):
    content = await tool_server.call_tool("git_diff", None)

    assert content[0].text == "No differences found"


@pytest.mark.asyncio
async def test_call_tool_failure_is_raised(tool_server, fake_git):
    fake_git.returncode = 1
    fake_git.stderr = "fatal: not a git repository (or any of the parent directories): .git\n"

    with pytest.raises(RuntimeError, match="^Git error: fatal: not a git repository"):
        await tool_server.call_tool("git_status", {})


@pytest.mark.asyncio
async def test_call_unknown_tool(tool_server, fake_git):
    with pytest.raises(RuntimeError, match="Unknown tool 'git_fetch'"):
        await tool_server.call_tool("git_fetch", {})


def test_build_server_registers_handlers(registry):
    server = build_server(registry)

    assert server.name == "git-mcp"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


def test_parse_args_defaults():
    args = parse_args([])

    assert args.transport == "stdio"
    assert args.port == 8000
    assert args.log_level is None


def test_parse_args_http():
    args = parse_args(["--transport", "http", "--host", "127.0.0.1", "--port", "9000"])

    assert (args.transport, args.host, args.port) == ("http", "127.0.0.1", 9000)


@pytest.mark.asyncio
async def test_call_tool_request_through_server(registry, fake_git):
    server = build_server(registry)
    handler = server.request_handlers[types.CallToolRequest]

    fake_git.returncode = 1
    fake_git.stderr = "fatal: bad\n"
    failed = await handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="git_status", arguments={}),
        )
    )

    assert failed.root.isError is True
    assert failed.root.content[0].text == "Git error: fatal: bad"

    fake_git.returncode = 0
    fake_git.stderr = ""
    added = await handler(
        types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="git_add", arguments={}),
        )
    )

    assert added.root.isError is False
    assert added.root.content[0].text == "Files added to staging area"
