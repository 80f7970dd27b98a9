"""MCP server exposing the git tools.

Run over stdio (the default) for agent hosts that spawn the server, or
with `--transport http` to serve the HTTP API from api.py instead.

Usage:
    git-mcp
    git-mcp --transport http --port 8000
"""
from __future__ import annotations

import argparse
import asyncio
from typing import Any

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from git_tools import ToolContext, ToolRegistry
from gitmcp_core import get_config, init_server
from logging_config import get_logger

logger = get_logger("mcp")


class GitToolServer:
    """Binds a ToolRegistry to the MCP list/call handlers."""

    def __init__(self, registry: ToolRegistry, context: ToolContext | None = None) -> None:
        self.registry = registry
        self.context = context

    async def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in self.registry.get_tools(format="mcp")
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        """Run a tool; failures are raised so the SDK marks the result as an error."""
        result = await self.registry.execute(name, arguments or {}, self.context)
        if not result.ok:
            raise RuntimeError(f"Git error: {result.text}")
        return [types.TextContent(type="text", text=result.text)]


def build_server(registry: ToolRegistry | None = None, context: ToolContext | None = None) -> Server:
    """Create the low-level MCP server with the git tool handlers attached."""
    config = get_config()
    tools = GitToolServer(registry or ToolRegistry.get_instance(), context)

    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return await tools.list_tools()

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return await tools.call_tool(name, arguments)

    return server


async def serve_stdio(server: Server) -> None:
    """Serve MCP over stdin/stdout until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Git MCP server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    config = get_config()
    parser = argparse.ArgumentParser(prog="git-mcp", description="Expose git operations as agent tools")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="stdio: MCP over stdin/stdout (default); http: REST API",
    )
    parser.add_argument("--host", default=config.api_host, help="HTTP bind host")
    parser.add_argument("--port", type=int, default=config.api_port, help="HTTP bind port")
    parser.add_argument("--log-level", default=None, help="Console log level (default: LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    registry = init_server(log_level=args.log_level)

    if args.transport == "http":
        import uvicorn

        from api import app

        uvicorn.run(app, host=args.host, port=args.port, log_config=None)
        return

    asyncio.run(serve_stdio(build_server(registry)))


if __name__ == "__main__":
    main()
