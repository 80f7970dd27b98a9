"""Tool registry for the git tool system.

The ToolRegistry is a singleton that holds every registered tool and
provides tool discovery (in MCP, OpenAI or Claude format) and execution.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from logging_config import get_logger

from ._base import ToolContext, ToolDef, ToolResult
from ._errors import GitToolError, GitValidationError, UnknownToolError

logger = get_logger("tools")


class ToolRegistry:
    """Central registry for the git tools.

    Tools are registered once at startup and looked up by name afterwards.
    Execution never raises: every outcome is returned as a ToolResult.

    Usage:
        registry = ToolRegistry.get_instance()
        tools = registry.get_tools(format="mcp")
        result = await registry.execute("git_status", {"path": "."})
    """

    _instance: ClassVar[ToolRegistry | None] = None

    def __init__(self, context: ToolContext | None = None) -> None:
        """Create an empty registry. Use get_instance() for the shared one."""
        self.context = context or ToolContext()
        self._tools: dict[str, ToolDef] = {}
        self._tool_sources: dict[str, str] = {}  # tool_name -> module_name
        self._system_prompts: dict[str, str] = {}  # module_name -> system prompt

    @classmethod
    def get_instance(cls) -> ToolRegistry:
        """Get or create the singleton registry with the git tools loaded."""
        if cls._instance is None:
            cls._instance = cls.with_git_tools(ToolContext.from_config())
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton instance. Useful for testing."""
        cls._instance = None

    @classmethod
    def with_git_tools(cls, context: ToolContext | None = None) -> ToolRegistry:
        """Build a registry holding every git tool."""
        import git_tools

        registry = cls(context)
        for tool_def in git_tools.TOOLS:
            registry.register(tool_def, source_module=git_tools.MODULE_NAME)
        registry.register_system_prompt(git_tools.MODULE_NAME, git_tools.SYSTEM_PROMPT)
        logger.debug(
            f"Loaded {git_tools.MODULE_NAME} v{git_tools.MODULE_VERSION}: {registry.get_tool_names()}"
        )
        return registry

    def register(self, tool: ToolDef, source_module: str = "builtin") -> None:
        """Register a tool definition.

        Raises:
            ValueError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            existing_source = self._tool_sources.get(tool.name)
            raise ValueError(f"Tool '{tool.name}' already registered by '{existing_source}'")

        self._tools[tool.name] = tool
        self._tool_sources[tool.name] = source_module

    def register_system_prompt(self, module_name: str, prompt: str) -> None:
        """Register the usage guide of a tool module."""
        if prompt and prompt.strip():
            self._system_prompts[module_name] = prompt.strip()

    def get_tool(self, name: str) -> ToolDef | None:
        """Get a single tool definition by name."""
        return self._tools.get(name)

    def get_tools(self, format: str = "mcp") -> list[dict[str, Any]]:
        """Get all tool definitions.

        Args:
            format: Output format - "mcp", "openai", or "claude"

        Returns:
            List of tool definitions in the requested format
        """
        if format == "openai":
            return [tool.to_openai_format() for tool in self._tools.values()]
        if format == "claude":
            return [tool.to_claude_format() for tool in self._tools.values()]
        if format == "mcp":
            return [tool.to_mcp_format() for tool in self._tools.values()]
        raise ValueError(f"Unknown tool format '{format}'")

    def get_tool_names(self) -> list[str]:
        """Get list of all registered tool names."""
        return list(self._tools.keys())

    def get_system_prompts(self) -> str:
        """Get all system prompts joined with blank lines."""
        return "\n\n".join(self._system_prompts.values())

    async def execute(
        self,
        tool_name: str,
        arguments: Mapping[str, Any] | None,
        context: ToolContext | None = None,
    ) -> ToolResult:
        """Execute a tool by name.

        Args:
            tool_name: Name of the tool to execute
            arguments: Arguments to pass to the tool handler
            context: Execution settings (default: the registry's context)

        Returns:
            ToolResult holding git's output or the error
        """
        tool = self._tools.get(tool_name)
        if not tool:
            return ToolResult.failure(tool_name, UnknownToolError(tool_name, self.get_tool_names()))

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, Mapping):
            return ToolResult.failure(
                tool_name, GitValidationError("Tool arguments must be an object")
            )

        try:
            text = await tool.handler(dict(arguments), context or self.context)
        except GitToolError as e:
            if e.kind in ("validation", "composition"):
                logger.info(f"Rejected: {e}", extra={"tool": tool_name})
            return ToolResult.failure(tool_name, e)
        except Exception as e:
            logger.exception("Error executing tool", extra={"tool": tool_name})
            return ToolResult.failure(tool_name, GitToolError(f"Error executing {tool_name}: {e}"))

        return ToolResult.success(tool_name, text)

    def __len__(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)

    def __contains__(self, tool_name: str) -> bool:
        """Check if a tool is registered."""
        return tool_name in self._tools
