"""FastAPI backend exposing the git tools over HTTP."""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from git_tools import ToolRegistry, UnknownToolError
from gitmcp_core import get_config, get_version
from logging_config import get_logger

logger = get_logger("api")

# HTTP status per error kind
ERROR_STATUS = {
    "validation": 400,
    "composition": 400,
    "command": 422,
    "execution": 502,
    "internal": 500,
}

app = FastAPI(title="git-mcp API", version=get_version())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Log validation errors before returning 422."""
    logger.warning(
        f"Validation error on {request.url}",
        extra={"errors": str(exc.errors())[:500]},
    )
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors()},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().cors_origin_list(),
    allow_credentials=bool(get_config().cors_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)


class ToolCallRequest(BaseModel):
    arguments: dict[str, Any] = Field(default_factory=dict)


class ToolCallResponse(BaseModel):
    tool: str
    ok: bool
    text: str


def get_registry() -> ToolRegistry:
    return ToolRegistry.get_instance()


def unknown_tool(tool_name: str) -> HTTPException:
    error = UnknownToolError(tool_name, get_registry().get_tool_names())
    return HTTPException(status_code=404, detail={"kind": error.kind, "message": error.message})


@app.get("/health")
def health():
    return {"status": "ok", "version": get_version(), "tools": len(get_registry())}


@app.get("/api/tools")
def list_tools(format: str = "mcp"):
    """List tool descriptors in MCP, OpenAI or Claude format."""
    try:
        tools = get_registry().get_tools(format=format)
    except ValueError as e:
        raise HTTPException(status_code=400, detail={"kind": "validation", "message": str(e)})
    return {"tools": tools}


@app.get("/api/tools/{tool_name}")
def get_tool(tool_name: str):
    tool = get_registry().get_tool(tool_name)
    if tool is None:
        raise unknown_tool(tool_name)
    return tool.to_mcp_format()


@app.post("/api/tools/{tool_name}", response_model=ToolCallResponse)
async def call_tool(tool_name: str, request: ToolCallRequest):
    """Run a git tool and return its text output."""
    registry = get_registry()
    if tool_name not in registry:
        raise unknown_tool(tool_name)

    result = await registry.execute(tool_name, request.arguments)
    if not result.ok:
        raise HTTPException(
            status_code=ERROR_STATUS.get(result.kind, 500),
            detail={"kind": result.kind, "message": result.text},
        )

    return ToolCallResponse(tool=result.tool, ok=True, text=result.text)


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(app, host=config.api_host, port=config.api_port)
