"""
MCP server definition for the GVT MCP.
"""

import logging
from typing import Any, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.applications import Starlette
from starlette.middleware import Middleware

from mcp.server.fastmcp import Context, FastMCP

from gvt_mcp.prompts import get_all_prompts
from gvt_mcp.utils.config import ServiceConfig
from gvt_mcp.utils.dependencies import get_base_config, get_gvt_tool_provider


# Get a module-level logger
logger = logging.getLogger(__name__)


class CustomFastMCP(FastMCP):
    """Custom FastMCP server with CORS middleware."""

    def _add_cors_middleware(self, app: Starlette) -> Starlette:
        """A helper to add CORS middleware to a Starlette app."""
        app.user_middleware.insert(
            0,
            Middleware(
                CORSMiddleware,
                allow_origin_regex=".*",  # Allow any origin
                allow_credentials=True,
                allow_methods=["*"],
                allow_headers=["*"],
            ),
        )
        app.middleware_stack = app.build_middleware_stack()
        return app

    def sse_app(self, mount_path: str | None = None) -> Starlette:
        """Overrides the default sse_app to inject CORS middleware."""
        app = super().sse_app(mount_path)
        return self._add_cors_middleware(app)

    def streamable_http_app(self) -> Starlette:
        """Overrides the default streamable_http_app to inject CORS middleware."""
        app = super().streamable_http_app()
        return self._add_cors_middleware(app)


def build_server(config: ServiceConfig) -> CustomFastMCP:
    """Build and configure the FastMCP server instance.

    Args:
        config: The server's service configuration.

    Returns:
        A configured CustomFastMCP instance.
    """
    logger.info(
        "Initializing FastMCP server",
        extra={"host": config.MCP_HOST, "port": config.MCP_PORT},
    )
    return CustomFastMCP(
        "gvt-mcp",
        host=config.MCP_HOST,
        port=config.MCP_PORT,
    )

# Get the base configuration for server initialization.
# This is also imported by main.py to run the server.
server_config = get_base_config()
mcp_app = build_server(server_config)


# --- Prompt Handlers ---
@mcp_app.prompt(title="Agent System Prompt for GVT")
def get_system_prompt() -> str:
    """Provides the main system prompt for the agent."""
    prompts = get_all_prompts()
    return prompts["agent-system-prompt"]

# --- Tool Definitions ---

@mcp_app.tool(name="gvt")
async def gvt_tool(
    context: Context,
    command: str,
    path: str,
    file: Optional[str] = None,
    message: Optional[str] = None,
    version: Optional[str] = None,
    limit: Optional[int] = None,
) -> dict[str, Any]:
    """
    Keeps a linear history of full snapshots of files in a local directory.
    Each add, detach and commit records exactly one new version; checkout restores files without recording anything.

    Args:
        command: The operation to run. Must be one of: 'init', 'add', 'detach', 'commit', 'checkout', 'version', 'history', 'status'.
        path: The absolute path to the directory under version control.
        file: For 'add', 'detach' and 'commit'. The file path relative to `path`.
        message: For 'add', 'detach' and 'commit'. The message stored with the new version. A default is used if omitted.
        version: For 'checkout' (required) and 'version' (defaults to the current version). The version number.
        limit: For 'history'. How many of the latest versions to list. 0 or omitted lists all.

    Returns:
        A dictionary containing the result of the operation and its exit code.
    """
    logger.info(f"Executing gvt command '{command}' on path '{path}'")
    try:
        tool = get_gvt_tool_provider()
        args = {
            "command": command,
            "path": path,
            "file": file,
            "message": message,
            "version": version,
            "limit": limit,
        }
        args = {k: v for k, v in args.items() if v is not None}

        result = await tool.execute(args)
        if result.error:
            return {"status": "error", "error": result.error, "exit_code": result.error_code}
        return {"status": "success", "result": result.output, "exit_code": result.error_code}

    except Exception as e:
        logger.error(f"Error executing gvt command: {e}", exc_info=True)
        return {"status": "error", "error": str(e), "exit_code": 1}
