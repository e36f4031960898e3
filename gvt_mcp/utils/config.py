"""Service configuration definition."""

from pathlib import Path

from pydantic_settings import BaseSettings

from gvt_mcp.tools.gvt import constants


class ServiceConfig(BaseSettings):
    """
    Defines the configuration for the MCP server and the CLI, loaded from
    environment variables or a .env file.
    """

    # MCP Server transport mechanism (e.g., "stdio", "sse", "streamable-http")
    MCP_TRANSPORT: str = "stdio"
    # Host for the MCP server to bind to. Defaults to 0.0.0.0 for accessibility.
    MCP_HOST: str = "0.0.0.0"
    # Port for the MCP server to listen on.
    MCP_PORT: int = 8660

    # Name of the hidden directory holding the versioning state.
    GVT_DIR_NAME: str = constants.DEFAULT_REPOSITORY_DIR
    # If set, tool calls may only operate on directories inside this root.
    GVT_WORKSPACE_ROOT: Path | None = None
    # Number of versions listed by `history` when no limit is given; 0 lists all.
    GVT_DEFAULT_HISTORY_LIMIT: int = 0

    class Config:
        """Pydantic configuration settings."""

        # We do not specify env_file here.
        # Environment loading is handled explicitly in main.py and cli.py via
        # load_dotenv to ensure the correct .env file is used.
        extra = "ignore"
