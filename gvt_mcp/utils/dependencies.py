"""
Configuration and dependency management for the GVT MCP server.
"""

import logging
from functools import lru_cache

from gvt_mcp.tools.gvt.manager import RepositoryManager
from gvt_mcp.tools.gvt_tool import GvtTool
from gvt_mcp.utils.config import ServiceConfig

logger = logging.getLogger(__name__)


@lru_cache
def get_base_config() -> ServiceConfig:
    """
    Retrieves the base server configuration from environment variables.

    This function is cached to avoid repeatedly reading and parsing environment
    variables and .env files.

    Returns:
        A cached instance of the ServiceConfig.
    """
    return ServiceConfig()


# --- Tool Providers ---

@lru_cache
def get_repository_manager() -> RepositoryManager:
    """Returns a singleton instance of the RepositoryManager."""
    logger.info("Initializing RepositoryManager singleton.")
    return RepositoryManager(dir_name=get_base_config().GVT_DIR_NAME)


@lru_cache
def get_gvt_tool_provider() -> GvtTool:
    """Returns a cached instance of the GvtTool wired to the shared RepositoryManager."""
    logger.info("Initializing GvtTool singleton.")
    config = get_base_config()
    return GvtTool(
        repository_manager=get_repository_manager(),
        workspace_root=config.GVT_WORKSPACE_ROOT,
        default_history_limit=config.GVT_DEFAULT_HISTORY_LIMIT,
    )
