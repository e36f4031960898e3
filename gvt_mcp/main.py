"""
Entry points for the GVT MCP server and the `gvt` command line.

This module handles environment loading and logging configuration before
handing control to the server or the CLI dispatcher.
"""

import logging
import os
import sys

from dotenv import load_dotenv


def setup_environment(default_log_level: str = "INFO") -> bool:
    """
    Loads environment variables and configures application-wide logging.
    It's expected that the correct .env file is loaded by the process runner (e.g., uv).

    Logs go to stderr so the CLI keeps stdout for command output.
    """
    load_dotenv()  # Load environment variables from .env file.

    log_level = os.environ.get("LOG_LEVEL", default_log_level).upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.debug("Environment and logging configured.")
    return True


def run_server() -> None:
    """
    Sets up the environment and runs the MCP server.
    """
    if not setup_environment():
        logging.critical("Initial environment setup failed. Exiting.")
        sys.exit(1)

    # Import server components after setup to ensure environment is loaded first.
    from .server import mcp_app, server_config

    logger = logging.getLogger(__name__)
    logger.info("--- GVT MCP Server ---")
    logger.info("Starting server with transport: %s", server_config.MCP_TRANSPORT)
    if server_config.MCP_TRANSPORT != "stdio":
        logger.info(
            "Server will listen on: %s:%s",
            server_config.MCP_HOST,
            server_config.MCP_PORT,
        )

    mcp_app.run(transport=server_config.MCP_TRANSPORT)


def run_cli() -> None:
    """
    Sets up the environment, runs one `gvt` command and exits with its code.
    """
    # Only problems are logged by default; results are printed by the CLI itself.
    setup_environment(default_log_level="WARNING")

    from .cli import run

    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    run_server()
