"""A minimal local version-control tool exposed as an MCP server and a CLI."""

__version__ = "0.1.0"
