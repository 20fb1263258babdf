"""MCP (Model Context Protocol) integration for Prysm.

This module provides an MCP server that exposes a schema builder
as tools for AI agents.

Example:
    # Run the MCP server
    python -m prysm.integrations.mcp.server --schema-dir ./prisma

    # Or via entry point (after pip install)
    prysm-mcp --schema-dir ./prisma
"""

from prysm.integrations.mcp.server import create_server, mcp

__all__ = ["mcp", "create_server"]
