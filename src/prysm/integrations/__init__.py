"""Agent framework integrations.

Available integrations:
- prysm.integrations.mcp - MCP (Model Context Protocol) server
"""
