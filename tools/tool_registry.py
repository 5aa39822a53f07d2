#!/usr/bin/env python3
"""
Tool registry for the temperature MCP server.
Centralizes tool registration and management.
"""

from mcp.server.fastmcp import FastMCP

from tools.temperature import register_temperature_tool


def register_all_tools(app: FastMCP, logger=None, http_client=None):
    """Register all temperature server tools with the FastMCP app."""

    register_temperature_tool(app, logger=logger, http_client=http_client)
