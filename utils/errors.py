#!/usr/bin/env python3
"""
Error types for the temperature tool.

Every failure derives from FastMCP's ToolError so the server reports it to
the caller as an error result instead of a protocol fault.
"""

from mcp.server.fastmcp.exceptions import ToolError


class TemperatureToolError(ToolError):
    """Base class for get_temperature failures."""


class InvalidArgumentError(TemperatureToolError):
    """A required argument is missing or has the wrong type."""


class UpstreamUnreachableError(TemperatureToolError):
    """The temperature service could not be reached."""


class UpstreamStatusError(TemperatureToolError):
    """The temperature service answered with a non-200 status."""

    def __init__(self, status_code: int, status_text: str):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"temperature service returned status: {status_text}")


class UpstreamReadError(TemperatureToolError):
    """The response body could not be read after a 200 status."""


class LoggingSetupError(Exception):
    """The log directory or log file could not be created."""
