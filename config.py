#!/usr/bin/env python3
"""
Configuration module for the Temperature MCP server.
Centralizes the backend endpoint, API key lookup, and log settings.
"""

import os
from pathlib import Path


class Config:
    """Configuration class for temperature server settings."""

    # Server Settings
    SERVER_NAME = "Temperature Service 🌡️"
    SERVER_VERSION = "1.0.0"

    # Backend Settings
    TEMPERATURE_SERVICE_URL = os.getenv(
        "TEMPERATURE_SERVICE_URL", "http://localhost:8080/temperature"
    )
    WEATHER_API_KEY_ENV = "WEATHER_API_KEY"

    # Log Settings
    LOG_DIR = os.getenv(
        "LOG_DIR",
        str(Path.home() / "Library" / "Logs" / "mcp-temperature-server"),
    )
    LOG_FILE_NAME = "server.log"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_weather_api_key(cls):
        """Read the backend API key; looked up on every call, may be empty."""
        return os.getenv(cls.WEATHER_API_KEY_ENV, "")

    @classmethod
    def has_weather_api_key(cls):
        """Check if the backend API key is configured."""
        return bool(cls.get_weather_api_key())

    @classmethod
    def get_log_file(cls, log_dir=None):
        """Resolve the log file path, optionally under a different directory."""
        return Path(log_dir or cls.LOG_DIR).expanduser() / cls.LOG_FILE_NAME
