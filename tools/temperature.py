#!/usr/bin/env python3
"""
Temperature tool for the temperature server.
Proxies get_temperature calls to the HTTP temperature service.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Annotated, Any, Optional
from urllib.parse import quote, urlencode

import httpx
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config import Config
from utils.errors import (
    InvalidArgumentError,
    UpstreamReadError,
    UpstreamStatusError,
    UpstreamUnreachableError,
)
from utils.http_client import get_http_client
from utils.logging_setup import TOOL_LOGGER_NAME, redact_api_key
from utils.units import Unit, normalize_unit

TOOL_NAME = "get_temperature"
TOOL_DESCRIPTION = "Get the temperature for a given location"


@dataclass(frozen=True)
class TemperatureRequest:
    """A validated get_temperature invocation."""

    location: str
    unit: Unit


def parse_arguments(arguments) -> TemperatureRequest:
    """Validate the raw argument mapping; raises InvalidArgumentError."""
    location = arguments.get("location") if arguments else None
    if not isinstance(location, str) or not location:
        raise InvalidArgumentError("location must be a non-empty string")
    return TemperatureRequest(location=location, unit=normalize_unit(arguments.get("unit")))


def build_temperature_url(endpoint, location, unit, api_key) -> str:
    """Build the backend URL; every query value is percent-encoded."""
    query = urlencode(
        {"location": location, "units": Unit(unit).value, "appid": api_key or ""},
        quote_via=quote,
    )
    return f"{endpoint}?{query}"


def _status_line(response: httpx.Response) -> str:
    return f"{response.status_code} {response.reason_phrase}".rstrip()


def _log(logger, level, msg, *args):
    """Log without letting a broken sink fail the invocation."""
    try:
        logger.log(level, msg, *args)
    except Exception as e:
        print(f"Warning: Could not write log record: {e}", file=sys.stderr)


async def fetch_temperature(
    arguments,
    *,
    client: httpx.AsyncClient,
    logger: Optional[logging.Logger] = None,
    api_key: Optional[str] = None,
    endpoint: Optional[str] = None,
) -> str:
    """
    Run one get_temperature invocation against the temperature service.

    Args:
        arguments: Raw argument mapping as delivered by the transport.
        client: HTTP client used for the single outbound GET.
        logger: Diagnostic sink; defaults to the tool logger.
        api_key: Backend key; read from WEATHER_API_KEY when omitted.
        endpoint: Backend URL; defaults to Config.TEMPERATURE_SERVICE_URL.

    Returns:
        ``Temperature for <location>: <raw body>``.

    Raises:
        InvalidArgumentError, UpstreamUnreachableError, UpstreamStatusError,
        UpstreamReadError.
    """
    logger = logger or logging.getLogger(TOOL_LOGGER_NAME)
    _log(logger, logging.INFO, "[get_temperature] Received params: %r", arguments)

    try:
        request = parse_arguments(arguments)
    except InvalidArgumentError as e:
        _log(logger, logging.ERROR, "[get_temperature] ERROR: %s", e)
        raise

    if api_key is None:
        api_key = Config.get_weather_api_key()
    if not api_key:
        _log(
            logger,
            logging.WARNING,
            "[get_temperature] WARNING: %s is not set!",
            Config.WEATHER_API_KEY_ENV,
        )

    url = build_temperature_url(
        endpoint or Config.TEMPERATURE_SERVICE_URL,
        request.location,
        request.unit,
        api_key,
    )
    _log(logger, logging.INFO, "[get_temperature] Requesting URL: %s", redact_api_key(url))

    try:
        response = await client.send(
            client.build_request("GET", url), stream=True, follow_redirects=True
        )
    except httpx.RequestError as e:
        _log(logger, logging.ERROR, "[get_temperature] ERROR: failed to query temperature service: %s", e)
        raise UpstreamUnreachableError(f"failed to query temperature service: {e}") from e

    try:
        status = _status_line(response)
        _log(logger, logging.INFO, "[get_temperature] HTTP response status: %s", status)
        if response.status_code != httpx.codes.OK:
            _log(logger, logging.ERROR, "[get_temperature] ERROR: temperature service returned status: %s", status)
            raise UpstreamStatusError(response.status_code, status)
        try:
            await response.aread()
        except httpx.HTTPError as e:
            _log(logger, logging.ERROR, "[get_temperature] ERROR: failed to read response: %s", e)
            raise UpstreamReadError(f"failed to read response: {e}") from e
        body = response.text
    finally:
        await response.aclose()

    return f"Temperature for {request.location}: {body}"


def register_temperature_tool(app: FastMCP, logger=None, http_client=None):
    """Register the temperature tool with the FastMCP app."""

    @app.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def get_temperature(
        location: Annotated[
            str, Field(description="Name of the location to get the temperature for")
        ],
        # Any, so unexpected values reach normalize_unit instead of failing validation.
        unit: Annotated[
            Any,
            Field(
                description="Temperature unit: celsius/c/metric or "
                "fahrenheit/f/imperial (defaults to metric)",
                json_schema_extra={"type": "string"},
            ),
        ] = None,
    ) -> str:
        arguments = {"location": location}
        if unit is not None:
            arguments["unit"] = unit
        return await fetch_temperature(
            arguments,
            client=http_client or get_http_client(),
            logger=logger,
        )
