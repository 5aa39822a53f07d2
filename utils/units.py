#!/usr/bin/env python3
"""
Unit utilities for the temperature server.
Maps free-text unit names onto the two tokens the backend understands.
"""

from enum import Enum


class Unit(str, Enum):
    """Canonical unit tokens sent as the ``units`` query parameter."""

    METRIC = "metric"
    IMPERIAL = "imperial"


DEFAULT_UNIT = Unit.METRIC

# Keys are lower-case; lookups fold the caller's input first.
UNIT_ALIASES = {
    "celsius": Unit.METRIC,
    "c": Unit.METRIC,
    "metric": Unit.METRIC,
    "fahrenheit": Unit.IMPERIAL,
    "f": Unit.IMPERIAL,
    "imperial": Unit.IMPERIAL,
}


def normalize_unit(raw) -> Unit:
    """
    Normalize a caller-supplied unit into a ``Unit``.

    Absent, empty, non-string and unrecognized values all fall back to
    ``DEFAULT_UNIT``. This never raises.
    """
    if not isinstance(raw, str) or not raw:
        return DEFAULT_UNIT
    return UNIT_ALIASES.get(raw.lower(), DEFAULT_UNIT)
