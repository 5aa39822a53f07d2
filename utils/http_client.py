#!/usr/bin/env python3
"""
HTTP client utilities for the temperature server.
Provides a shared HTTP client for calls to the temperature service.
"""

import httpx

_http_client: httpx.AsyncClient = None


def get_http_client() -> httpx.AsyncClient:
    """Get the shared HTTP client instance (httpx default timeout, redirects followed)."""
    global _http_client
    if _http_client is None:
        _http_client = httpx.AsyncClient(follow_redirects=True)
    return _http_client


async def close_http_client():
    """Close the shared HTTP client."""
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
