import logging

import httpx
import pytest

from tests.backends import RecordingBackend
from utils.logging_setup import TOOL_LOGGER_NAME


@pytest.fixture(autouse=True)
def _clear_api_key(monkeypatch):
    monkeypatch.delenv("WEATHER_API_KEY", raising=False)
    yield


@pytest.fixture
def backend():
    return RecordingBackend(
        body=b'{"location":"Chapel Hill","temperature":18.25}'
    )


@pytest.fixture
def make_client():
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    tool_logger = logging.getLogger(TOOL_LOGGER_NAME)
    saved_tool_level = tool_logger.level
    yield
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    tool_logger.setLevel(saved_tool_level)
