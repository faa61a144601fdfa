"""
Pytest configuration and fixtures for the test suite.

This file is automatically loaded by pytest before running tests.
It disables Langfuse tracing to prevent sending traces during test runs.
"""

import os
import logging
from io import BytesIO

import pytest
from PIL import Image

# Disable Langfuse tracing before any test modules import Langfuse
os.environ["LANGFUSE_TRACING_ENABLED"] = "false"
os.environ.setdefault("TESTING", "true")

_langfuse_logger = logging.getLogger("langfuse")
_langfuse_logger.setLevel(logging.CRITICAL)
_langfuse_logger.propagate = False


@pytest.fixture
def png_bytes() -> bytes:
    """A real 10x10 PNG."""
    buffer = BytesIO()
    Image.new("RGB", (10, 10), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()
