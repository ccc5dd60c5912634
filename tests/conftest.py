"""
Shared pytest fixtures.
"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration made by a test."""
    yield
    structlog.reset_defaults()
