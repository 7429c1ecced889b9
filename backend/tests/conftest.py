"""Shared test configuration and pytest markers."""

import pytest

from services.pipeline.registry import clear as clear_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "cascade: rule-priority collisions in the career cascade"
    )


@pytest.fixture(autouse=True)
def _reset_registry():
    """Start every test with freshly built pipeline stages."""
    clear_registry()
    yield
    clear_registry()
