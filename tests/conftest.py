"""Shared pytest configuration for icalviewer_lite tests."""

from collections.abc import Generator
from typing import Any

import pytest


# Configure pytest markers
def pytest_configure(config: Any) -> None:
    """Configure pytest with optimized markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "critical_path: Core functionality tests")
    config.addinivalue_line("markers", "smoke: Basic smoke tests")


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Ensure icalviewer environment variables do not leak into tests."""
    for var in ("ICALVIEWER_DEBUG", "ICALVIEWER_LOG_LEVEL", "ICALVIEWER_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    yield
