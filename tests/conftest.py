"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def reset_handler_client() -> Iterator[None]:
    """Drop the process-wide handler client so tests never share one."""
    from handlers.runtime import get_client

    get_client.cache_clear()
    yield
    get_client.cache_clear()
