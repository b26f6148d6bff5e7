"""Pytest configuration and fixtures for dbtemporal tests."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import pytest

# Add the parent directory to sys.path so dbtemporal can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(params=["UTC", "America/New_York", "Asia/Kolkata", "Pacific/Kiritimati"])
def host_timezone(request, monkeypatch):
    """Run a test under several host timezone settings."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", request.param)
    time.tzset()
    yield request.param
    monkeypatch.undo()
    time.tzset()
