#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- Platform-specific test skipping (macOS/EventKit tests)
- Reminder factories and fixed timestamps shared across tests
"""

import os
import platform
import sys
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from reminder_export.core.models import Reminder

HAS_EVENTKIT = False

try:
    if platform.system() == "Darwin":
        import objc
        import EventKit
        HAS_EVENTKIT = True
except ImportError:
    pass


def pytest_configure(config):
    """Configure pytest environment."""
    config.addinivalue_line("markers", "macos: test requires macOS")
    config.addinivalue_line("markers", "eventkit: test requires EventKit framework")


def pytest_collection_modifyitems(config, items):
    """Skip macOS/EventKit tests where the platform cannot run them."""
    skip_macos = pytest.mark.skip(reason="macOS/EventKit tests require Darwin platform")
    skip_eventkit = pytest.mark.skip(reason="Test requires EventKit framework")

    for item in items:
        if "macos" in item.keywords and platform.system() != "Darwin":
            item.add_marker(skip_macos)
        if "eventkit" in item.keywords and not HAS_EVENTKIT:
            item.add_marker(skip_eventkit)


BASE_TIME = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def base_time() -> datetime:
    """Monday 15 January 2024, 10:30:00 UTC."""
    return BASE_TIME


@pytest.fixture
def make_reminder() -> Callable[..., Reminder]:
    """Factory for reminders with sensible defaults.

    Each call gets a fresh identifier and a creation date one minute after
    the previous call, unless given explicitly.
    """
    counter = {"n": 0}

    def factory(**overrides) -> Reminder:
        counter["n"] += 1
        n = counter["n"]
        fields = {
            "calendar_item_identifier": f"rem-{n}",
            "list_name": "Personal",
            "account_name": "iCloud",
            "title": f"Reminder {n}",
            "creation_date": BASE_TIME + timedelta(minutes=n),
        }
        fields.update(overrides)
        return Reminder(**fields)

    return factory
