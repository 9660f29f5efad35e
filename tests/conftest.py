"""
Shared pytest configuration.

Settings are cached process-wide, so every test starts and ends with a
fresh cache to keep environment overrides from leaking between tests.
"""

import pytest

from expense_tracker.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
