"""Shared test fixtures."""

from __future__ import annotations

import pytest

from selectorkit.config.settings import get_settings
from selectorkit.selector.builder import SelectorBuilder, css_selector_builder


@pytest.fixture()
def builder() -> SelectorBuilder:
    """The shared facade every chain starts from."""
    return css_selector_builder


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env overrides in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
