"""
Pytest fixtures for the Volta designer engine.

This module provides:
1. Settings fixtures (isolated from the developer's environment)
2. Component registry fixtures
3. Designer session fixtures
"""

import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.helpers.factories import make_layout, make_registry, make_two_zone_layout  # noqa: E402
from volta.config import Settings, get_settings  # noqa: E402
from volta.services.designer_session import DesignerSession  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="testing", _env_file=None)


@pytest.fixture
def registry():
    return make_registry()


@pytest.fixture
def session(settings, registry) -> DesignerSession:
    """Session on a layout with a single empty 'main' zone."""
    return DesignerSession(make_layout(), registry=registry, settings=settings)


@pytest.fixture
def two_zone_session(settings, registry) -> DesignerSession:
    """Session on a layout with zones 'left' (a, b, c) and 'right' (x)."""
    return DesignerSession(make_two_zone_layout(), registry=registry, settings=settings)
