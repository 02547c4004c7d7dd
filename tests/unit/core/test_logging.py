"""
Unit tests for configure_logging.
"""

import logging

import pytest

from volta.core.logging import configure_logging


@pytest.fixture(autouse=True)
def restore_package_level():
    yield
    logging.getLogger("volta").setLevel(logging.NOTSET)


def test_configure_logging_sets_package_level():
    configure_logging("DEBUG")
    assert logging.getLogger("volta").level == logging.DEBUG
    configure_logging("WARNING")
    assert logging.getLogger("volta").level == logging.WARNING


def test_configure_logging_uses_debug_flag(monkeypatch):
    monkeypatch.setenv("VOLTA_DEBUG", "true")
    configure_logging()
    assert logging.getLogger("volta").level == logging.DEBUG
