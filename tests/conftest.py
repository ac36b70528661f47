"""Pytest configuration and fixtures."""

import logging

import pytest

from matchkit.config import MatchkitConfig, set_config


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up matchkit loggers after each test so handlers do not leak."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("matchkit")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against the default configuration."""
    previous = set_config(MatchkitConfig())
    yield
    set_config(previous)
