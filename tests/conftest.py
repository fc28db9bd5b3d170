"""Pytest configuration and shared fixtures for configurator tests."""

from __future__ import annotations

import pytest

from configurator.application.session import ConfiguratorSession
from configurator.domain.entities import Configuration, default_configuration


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def default_config() -> Configuration:
    """The shipped baseline configuration."""
    return default_configuration()


@pytest.fixture
def session() -> ConfiguratorSession:
    """A fresh session starting from the baseline."""
    return ConfiguratorSession()
