"""Shared fixtures for rustype tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, settings
from rustype import Err, Nothing, Ok, Some
from rustype._config import COPY_MODE_ENV, reset
from rustype._logging import clear_event_hooks, reset_logging

if TYPE_CHECKING:
    from collections.abc import Generator

# The autouse reset below runs once per test, not per example; property tests
# never touch the configuration.
settings.register_profile('rustype', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('rustype')


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from the default configuration with logging unconfigured and no event hooks."""
    monkeypatch.delenv(COPY_MODE_ENV, raising=False)
    reset()
    reset_logging()
    clear_event_hooks()
    yield
    reset()
    reset_logging()
    clear_event_hooks()


@pytest.fixture
def sample_some():
    return Some([1, 2, 3])


@pytest.fixture
def sample_nothing():
    return Nothing


@pytest.fixture
def sample_ok():
    return Ok({'status': 200})


@pytest.fixture
def sample_err():
    return Err('boom')
