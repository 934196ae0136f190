"""Common pytest fixtures used across multiple test files.

This module provides reusable fixtures to reduce duplication and
ensure consistency across the test suite.
"""

import random

import pytest
from fastapi.testclient import TestClient

from rollout_target.core.config import Settings, get_settings
from rollout_target.main import create_app
from tests.fixtures.common_mocks import RecordingSleep

TEST_HOSTNAME = "rollout-target-test-pod"
TEST_VERSION = "2.0"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Makes every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recording_sleep():
    """Provide a sleeper that records injected delays without waiting."""
    return RecordingSleep()


@pytest.fixture
def make_settings():
    """Provide a factory for settings with a fixed identity.

    Returns:
        A callable accepting a behavior mode and extra flat settings.
    """

    def _make(behavior: str = "normal", **overrides) -> Settings:
        values = {"version": TEST_VERSION, "hostname": TEST_HOSTNAME, "behavior": behavior}
        values.update(overrides)
        return Settings(**values)

    return _make


@pytest.fixture
def make_client(make_settings, recording_sleep):
    """Provide a factory building a TestClient for a behavior mode.

    By default the behavior engine draws from a seeded ``random.Random`` and
    pauses with the recording sleeper, so tests run fast and reproducibly.

    Returns:
        A callable returning a ``TestClient``.
    """

    def _make(behavior: str = "normal", random_source=None, sleep=None, **overrides) -> TestClient:
        app = create_app(
            make_settings(behavior, **overrides),
            random_source=random_source if random_source is not None else random.Random(1234),
            sleep=sleep if sleep is not None else recording_sleep,
            content_random_source=random.Random(99),
        )
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client):
    """Provide a TestClient for a normal-mode instance."""
    return make_client("normal")
