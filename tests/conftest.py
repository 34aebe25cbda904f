"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from resultkit import config as config_module

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            config_module, "load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_resultkit_env(monkeypatch):
    """Clear RESULTKIT_* env vars and the active config around each test."""
    for key in list(os.environ.keys()):
        if key.startswith("RESULTKIT_"):
            monkeypatch.delenv(key, raising=False)
    config_module.reset_config()
    yield
    config_module.reset_config()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def verbose_library_logging():
    """Let caplog see resultkit DEBUG records."""
    logging.getLogger("resultkit").setLevel(logging.DEBUG)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def no_provenance():
    """Disable stack capture for the duration of a test."""
    return config_module.configure(capture_provenance=False)
