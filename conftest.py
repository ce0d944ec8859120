"""Root conftest for pytest configuration and shared fixtures.

Loaded before both testpaths (tests/ and cio_tracker/), so the fixtures are
available to centralized tests and colocated adapter tests alike.
"""

import logging
import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any cio_tracker module import.
# Uses setdefault so real env vars are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("CIO_LOG_LEVEL", "DEBUG")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_identity():
    """Fake identity provider for customer "42"."""
    from cio_tracker.adapters.identity.fake import FakeIdentityProvider

    return FakeIdentityProvider("42", {"email": "ada@example.com", "plan": "free"})


@pytest.fixture
def anonymous_identity():
    """Fake identity provider with no customer id."""
    from cio_tracker.adapters.identity.fake import FakeIdentityProvider

    return FakeIdentityProvider(None, {"email": "ghost@example.com"})


@pytest.fixture
def cio_caplog(caplog, monkeypatch):
    """caplog that also receives records from the non-propagating cio_tracker logger."""
    monkeypatch.setattr(logging.getLogger("cio_tracker"), "propagate", True)
    return caplog
