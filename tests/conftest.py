"""
Test configuration and fixtures
"""

import pytest

from kvrepo.config import Settings, get_settings
from kvrepo.domain.entities import Account, Todo
from kvrepo.repositories import InMemoryRepo, reset_in_memory_repo
from kvrepo.store import KeyValueStore


@pytest.fixture(autouse=True)
def reset_globals():
    """Start every test without cached settings or a global repository."""
    get_settings.cache_clear()
    reset_in_memory_repo()
    yield
    get_settings.cache_clear()
    reset_in_memory_repo()


@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def kv_store():
    """Fresh, empty store."""
    return KeyValueStore()


@pytest.fixture
def repo(settings):
    """Fresh repository container with the built-in record types."""
    return InMemoryRepo(settings=settings)


@pytest.fixture
def sample_account():
    """Sample account record"""
    return Account(
        name="alice",
        email="alice@example.com",
        display_name="Alice Liddell",
    )


@pytest.fixture
def sample_todo():
    """Sample todo record"""
    return Todo(
        id="t1",
        title="Write report",
        description="Quarterly numbers",
        owner="alice",
        tags=["work", "q3"],
    )
