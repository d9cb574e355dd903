"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import strawberry

from campus.services import MutationService
from campus.store import EntityStore


@pytest.fixture
def store() -> EntityStore:
    """A freshly seeded entity store per test."""
    return EntityStore.seeded()


@pytest.fixture
def mutations(store: EntityStore) -> MutationService:
    return MutationService(store)


@pytest.fixture
def mock_info(store: EntityStore) -> MagicMock:
    """Create a mock GraphQL info object carrying the store in its context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
