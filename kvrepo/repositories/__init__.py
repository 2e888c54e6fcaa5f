"""
Repository layer - Data access abstractions.

This layer provides the repository contract and its key/value store
implementation, hiding serialization and key layout from callers.
"""

from kvrepo.repositories.accounts import AccountRepository
from kvrepo.repositories.base import IRepository
from kvrepo.repositories.in_memory import (
    InMemoryRepo,
    get_in_memory_repo,
    reset_in_memory_repo,
)
from kvrepo.repositories.key_value_repository import KeyValueRepository
from kvrepo.repositories.todos import TodoRepository

__all__ = [
    "AccountRepository",
    "IRepository",
    "InMemoryRepo",
    "KeyValueRepository",
    "TodoRepository",
    "get_in_memory_repo",
    "reset_in_memory_repo",
]
