"""
kvrepo - typed repositories over a shared in-memory key/value store.

Records are serialized to bytes by a pluggable codec and stored under
namespaced keys (``account:<name>``, ``todo:<id>``) in a single store.
"""

from kvrepo.domain.entities import Account, Todo
from kvrepo.domain.exceptions import (
    ConfigurationException,
    DecodeException,
    EncodeException,
    PrefixCollisionException,
    RepositoryException,
)
from kvrepo.repositories import (
    AccountRepository,
    InMemoryRepo,
    KeyValueRepository,
    TodoRepository,
    get_in_memory_repo,
)
from kvrepo.store import KeyValueStore

__all__ = [
    "Account",
    "AccountRepository",
    "ConfigurationException",
    "DecodeException",
    "EncodeException",
    "InMemoryRepo",
    "KeyValueRepository",
    "KeyValueStore",
    "PrefixCollisionException",
    "RepositoryException",
    "Todo",
    "TodoRepository",
    "get_in_memory_repo",
]
