"""
In-memory repository container.

``InMemoryRepo`` owns one ``KeyValueStore`` and a repository per record
type, all writing to that same store under disjoint key prefixes.
"""

import logging
from typing import Any, Dict, List, Optional, Type

import structlog

from kvrepo.codecs import Codec, get_codec
from kvrepo.config import Settings, get_settings
from kvrepo.domain.exceptions import RepositoryException
from kvrepo.repositories.accounts import AccountRepository
from kvrepo.repositories.key_value_repository import KeyValueRepository
from kvrepo.repositories.todos import TodoRepository
from kvrepo.store import KeyValueStore

logger = structlog.wrap_logger(logging.getLogger(__name__))


class InMemoryRepo:
    """
    Shared store plus the repositories that use it.

    Attributes:
        kv_store: The store shared by every registered repository
        accounts: Repository for ``Account`` records
        todos: Repository for ``Todo`` records
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        codec: Optional[Codec] = None,
    ):
        """
        Create an empty store and the built-in repositories.

        Args:
            settings: Settings to use (default: process-wide settings)
            codec: Codec shared by the built-in repositories
                (default: the codec named by ``settings.CODEC``)
        """
        settings = settings or get_settings()
        codec = codec if codec is not None else get_codec(settings.CODEC)

        self.kv_store = KeyValueStore()
        self._repositories: Dict[Type[Any], KeyValueRepository[Any]] = {}

        self.accounts = self.register(
            AccountRepository(self.kv_store, codec=codec, settings=settings)
        )
        self.todos = self.register(
            TodoRepository(self.kv_store, codec=codec, settings=settings)
        )

        logger.debug(
            "in_memory_repo_created",
            codec=type(codec).__name__,
        )

    def register(self, repository: KeyValueRepository[Any]) -> KeyValueRepository[Any]:
        """
        Add a repository for another record type.

        The repository must have been built on this container's store, which
        has already checked its prefix against the others.

        Args:
            repository: Repository bound to ``self.kv_store``

        Returns:
            The registered repository

        Raises:
            RepositoryException: If the repository uses another store or its
                record type is already registered
        """
        if repository.kv_store is not self.kv_store:
            raise RepositoryException(
                f"{repository!r} is bound to a different store",
                details={"record_type": repository.record_type.__name__},
            )
        if repository.record_type in self._repositories:
            raise RepositoryException(
                f"A repository for {repository.record_type.__name__} is already registered",
                details={"record_type": repository.record_type.__name__},
            )

        self._repositories[repository.record_type] = repository
        return repository

    def for_type(self, record_type: Type[Any]) -> KeyValueRepository[Any]:
        """
        Get the repository handling a record type.

        Args:
            record_type: Record class, e.g. ``Account``

        Returns:
            The repository registered for that type

        Raises:
            RepositoryException: If no repository handles the type
        """
        repository = self._repositories.get(record_type)
        if repository is None:
            raise RepositoryException(
                f"No repository registered for {getattr(record_type, '__name__', record_type)}",
                details={"record_type": getattr(record_type, "__name__", str(record_type))},
            )
        return repository

    @property
    def record_types(self) -> List[Type[Any]]:
        """Record types with a registered repository."""
        return list(self._repositories)


# Global repository instance
_in_memory_repo: Optional[InMemoryRepo] = None


def get_in_memory_repo() -> InMemoryRepo:
    """
    Get or create the global in-memory repository container.

    Returns:
        Global InMemoryRepo instance
    """
    global _in_memory_repo

    if _in_memory_repo is None:
        _in_memory_repo = InMemoryRepo()

    return _in_memory_repo


def reset_in_memory_repo() -> None:
    """Drop the global container; the next access starts from an empty store."""
    global _in_memory_repo
    _in_memory_repo = None
