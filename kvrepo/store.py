"""
Shared in-memory byte store.

A single ``KeyValueStore`` holds the serialized records of every record
type. Each record type claims exactly one key prefix on it so entries of
different types never collide. The store lives only as long as the
process.
"""

import logging
from typing import Dict, List, Optional

import structlog

from kvrepo.domain.exceptions import PrefixCollisionException

logger = structlog.wrap_logger(logging.getLogger(__name__))


class KeyValueStore:
    """
    Mapping of store key to serialized record bytes.

    Last write wins on overwrite; entries are only removed by ``pop`` or
    ``clear``.

    The store does no locking. Callers sharing it between threads must
    synchronize access themselves.

    Attributes:
        hits: Number of lookups that found an entry
        misses: Number of lookups that found nothing
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._data: Dict[str, bytes] = {}
        self._prefixes: Dict[str, type] = {}

        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Namespaces
    # ------------------------------------------------------------------

    def register_prefix(self, prefix: str, record_type: type) -> None:
        """
        Claim a key prefix for one record type.

        A record type owns a single prefix. Registering the same pair again
        is a no-op.

        Args:
            prefix: Key prefix, e.g. "account:"
            record_type: Record class claiming the prefix

        Raises:
            PrefixCollisionException: If the prefix is empty, overlaps a
                prefix owned by another record type, or the record type
                already owns a different prefix
        """
        if not prefix:
            raise PrefixCollisionException(prefix)

        for existing, owner in self._prefixes.items():
            if owner is record_type:
                if existing == prefix:
                    return
                raise PrefixCollisionException(prefix, existing, owner=record_type.__name__)

        for existing in self._prefixes:
            if existing.startswith(prefix) or prefix.startswith(existing):
                raise PrefixCollisionException(prefix, existing)

        self._prefixes[prefix] = record_type
        logger.debug("prefix_registered", prefix=prefix, record_type=record_type.__name__)

    @property
    def prefixes(self) -> Dict[str, type]:
        """Registered prefixes mapped to their record types."""
        return dict(self._prefixes)

    # ------------------------------------------------------------------
    # Entries
    # ------------------------------------------------------------------

    def get(self, key: str) -> Optional[bytes]:
        """
        Look up the bytes stored under a key.

        Args:
            key: Full store key

        Returns:
            Stored bytes, or None if the key is absent
        """
        data = self._data.get(key)
        if data is None:
            self.misses += 1
            return None

        self.hits += 1
        return data

    def put(self, key: str, data: bytes) -> None:
        """
        Insert or overwrite the bytes stored under a key.

        Args:
            key: Full store key
            data: Serialized record
        """
        self._data[key] = data

    def pop(self, key: str) -> bool:
        """
        Remove a key.

        Args:
            key: Full store key

        Returns:
            True if an entry was removed, False if the key was absent
        """
        return self._data.pop(key, None) is not None

    def keys(self, prefix: str = "") -> List[str]:
        """Return the stored keys, optionally limited to one prefix."""
        return [key for key in self._data if key.startswith(prefix)]

    def clear(self) -> None:
        """Remove every entry. Registered prefixes are kept."""
        count = len(self._data)
        self._data.clear()
        logger.debug("store_cleared", count=count)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def get_stats(self) -> Dict[str, int]:
        """
        Get store statistics.

        Returns:
            Dictionary with size and lookup counters
        """
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0

        return {
            "size": len(self._data),
            "hits": self.hits,
            "misses": self.misses,
            "total_requests": total_requests,
            "hit_rate_percent": int(round(hit_rate)),
        }
