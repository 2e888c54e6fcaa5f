"""
Generic repository over the shared key/value store.

Each repository owns one key prefix on the store and converts records to
bytes on write and back on read through its codec.
"""

import logging
from typing import Generic, Optional, Type, TypeVar

import structlog
from pydantic import BaseModel

from kvrepo.codecs import Codec, JsonCodec
from kvrepo.domain.exceptions import DecodeException, RepositoryException
from kvrepo.repositories.base import IRepository
from kvrepo.store import KeyValueStore

logger = structlog.wrap_logger(logging.getLogger(__name__))

T = TypeVar("T", bound=BaseModel)


class KeyValueRepository(IRepository[T], Generic[T]):
    """
    Repository for one record type, namespaced by a key prefix.

    Store keys have the form ``{prefix}{natural_key}``. Registering the
    prefix on the store fails if another record type already uses an
    overlapping one.

    Attributes:
        kv_store: Shared byte store
        record_type: Record class handled by this repository
        prefix: Key prefix reserved for the record type
        key_field: Name of the record's natural-key field
        codec: Serializer used on every read and write
    """

    def __init__(
        self,
        kv_store: KeyValueStore,
        record_type: Type[T],
        prefix: str,
        key_field: str,
        codec: Optional[Codec] = None,
    ):
        """
        Initialize the repository and claim its prefix.

        Args:
            kv_store: Shared store, possibly used by other repositories
            record_type: Record class
            prefix: Key prefix for this record type
            key_field: Natural-key attribute on the record
            codec: Codec instance (default: JsonCodec)

        Raises:
            PrefixCollisionException: If the prefix overlaps another one or
                the record type already owns a different prefix
        """
        self.kv_store = kv_store
        self.record_type = record_type
        self.prefix = prefix
        self.key_field = key_field
        self.codec: Codec = codec if codec is not None else JsonCodec()

        kv_store.register_prefix(prefix, record_type)

    def build_key(self, natural_key: str) -> str:
        """
        Build the store key for a natural key.

        Returns:
            Store key in format: {prefix}{natural_key}
        """
        return f"{self.prefix}{natural_key}"

    def natural_key(self, record: T) -> str:
        """Read the natural key from a record."""
        return getattr(record, self.key_field)

    def store(self, record: T) -> None:
        """Encode the record and write it under its store key."""
        if not isinstance(record, self.record_type):
            raise RepositoryException(
                f"{type(self).__name__} stores {self.record_type.__name__} records, "
                f"got {type(record).__name__}",
                details={
                    "record_type": self.record_type.__name__,
                    "received": type(record).__name__,
                },
            )

        data = self.codec.encode(record)
        key = self.build_key(self.natural_key(record))
        self.kv_store.put(key, data)
        logger.debug("record_stored", key=key, record_type=self.record_type.__name__)

    def get_by_id(self, key: str) -> Optional[T]:
        """Read and decode the record stored under a natural key."""
        store_key = self.build_key(key)
        data = self.kv_store.get(store_key)

        if data is None:
            logger.debug("record_lookup", key=store_key, found=False)
            return None

        try:
            record = self.codec.decode(data, self.record_type)
        except DecodeException as e:
            raise DecodeException(
                self.record_type.__name__,
                key=store_key,
                reason=e.details.get("reason"),
            ) from e

        logger.debug("record_lookup", key=store_key, found=True)
        return record

    def delete(self, key: str) -> bool:
        """Remove the entry for a natural key without decoding it."""
        store_key = self.build_key(key)
        removed = self.kv_store.pop(store_key)
        logger.debug("record_deleted", key=store_key, removed=removed)
        return removed

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(record_type={self.record_type.__name__}, "
            f"prefix={self.prefix!r})"
        )
