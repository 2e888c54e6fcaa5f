"""
Repository interface (Abstract Base Class).

Defines the contract for record persistence independent of the
underlying storage mechanism.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Abstract repository for one record type.

    Records are addressed by their natural key. Lookups distinguish an
    absent record (``None``) from a stored one.
    """

    @abstractmethod
    def store(self, record: T) -> None:
        """
        Create or replace a record.

        Args:
            record: Record to persist; replaces any record with the same key

        Raises:
            EncodeException: If the record cannot be serialized
        """
        pass

    @abstractmethod
    def get_by_id(self, key: str) -> Optional[T]:
        """
        Find a record by natural key.

        Args:
            key: Natural key, looked up as given

        Returns:
            The stored record, or None if absent

        Raises:
            DecodeException: If the stored bytes are corrupt
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Remove a record by natural key.

        Args:
            key: Natural key

        Returns:
            True if a record was removed, False if none existed
        """
        pass
