"""
Tests for the shared key/value store.
"""

import pytest
from pydantic import BaseModel

from kvrepo.domain import entities
from kvrepo.domain.entities import Account, Todo
from kvrepo.domain.exceptions import PrefixCollisionException
from kvrepo.store import KeyValueStore


class TestStoreInitialization:
    """Test store initialization."""

    def test_empty_on_creation(self, kv_store):
        """A new store holds no entries and no prefixes."""
        assert len(kv_store) == 0
        assert kv_store.prefixes == {}


class TestStoreBasicOperations:
    """Test basic store operations."""

    def test_get_put(self, kv_store):
        """Test basic get/put operations."""
        assert kv_store.get("account:alice") is None

        kv_store.put("account:alice", b"payload")

        assert kv_store.get("account:alice") == b"payload"
        assert "account:alice" in kv_store

    def test_last_write_wins(self, kv_store):
        """Overwriting a key keeps only the latest bytes."""
        kv_store.put("todo:t1", b"first")
        kv_store.put("todo:t1", b"second")

        assert kv_store.get("todo:t1") == b"second"
        assert len(kv_store) == 1

    def test_empty_bytes_are_present(self, kv_store):
        """An empty payload is stored, not treated as absent."""
        kv_store.put("todo:t1", b"")

        assert kv_store.get("todo:t1") == b""
        assert kv_store.pop("todo:t1") is True

    def test_pop(self, kv_store):
        """Pop reports whether an entry was removed."""
        kv_store.put("todo:t1", b"x")

        assert kv_store.pop("todo:t1") is True
        assert kv_store.pop("todo:t1") is False
        assert "todo:t1" not in kv_store

    def test_keys_by_prefix(self, kv_store):
        """Keys can be listed per namespace."""
        kv_store.put("account:alice", b"a")
        kv_store.put("account:bob", b"b")
        kv_store.put("todo:t1", b"t")

        assert sorted(kv_store.keys("account:")) == ["account:alice", "account:bob"]
        assert kv_store.keys("todo:") == ["todo:t1"]
        assert len(kv_store.keys()) == 3

    def test_clear_keeps_prefixes(self, kv_store):
        """Clearing drops entries but not namespace registrations."""
        kv_store.register_prefix("account:", Account)
        kv_store.put("account:alice", b"a")

        kv_store.clear()

        assert len(kv_store) == 0
        assert kv_store.prefixes == {"account:": Account}


class TestPrefixRegistration:
    """Test namespace collision checks."""

    def test_disjoint_prefixes(self, kv_store):
        """Non-overlapping prefixes coexist."""
        kv_store.register_prefix("account:", Account)
        kv_store.register_prefix("todo:", Todo)

        assert kv_store.prefixes == {"account:": Account, "todo:": Todo}

    def test_same_owner_reregisters(self, kv_store):
        """Registering the same prefix for the same owner is a no-op."""
        kv_store.register_prefix("account:", Account)
        kv_store.register_prefix("account:", Account)

        assert kv_store.prefixes == {"account:": Account}

    def test_same_prefix_other_owner(self, kv_store):
        """Two record types cannot share a prefix."""
        kv_store.register_prefix("account:", Account)

        with pytest.raises(PrefixCollisionException):
            kv_store.register_prefix("account:", Todo)

    @pytest.mark.parametrize("prefix", ["acc", "account:admin:"])
    def test_nested_prefixes(self, kv_store, prefix):
        """A prefix may not extend or be extended by another."""
        kv_store.register_prefix("account:", Account)

        with pytest.raises(PrefixCollisionException) as exc_info:
            kv_store.register_prefix(prefix, Todo)

        assert exc_info.value.details["existing"] == "account:"

    def test_empty_prefix(self, kv_store):
        """An empty prefix would overlap every namespace."""
        with pytest.raises(PrefixCollisionException):
            kv_store.register_prefix("", Account)

    def test_record_type_owns_one_prefix(self, kv_store):
        """A record type cannot claim a second namespace."""
        kv_store.register_prefix("account:", Account)

        with pytest.raises(PrefixCollisionException) as exc_info:
            kv_store.register_prefix("user:", Account)

        assert exc_info.value.details["existing"] == "account:"
        assert exc_info.value.details["owner"] == "Account"
        assert kv_store.prefixes == {"account:": Account}

    def test_same_name_different_class(self, kv_store):
        """Ownership follows the class object, not its name."""

        class Account(BaseModel):
            name: str

        kv_store.register_prefix("account:", entities.Account)

        with pytest.raises(PrefixCollisionException):
            kv_store.register_prefix("account:", Account)

        assert kv_store.prefixes["account:"] is entities.Account


class TestStoreStats:
    """Test lookup statistics."""

    def test_hits_and_misses(self, kv_store):
        kv_store.put("todo:t1", b"x")

        kv_store.get("todo:t1")
        kv_store.get("todo:t1")
        kv_store.get("todo:missing")

        stats = kv_store.get_stats()
        assert stats["hits"] == 2
        assert stats["misses"] == 1
        assert stats["total_requests"] == 3
        assert stats["hit_rate_percent"] == 67
        assert stats["size"] == 1

    def test_empty_stats(self, kv_store):
        stats = kv_store.get_stats()
        assert stats["total_requests"] == 0
        assert stats["hit_rate_percent"] == 0

