"""
Record codecs.

A codec turns a record into bytes and back. Encoding is deterministic for
a given record; decoding malformed bytes raises ``DecodeException``.
"""

import pickle
from typing import Dict, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from kvrepo.domain.exceptions import (
    ConfigurationException,
    DecodeException,
    EncodeException,
)

T = TypeVar("T", bound=BaseModel)

PICKLE_PROTOCOL = 5


class Codec(Protocol):
    """Serialize records to bytes and back."""

    def encode(self, record: BaseModel) -> bytes:
        ...

    def decode(self, data: bytes, record_type: Type[T]) -> T:
        ...


class JsonCodec:
    """
    UTF-8 JSON encoding driven by the record's pydantic schema.

    Decoding re-validates the payload, so bytes that do not describe a
    valid record of the requested type are rejected.
    """

    name = "json"

    def encode(self, record: BaseModel) -> bytes:
        try:
            return record.model_dump_json().encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodeException(type(record).__name__, str(e)) from e

    def decode(self, data: bytes, record_type: Type[T]) -> T:
        try:
            return record_type.model_validate_json(data)
        except (ValidationError, UnicodeDecodeError) as e:
            raise DecodeException(record_type.__name__, reason=str(e)) from e


class PickleCodec:
    """
    Pickle encoding with a pinned protocol.

    Only use with trusted stores: unpickling executes arbitrary code.
    """

    name = "pickle"

    def __init__(self, protocol: int = PICKLE_PROTOCOL):
        self.protocol = protocol

    def encode(self, record: BaseModel) -> bytes:
        try:
            return pickle.dumps(record, protocol=self.protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise EncodeException(type(record).__name__, str(e)) from e

    def decode(self, data: bytes, record_type: Type[T]) -> T:
        try:
            value = pickle.loads(data)
        except Exception as e:
            # Malformed pickles fail with many different error types
            raise DecodeException(record_type.__name__, reason=str(e)) from e

        if not isinstance(value, record_type):
            raise DecodeException(
                record_type.__name__,
                reason=f"payload holds {type(value).__name__}",
            )
        return value


_CODECS: Dict[str, Type] = {
    JsonCodec.name: JsonCodec,
    PickleCodec.name: PickleCodec,
}


def get_codec(name: str) -> Codec:
    """
    Build a codec by name.

    Args:
        name: Codec name ("json" or "pickle"), case-insensitive

    Returns:
        New codec instance

    Raises:
        ConfigurationException: If the name is not a known codec
    """
    codec_cls = _CODECS.get(name.lower().strip())
    if codec_cls is None:
        known = ", ".join(sorted(_CODECS))
        raise ConfigurationException("CODEC", f"unknown codec '{name}' (expected one of: {known})")
    return codec_cls()
