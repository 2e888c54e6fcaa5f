"""Todo repository: todo items keyed by id."""

from typing import Optional

from kvrepo.codecs import Codec, get_codec
from kvrepo.config import Settings, get_settings
from kvrepo.domain.entities import Todo
from kvrepo.repositories.key_value_repository import KeyValueRepository
from kvrepo.store import KeyValueStore


class TodoRepository(KeyValueRepository[Todo]):
    """Stores ``Todo`` records under ``{TODO_KEY_PREFIX}{id}``."""

    def __init__(
        self,
        kv_store: KeyValueStore,
        codec: Optional[Codec] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        super().__init__(
            kv_store,
            record_type=Todo,
            prefix=settings.TODO_KEY_PREFIX,
            key_field="id",
            codec=codec if codec is not None else get_codec(settings.CODEC),
        )
