"""Account repository: accounts keyed by name."""

from typing import Optional

from kvrepo.codecs import Codec, get_codec
from kvrepo.config import Settings, get_settings
from kvrepo.domain.entities import Account
from kvrepo.repositories.key_value_repository import KeyValueRepository
from kvrepo.store import KeyValueStore


class AccountRepository(KeyValueRepository[Account]):
    """Stores ``Account`` records under ``{ACCOUNT_KEY_PREFIX}{name}``."""

    def __init__(
        self,
        kv_store: KeyValueStore,
        codec: Optional[Codec] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        super().__init__(
            kv_store,
            record_type=Account,
            prefix=settings.ACCOUNT_KEY_PREFIX,
            key_field="name",
            codec=codec if codec is not None else get_codec(settings.CODEC),
        )
