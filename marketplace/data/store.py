# marketplace/data/store.py
import threading
from typing import Dict, Mapping, Protocol

import redis
from sqlalchemy import delete, select

from marketplace.data.database import Base, make_engine, make_session_factory
from marketplace.data.models.kv_entry import KvEntryModel
from marketplace.utils.logging import get_logger
from marketplace.utils.retry import redis_retry

logger = get_logger(__name__)


class KeyValueStore(Protocol):
    """
    Jedyna granica I/O dla serwisow.
    Wartosci to surowe stringi (JSON), store nie zna schematu.
    """

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...

    def write_many(self, items: Mapping[str, str]) -> None: ...

    def remove(self, key: str) -> None: ...

    def close(self) -> None: ...


class MemoryStore:
    def __init__(self, initial: Mapping[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def read(self, key: str) -> str | None:
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def write_many(self, items: Mapping[str, str]) -> None:
        #jeden update pod lockiem, nikt nie zobaczy polowy zapisu
        with self._lock:
            self._data.update(items)

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def close(self) -> None:
        pass


class RedisStore:
    """
    -klucze jako zwykle stringi redis
    -write_many przez MSET (atomowe po stronie redisa)
    -retry z tenacity na bledach polaczenia
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        if client is None:
            from marketplace.utils.settings import REDIS_URL

            client = redis.Redis.from_url(url or REDIS_URL, decode_responses=True)
        self.redis = client

    @redis_retry()
    def read(self, key: str) -> str | None:
        return self.redis.get(key)

    @redis_retry()
    def write(self, key: str, value: str) -> None:
        self.redis.set(key, value)

    @redis_retry()
    def write_many(self, items: Mapping[str, str]) -> None:
        if not items:
            return
        logger.debug(f"MSET {sorted(items)}")
        self.redis.mset(dict(items))

    @redis_retry()
    def remove(self, key: str) -> None:
        self.redis.delete(key)

    def close(self) -> None:
        self.redis.close()


class SqlStore:
    """Jedna tabela kv_entries, jeden wiersz na klucz."""

    def __init__(self, url: str | None = None):
        if url is None:
            from marketplace.utils.settings import DATABASE_URL

            url = DATABASE_URL
        self.engine = make_engine(url)
        Base.metadata.create_all(bind=self.engine)
        self.SessionLocal = make_session_factory(self.engine)

    def read(self, key: str) -> str | None:
        with self.SessionLocal() as db:
            return db.execute(
                select(KvEntryModel.value).where(KvEntryModel.key == key)
            ).scalar_one_or_none()

    def write(self, key: str, value: str) -> None:
        self.write_many({key: value})

    def write_many(self, items: Mapping[str, str]) -> None:
        #wszystkie klucze w jednej transakcji
        with self.SessionLocal() as db:
            try:
                for key, value in items.items():
                    db.merge(KvEntryModel(key=key, value=value))
                db.commit()
            except Exception:
                db.rollback()
                raise

    def remove(self, key: str) -> None:
        with self.SessionLocal() as db:
            db.execute(delete(KvEntryModel).where(KvEntryModel.key == key))
            db.commit()

    def close(self) -> None:
        self.engine.dispose()


def create_store(backend: str, url: str | None = None) -> KeyValueStore:
    if backend == "memory":
        return MemoryStore()
    if backend == "redis":
        return RedisStore(url)
    if backend == "sql":
        return SqlStore(url)
    raise ValueError(f"Unknown store backend: {backend}")
