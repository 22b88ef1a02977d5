# marketplace/domain/context.py
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from marketplace.data.store import KeyValueStore
from marketplace.utils.ids import IdGenerator, utc_now
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

SESSION_KEY = "session"


@dataclass
class StoreContext:
    """
    Wszystko, co serwisy dziela miedzy soba: store, namespace kluczy,
    zegar, generator id i lock pojedynczego pisarza.

    Nalezy do wywolujacego (aplikacja albo test), zamiast globalnych singletonow.
    Start: brak sesji, chyba ze store ma juz zapisana.
    Koniec: close() czysci wskaznik sesji i zamyka store.
    """

    store: KeyValueStore
    namespace: str = "ecofinds"
    clock: Callable[[], datetime] = utc_now
    ids: IdGenerator = field(default_factory=IdGenerator)
    mark_sold_on_checkout: bool = False
    lock: threading.RLock = field(default_factory=threading.RLock)

    def key(self, name: str) -> str:
        return f"{self.namespace}:{name}"

    def now(self) -> datetime:
        return self.clock()

    def new_id(self) -> str:
        return self.ids.next_id()

    def close(self) -> None:
        logger.info(f"Closing store context {self.namespace}")
        self.store.remove(self.key(SESSION_KEY))
        self.store.close()

    def __enter__(self) -> "StoreContext":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
