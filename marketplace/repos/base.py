# marketplace/repos/base.py
import json
from typing import Generic, List, Tuple, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from marketplace.domain.context import StoreContext
from marketplace.domain.errors import DecodeFailure
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class CollectionRepo(Generic[M]):
    """
    Cala kolekcja pod jednym kluczem jako tablica JSON.
    Odczyt calosci -> zmiana w pamieci -> zapis calosci.
    """

    name: str
    model: Type[M]

    def __init__(self, ctx: StoreContext):
        self.ctx = ctx
        self.store = ctx.store
        self._adapter = TypeAdapter(List[self.model])

    @property
    def key(self) -> str:
        return self.ctx.key(self.name)

    def _decode(self, raw: str) -> List[M]:
        try:
            return self._adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            raise DecodeFailure(f"Niepoprawne dane pod kluczem {self.key}: {e}") from e

    def load_all(self) -> List[M]:
        raw = self.store.read(self.key)
        if raw is None:
            return []
        try:
            return self._decode(raw)
        except DecodeFailure as e:
            #uszkodzona kolekcja = pusta kolekcja, nastepny zapis ja nadpisze
            logger.warning(f"{e}; traktuje kolekcje jako pusta")
            return []

    def encode(self, items: List[M]) -> Tuple[str, str]:
        raw = self._adapter.dump_json(items).decode("utf-8")
        return self.key, raw

    def save_all(self, items: List[M]) -> None:
        key, raw = self.encode(items)
        self.store.write(key, raw)

    def exists(self) -> bool:
        return self.store.read(self.key) is not None
