# marketplace/repos/user_repo.py
import json
from typing import Tuple

from pydantic import ValidationError

from marketplace.domain.context import SESSION_KEY
from marketplace.domain.schemas import User
from marketplace.repos.base import CollectionRepo
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class UserRepo(CollectionRepo[User]):
    name = "users"
    model = User

    def get_user(self, user_id: str) -> User | None:
        return next((u for u in self.load_all() if u.id == user_id), None)

    def find_by_email(self, email: str) -> User | None:
        #dokladne porownanie, wielkosc liter ma znaczenie
        return next((u for u in self.load_all() if u.email == email), None)


class SessionRepo:
    """Wskaznik sesji: jeden obiekt User albo brak klucza."""

    def __init__(self, ctx):
        self.ctx = ctx
        self.store = ctx.store

    @property
    def key(self) -> str:
        return self.ctx.key(SESSION_KEY)

    def get(self) -> User | None:
        raw = self.store.read(self.key)
        if raw is None:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Niepoprawna sesja pod kluczem {self.key}: {e}; traktuje jak wylogowanie")
            return None

    def encode(self, user: User) -> Tuple[str, str]:
        return self.key, user.model_dump_json()

    def clear(self) -> None:
        self.store.remove(self.key)
