# marketplace/services/user_service.py
from marketplace.domain.context import StoreContext
from marketplace.domain.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotAuthenticatedError,
)
from marketplace.domain.schemas import ProfileUpdate, User
from marketplace.repos.user_repo import SessionRepo, UserRepo
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    """
    Rejestracja, logowanie i profil.
    Haslo jest przyjmowane, ale nie jest ani sprawdzane, ani zapisywane
    (zachowanie prototypu, bez cichego "naprawiania").
    """

    def __init__(self, ctx: StoreContext):
        self.ctx = ctx
        self.repo = UserRepo(ctx)
        self.sessions = SessionRepo(ctx)

    #query - odczyt
    def get_current_user(self) -> User | None:
        return self.sessions.get()

    def require_current_user(self) -> User:
        user = self.get_current_user()
        if not user:
            raise NotAuthenticatedError("Brak zalogowanego uzytkownika")
        return user

    def get_user(self, user_id: str) -> User | None:
        return self.repo.get_user(user_id)

    #commands
    def register(self, email: str, password: str, username: str) -> User:
        with self.ctx.lock:
            users = self.repo.load_all()
            if any(u.email == email for u in users):
                raise DuplicateEmailError(f"Uzytkownik z adresem {email} juz istnieje")

            user = User(
                id=self.ctx.new_id(),
                email=email,
                username=username,
                created_at=self.ctx.now(),
            )
            users.append(user)

            #lista userow i sesja w jednym zapisie
            self.ctx.store.write_many(dict([self.repo.encode(users), self.sessions.encode(user)]))

        logger.debug("Haslo przyjete bez weryfikacji")
        logger.info(f"Zarejestrowano uzytkownika {user.id}")
        return user

    def login(self, email: str, password: str) -> User:
        with self.ctx.lock:
            user = self.repo.find_by_email(email)
            if not user:
                raise InvalidCredentialsError("Nieprawidlowe dane logowania")

            key, raw = self.sessions.encode(user)
            self.ctx.store.write(key, raw)

        logger.debug("Haslo przyjete bez weryfikacji")
        logger.info(f"Uzytkownik {user.id} zalogowany")
        return user

    def logout(self) -> bool:
        with self.ctx.lock:
            current = self.sessions.get()
            self.sessions.clear()

        if current:
            logger.info(f"Uzytkownik {current.id} wylogowany")
        return current is not None

    def update_profile(self, updates: ProfileUpdate) -> User:
        with self.ctx.lock:
            current = self.require_current_user()
            #avatar_url mozna wyczyscic, reszta pol nie moze byc pusta
            changes = {
                k: v
                for k, v in updates.model_dump(exclude_unset=True).items()
                if v is not None or k == "avatar_url"
            }

            users = self.repo.load_all()
            if "email" in changes and changes["email"] != current.email:
                if any(u.email == changes["email"] and u.id != current.id for u in users):
                    raise DuplicateEmailError(f"Uzytkownik z adresem {changes['email']} juz istnieje")

            updated = current.model_copy(update=changes)
            #upsert: jesli kolekcja zgubila usera (np. uszkodzony klucz), dopisz go
            if any(u.id == current.id for u in users):
                users = [updated if u.id == current.id else u for u in users]
            else:
                users.append(updated)

            #sesja i kolekcja zawsze razem, nigdy jedno bez drugiego
            self.ctx.store.write_many(dict([self.repo.encode(users), self.sessions.encode(updated)]))

        logger.info(f"Profil uzytkownika {updated.id} zaktualizowany: {sorted(changes)}")
        return updated
