# marketplace/services/product_service.py
from typing import Iterable, List, Tuple

from marketplace.domain.context import StoreContext
from marketplace.domain.errors import NotFoundError, NotOwnerError
from marketplace.domain.schemas import (
    ALL_CATEGORIES,
    Category,
    Product,
    ProductCreate,
    ProductFilter,
    ProductUpdate,
)
from marketplace.repos.product_repo import ProductRepo
from marketplace.repos.user_repo import UserRepo
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """
    Katalog produktow.
    Wlasnosc jest sprawdzana tutaj: zmiana i usuniecie tylko przez wlasciciela.
    """

    def __init__(self, ctx: StoreContext):
        self.ctx = ctx
        self.repo = ProductRepo(ctx)
        self.users = UserRepo(ctx)

    #query - odczyt
    @staticmethod
    def categories() -> List[str]:
        return [c.value for c in Category]

    def list_products(self, filters: ProductFilter | None = None) -> List[Product]:
        """
        Filtr po kategorii (dokladnie, "All" = bez filtra) i po tekscie
        (bez wielkosci liter, w tytule LUB opisie).
        Zawsze od najnowszego.
        """
        products = self.repo.load_all()

        if filters and filters.category and filters.category != ALL_CATEGORIES:
            products = [p for p in products if p.category == filters.category]

        if filters and filters.search:
            term = filters.search.lower()
            products = [
                p for p in products
                if term in p.title.lower() or term in p.description.lower()
            ]

        return sorted(products, key=lambda p: p.created_at, reverse=True)

    def get_product(self, product_id: str) -> Product | None:
        return self.repo.get_product(product_id)

    def get_user_products(self, owner_id: str) -> List[Product]:
        return self.repo.get_by_owner(owner_id)

    #commands
    def create_product(self, data: ProductCreate, actor_id: str | None = None) -> Product:
        if actor_id is not None and actor_id != data.owner_id:
            raise NotOwnerError("Nie mozna wystawic produktu w imieniu innego uzytkownika")

        with self.ctx.lock:
            if not self.users.get_user(data.owner_id):
                raise NotFoundError(f"Wlasciciel {data.owner_id} nie istnieje")

            products = self.repo.load_all()
            product = Product(
                **data.model_dump(),
                id=self.ctx.new_id(),
                created_at=self.ctx.now(),
            )
            products.append(product)
            self.repo.save_all(products)

        logger.info(f"Utworzono produkt {product.id} uzytkownika {product.owner_id}")
        return product

    def update_product(
        self,
        product_id: str,
        updates: ProductUpdate,
        actor_id: str,
    ) -> Product | None:
        with self.ctx.lock:
            products = self.repo.load_all()
            index = next((i for i, p in enumerate(products) if p.id == product_id), None)

            if index is None:
                return None

            if products[index].owner_id != actor_id:
                raise NotOwnerError("Tylko wlasciciel moze zmienic ten produkt")

            #image_url mozna wyczyscic, reszta pol musi miec wartosc
            changes = {
                k: v
                for k, v in updates.model_dump(exclude_unset=True).items()
                if v is not None or k == "image_url"
            }
            products[index] = products[index].model_copy(update=changes)
            self.repo.save_all(products)

        logger.info(f"Produkt {product_id} zaktualizowany: {sorted(changes)}")
        return products[index]

    def delete_product(self, product_id: str, actor_id: str) -> bool:
        with self.ctx.lock:
            products = self.repo.load_all()
            target = next((p for p in products if p.id == product_id), None)

            if not target:
                return False

            if target.owner_id != actor_id:
                raise NotOwnerError("Tylko wlasciciel moze usunac ten produkt")

            self.repo.save_all([p for p in products if p.id != product_id])

        logger.info(f"Produkt {product_id} usuniety przez uzytkownika {actor_id}")
        return True

    def mark_sold(self, product_ids: Iterable[str]) -> Tuple[str, str]:
        """
        Zwraca (klucz, JSON) kolekcji z is_sold=True dla podanych id.
        Nie zapisuje - checkout dolacza to do swojego atomowego zapisu.
        """
        ids = set(product_ids)
        products = [
            p.model_copy(update={"is_sold": True}) if p.id in ids else p
            for p in self.repo.load_all()
        ]
        return self.repo.encode(products)
