# marketplace/services/cart_service.py
from decimal import Decimal
from typing import Any, Dict, List, Sequence

from marketplace.domain.context import StoreContext
from marketplace.domain.errors import NotFoundError, OwnProductError, ProductSoldError
from marketplace.domain.schemas import CartItem, Product, Purchase
from marketplace.repos.cart_repo import CartRepo
from marketplace.repos.purchase_repo import PurchaseRepo
from marketplace.services.product_service import ProductService
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk per uzytkownik + historia zakupow.
    Stan pary (user, produkt): brak -> w koszyku (ilosc >= 1) -> brak.
    Katalog tylko czytamy; koszyk zmienia is_sold wylacznie w checkoucie,
    przez ProductService.mark_sold.
    """

    def __init__(self, ctx: StoreContext, catalog: ProductService | None = None):
        self.ctx = ctx
        self.repo = CartRepo(ctx)
        self.purchases = PurchaseRepo(ctx)
        self.catalog = catalog or ProductService(ctx)

    #query - odczyt
    def get_cart_items(self, user_id: str) -> List[CartItem]:
        return self.repo.get_cart_items(user_id)

    def get_cart(self, user_id: str) -> Dict[str, Any]:
        items = self.repo.get_cart_items(user_id)
        products = {p.id: p for p in self.catalog.list_products()}

        lines = []
        for item in items:
            product = products.get(item.product_id)
            if not product:
                #produkt zniknal z katalogu, checkout i tak go pominie
                continue
            lines.append(
                {
                    "product_id": item.product_id,
                    "title": product.title,
                    "quantity": item.quantity,
                    "price": product.price,
                    "subtotal": product.price * item.quantity,
                }
            )

        #dict przeksztalcany w jsona
        return {
            "user_id": user_id,
            "items": lines,
            "item_count": sum(line["quantity"] for line in lines),
            "total": sum((line["subtotal"] for line in lines), Decimal("0")),
        }

    def get_purchases(self, user_id: str) -> List[Purchase]:
        return sorted(
            self.purchases.get_by_user(user_id),
            key=lambda p: p.purchased_at,
            reverse=True,
        )

    #commands
    def add_to_cart(self, user_id: str, product_id: str, quantity: int = 1) -> CartItem:
        if quantity <= 0:
            raise ValueError("Ilosc musi byc wieksza niz 0")

        product = self.catalog.get_product(product_id)
        if not product:
            raise NotFoundError(f"Produkt {product_id} nie istnieje")

        if product.owner_id == user_id:
            raise OwnProductError("Nie mozna dodac wlasnego produktu do koszyka")

        if product.is_sold:
            raise ProductSoldError(f"Produkt {product_id} jest juz sprzedany")

        with self.ctx.lock:
            items = self.repo.load_all()
            existing = next(
                (i for i in items if i.user_id == user_id and i.product_id == product_id),
                None,
            )

            if existing:
                logger.info(
                    f"Produkt {product_id} juz jest w koszyku uzytkownika {user_id}, zwiekszam ilosc "
                    f"z {existing.quantity} do {existing.quantity + quantity}"
                )
                existing.quantity += quantity
                result = existing
            else:
                logger.info(f"Dodaje nowy produkt {product_id} do koszyka uzytkownika {user_id}")
                result = CartItem(
                    id=self.ctx.new_id(),
                    user_id=user_id,
                    product_id=product_id,
                    quantity=quantity,
                    added_at=self.ctx.now(),
                )
                items.append(result)

            self.repo.save_all(items)

        return result

    def remove_from_cart(self, user_id: str, product_id: str) -> bool:
        with self.ctx.lock:
            items = self.repo.load_all()
            remaining = [
                i for i in items
                if not (i.user_id == user_id and i.product_id == product_id)
            ]

            if len(remaining) == len(items):
                return False

            self.repo.save_all(remaining)

        logger.info(f"Produkt {product_id} usuniety z koszyka uzytkownika {user_id}")
        return True

    def update_quantity(self, user_id: str, product_id: str, quantity: int) -> bool:
        with self.ctx.lock:
            items = self.repo.load_all()
            item = next(
                (i for i in items if i.user_id == user_id and i.product_id == product_id),
                None,
            )

            if not item:
                return False

            #0 albo mniej nigdy nie trafia do store, pozycja znika
            if quantity <= 0:
                return self.remove_from_cart(user_id, product_id)

            item.quantity = quantity
            self.repo.save_all(items)

        logger.info(f"Ilosc produktu {product_id} w koszyku uzytkownika {user_id} ustawiona na {quantity}")
        return True

    def clear_cart(self, user_id: str) -> None:
        with self.ctx.lock:
            items = self.repo.load_all()
            self.repo.save_all(self.repo.without_user(items, user_id))

        logger.info(f"Koszyk uzytkownika {user_id} wyczyszczony")

    def checkout(
        self,
        user_id: str,
        cart_lines: Sequence[CartItem],
        catalog_snapshot: Sequence[Product],
    ) -> List[Purchase]:
        """
        Kazda pozycja z produktem obecnym w snapshocie -> jeden Purchase
        z aktualna cena produktu. Brakujace produkty sa pomijane bez bledu.

        Zakupy, wyczyszczony koszyk (i ewentualnie is_sold) ida jednym
        write_many: nie ma stanu "zakupy zapisane, koszyk pelny" ani odwrotnie.
        """
        products = {p.id: p for p in catalog_snapshot}
        now = self.ctx.now()

        with self.ctx.lock:
            batch_id = self.ctx.new_id()
            new_purchases = []
            for line in cart_lines:
                product = products.get(line.product_id)
                if not product:
                    logger.info(f"Pomijam produkt {line.product_id}, nie ma go juz w katalogu")
                    continue
                new_purchases.append(
                    Purchase(
                        id=f"{batch_id}_{line.product_id}",
                        user_id=user_id,
                        product_id=line.product_id,
                        price_at_purchase=product.price,
                        purchased_at=now,
                    )
                )

            ledger = self.purchases.load_all() + new_purchases
            cart = self.repo.without_user(self.repo.load_all(), user_id)

            batch = dict([self.purchases.encode(ledger), self.repo.encode(cart)])
            if self.ctx.mark_sold_on_checkout and new_purchases:
                key, raw = self.catalog.mark_sold(p.product_id for p in new_purchases)
                batch[key] = raw

            self.ctx.store.write_many(batch)

        logger.info(
            f"Checkout uzytkownika {user_id}: {len(new_purchases)} zakupow "
            f"z {len(cart_lines)} pozycji koszyka"
        )
        return new_purchases

    def checkout_cart(self, user_id: str) -> List[Purchase]:
        with self.ctx.lock:
            return self.checkout(
                user_id,
                self.repo.get_cart_items(user_id),
                self.catalog.list_products(),
            )
