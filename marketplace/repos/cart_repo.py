# marketplace/repos/cart_repo.py
from typing import List

from marketplace.domain.schemas import CartItem
from marketplace.repos.base import CollectionRepo


class CartRepo(CollectionRepo[CartItem]):
    name = "cart_items"
    model = CartItem

    def get_cart_items(self, user_id: str) -> List[CartItem]:
        return [i for i in self.load_all() if i.user_id == user_id]

    def without_user(self, items: List[CartItem], user_id: str) -> List[CartItem]:
        return [i for i in items if i.user_id != user_id]
