# marketplace/repos/product_repo.py
from typing import List

from marketplace.domain.schemas import Product
from marketplace.repos.base import CollectionRepo


class ProductRepo(CollectionRepo[Product]):
    name = "products"
    model = Product

    def get_product(self, product_id: str) -> Product | None:
        return next((p for p in self.load_all() if p.id == product_id), None)

    def get_by_owner(self, owner_id: str) -> List[Product]:
        return [p for p in self.load_all() if p.owner_id == owner_id]
