# marketplace/repos/purchase_repo.py
from typing import List

from marketplace.domain.schemas import Purchase
from marketplace.repos.base import CollectionRepo


class PurchaseRepo(CollectionRepo[Purchase]):
    name = "purchases"
    model = Purchase

    def get_by_user(self, user_id: str) -> List[Purchase]:
        return [p for p in self.load_all() if p.user_id == user_id]
