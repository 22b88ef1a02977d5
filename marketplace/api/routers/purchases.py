# marketplace/api/routers/purchases.py
from typing import List

from fastapi import APIRouter, Depends

from marketplace.api.deps import get_ctx, get_current_user
from marketplace.domain.context import StoreContext
from marketplace.domain.schemas import Purchase, User
from marketplace.services.cart_service import CartService

router = APIRouter(prefix="/purchases", tags=["purchases"])


@router.get("", response_model=List[Purchase])
def get_purchases(user: User = Depends(get_current_user), ctx: StoreContext = Depends(get_ctx)):
    """Historia zakupow, od najnowszych."""
    return CartService(ctx).get_purchases(user.id)
