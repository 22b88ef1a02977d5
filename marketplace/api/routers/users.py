# marketplace/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from marketplace.api.deps import get_ctx
from marketplace.domain.context import StoreContext
from marketplace.domain.schemas import Product, User
from marketplace.services.product_service import ProductService
from marketplace.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, ctx: StoreContext = Depends(get_ctx)):
    user = UserService(ctx).get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="Uzytkownik nie znaleziony")
    return user


@router.get("/{user_id}/products", response_model=List[Product])
def get_user_products(user_id: str, ctx: StoreContext = Depends(get_ctx)):
    return ProductService(ctx).get_user_products(user_id)
