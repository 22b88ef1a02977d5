# marketplace/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from marketplace.api.deps import get_ctx, get_current_user
from marketplace.domain.context import StoreContext
from marketplace.domain.errors import NotFoundError
from marketplace.domain.schemas import CartItem, CartOut, ItemIn, Purchase, QuantityIn, User
from marketplace.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(ctx: StoreContext):
    return CartService(ctx)


@router.get("", response_model=CartOut)
def get_cart(user: User = Depends(get_current_user), ctx: StoreContext = Depends(get_ctx)):
    return get_service(ctx).get_cart(user.id)


@router.post("/items", response_model=CartItem, status_code=201)
def add_item(
    payload: ItemIn,
    user: User = Depends(get_current_user),
    ctx: StoreContext = Depends(get_ctx),
):
    svc = get_service(ctx)
    try:
        return svc.add_to_cart(user.id, payload.product_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/items/{product_id}", response_model=CartOut)
def update_item(
    product_id: str,
    payload: QuantityIn,
    user: User = Depends(get_current_user),
    ctx: StoreContext = Depends(get_ctx),
):
    svc = get_service(ctx)
    if not svc.update_quantity(user.id, product_id, payload.quantity):
        raise HTTPException(status_code=404, detail="Produktu nie ma w koszyku")
    return svc.get_cart(user.id)


@router.delete("/items/{product_id}", response_model=CartOut)
def remove_item(
    product_id: str,
    user: User = Depends(get_current_user),
    ctx: StoreContext = Depends(get_ctx),
):
    svc = get_service(ctx)
    if not svc.remove_from_cart(user.id, product_id):
        raise HTTPException(status_code=404, detail="Produktu nie ma w koszyku")
    return svc.get_cart(user.id)


@router.delete("", response_model=CartOut)
def clear_cart(user: User = Depends(get_current_user), ctx: StoreContext = Depends(get_ctx)):
    svc = get_service(ctx)
    svc.clear_cart(user.id)
    return svc.get_cart(user.id)


@router.post("/checkout", response_model=List[Purchase])
def checkout(user: User = Depends(get_current_user), ctx: StoreContext = Depends(get_ctx)):
    svc = get_service(ctx)
    if not svc.get_cart_items(user.id):
        raise HTTPException(status_code=400, detail="Koszyk jest pusty")
    return svc.checkout_cart(user.id)
