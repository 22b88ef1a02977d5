# marketplace/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from marketplace.api.deps import get_ctx, get_current_user
from marketplace.domain.context import StoreContext
from marketplace.domain.errors import NotFoundError
from marketplace.domain.schemas import (
    Product,
    ProductCreate,
    ProductFilter,
    ProductIn,
    ProductUpdate,
    User,
)
from marketplace.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(ctx: StoreContext):
    return ProductService(ctx)


@router.get("", response_model=List[Product])
def list_products(
    category: str | None = Query(None),
    search: str | None = Query(None),
    ctx: StoreContext = Depends(get_ctx),
):
    try:
        filters = ProductFilter(category=category, search=search)
    except ValidationError:
        raise HTTPException(status_code=400, detail=f"Nieznana kategoria: {category}")
    return get_service(ctx).list_products(filters)


@router.get("/categories", response_model=List[str])
def categories():
    return ProductService.categories()


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: str, ctx: StoreContext = Depends(get_ctx)):
    product = get_service(ctx).get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Produkt nie znaleziony")
    return product


@router.post("", response_model=Product, status_code=201)
def create_product(
    payload: ProductIn,
    user: User = Depends(get_current_user),
    ctx: StoreContext = Depends(get_ctx),
):
    svc = get_service(ctx)
    data = ProductCreate(owner_id=user.id, **payload.model_dump())
    try:
        return svc.create_product(data, actor_id=user.id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.patch("/{product_id}", response_model=Product)
def update_product(
    product_id: str,
    payload: ProductUpdate,
    user: User = Depends(get_current_user),
    ctx: StoreContext = Depends(get_ctx),
):
    svc = get_service(ctx)
    try:
        product = svc.update_product(product_id, payload, actor_id=user.id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    if not product:
        raise HTTPException(status_code=404, detail="Produkt nie znaleziony")
    return product


@router.delete("/{product_id}", status_code=204)
def delete_product(
    product_id: str,
    user: User = Depends(get_current_user),
    ctx: StoreContext = Depends(get_ctx),
):
    svc = get_service(ctx)
    try:
        deleted = svc.delete_product(product_id, actor_id=user.id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Produkt nie znaleziony")
