# marketplace/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, Field, ConfigDict

ALL_CATEGORIES = "All"


class Category(str, Enum):
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    FURNITURE = "Furniture"
    HOME_APPLIANCES = "Home Appliances"
    SPORTS = "Sports"
    COLLECTIBLES = "Collectibles"
    OTHER = "Other"


# =====================================================
# ENTITIES (to co lezy w store)
# =====================================================
class User(BaseModel):
    """Schema dla uzytkownika."""

    id: str
    email: str
    username: str
    avatar_url: str | None = None
    created_at: datetime


class ProductCreate(BaseModel):
    """Schema dla tworzenia produktu (bez id i created_at)."""

    owner_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    category: Category
    price: Decimal = Field(..., ge=0, description="Cena (musi byc >= 0)")
    image_url: str | None = None
    is_sold: bool = False


class Product(ProductCreate):
    """Schema dla produktu."""

    id: str
    created_at: datetime


class CartItem(BaseModel):
    """Schema dla pozycji w koszyku."""

    id: str
    user_id: str
    product_id: str
    quantity: int = Field(..., ge=1)
    added_at: datetime


class Purchase(BaseModel):
    """Schema dla zakupu. Cena zamrozona w chwili checkoutu."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str
    product_id: str
    price_at_purchase: Decimal
    purchased_at: datetime


# =====================================================
# INPUTS
# =====================================================
class RegisterIn(BaseModel):
    email: str = Field(..., min_length=3, max_length=254)
    password: str
    username: str = Field(..., min_length=1, max_length=100)


class LoginIn(BaseModel):
    email: str
    password: str


class ProfileUpdate(BaseModel):
    """Pola profilu, ktore wolno zmienic. id i created_at sa niezmienne."""

    email: str | None = Field(None, min_length=3, max_length=254)
    username: str | None = Field(None, min_length=1, max_length=100)
    avatar_url: str | None = None


class ProductIn(BaseModel):
    """Produkt z HTTP: owner_id bierzemy z sesji, nie od klienta."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    category: Category
    price: Decimal = Field(..., ge=0)
    image_url: str | None = None


class ProductUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: Category | None = None
    price: Decimal | None = Field(None, ge=0)
    image_url: str | None = None
    is_sold: bool | None = None


class ProductFilter(BaseModel):
    category: Category | Literal["All"] | None = None
    search: str | None = None


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0, description="Ilosc produktu (musi byc > 0)")


class QuantityIn(BaseModel):
    # <= 0 usuwa pozycje
    quantity: int


# =====================================================
# OUTPUTS
# =====================================================
class CartLineOut(BaseModel):
    product_id: str
    title: str
    quantity: int
    price: Decimal
    subtotal: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    user_id: str
    items: List[CartLineOut]
    item_count: int
    total: Decimal


class LogoutOut(BaseModel):
    logged_out: bool
