"""Shared fixtures: in-memory store context with a controllable clock."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from marketplace.data.store import MemoryStore
from marketplace.domain.context import StoreContext
from marketplace.domain.schemas import Category, ProductCreate
from marketplace.services.cart_service import CartService
from marketplace.services.product_service import ProductService
from marketplace.services.user_service import UserService


class FakeClock:
    def __init__(self):
        self.current = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.current

    def tick(self, **delta):
        self.current += timedelta(**delta)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def ctx(store, clock):
    return StoreContext(store=store, namespace="test", clock=clock)


@pytest.fixture
def users(ctx):
    return UserService(ctx)


@pytest.fixture
def catalog(ctx):
    return ProductService(ctx)


@pytest.fixture
def cart(ctx, catalog):
    return CartService(ctx, catalog)


@pytest.fixture
def seller(users):
    seller = users.register("seller@example.com", "pw", "seller")
    users.logout()
    return seller


@pytest.fixture
def buyer(users):
    buyer = users.register("buyer@example.com", "pw", "buyer")
    users.logout()
    return buyer


@pytest.fixture
def make_product(catalog, seller, clock):
    def _make(title="Item", price="10", category=Category.OTHER, description="", owner=None):
        clock.tick(minutes=1)
        return catalog.create_product(
            ProductCreate(
                owner_id=(owner or seller).id,
                title=title,
                description=description,
                category=category,
                price=Decimal(price),
            )
        )

    return _make
