# marketplace/data/seed.py
from datetime import timedelta
from decimal import Decimal

from marketplace.domain.context import StoreContext
from marketplace.domain.schemas import Category, Product, User
from marketplace.repos.product_repo import ProductRepo
from marketplace.repos.user_repo import UserRepo
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)

DEMO_USER_ID = "1"

_DEMO_PRODUCTS = [
    (
        "Vintage MacBook Pro 2019",
        "Well-maintained MacBook Pro with original charger. Perfect for students or remote work. "
        "Has some minor scratches but fully functional.",
        Category.ELECTRONICS,
        "899",
        "https://images.unsplash.com/photo-1496181133206-80ce9b88a853?w=500&h=400&fit=crop",
        2,
    ),
    (
        "Sustainable Cotton Jacket",
        "Organic cotton jacket from Patagonia. Size M. Barely worn, perfect condition. "
        "Great for outdoor activities.",
        Category.CLOTHING,
        "65",
        "https://images.unsplash.com/photo-1551698618-1dfe5d97d256?w=500&h=400&fit=crop",
        5,
    ),
    (
        "Collection of Programming Books",
        "Set of 5 programming books including Clean Code, Design Patterns, and more. "
        "Great condition, no highlighting.",
        Category.BOOKS,
        "45",
        "https://images.unsplash.com/photo-1481627834876-b7833e8f5570?w=500&h=400&fit=crop",
        7,
    ),
    (
        "Ergonomic Office Chair",
        "Herman Miller Aeron chair replica. Very comfortable, adjustable height and lumbar support. "
        "Minor wear on armrests.",
        Category.FURNITURE,
        "275",
        "https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=500&h=400&fit=crop",
        10,
    ),
]


def seed(ctx: StoreContext) -> None:
    # not forcing: each collection seeded only if its key is missing
    now = ctx.now()
    users = UserRepo(ctx)
    products = ProductRepo(ctx)

    if not users.exists():
        users.save_all(
            [
                User(
                    id=DEMO_USER_ID,
                    email="demo@ecofinds.com",
                    username="EcoEnthusiast",
                    avatar_url="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e"
                    "?w=150&h=150&fit=crop&crop=face",
                    created_at=now,
                )
            ]
        )
        logger.info("Seeded demo user")

    if not products.exists():
        products.save_all(
            [
                Product(
                    id=str(n),
                    owner_id=DEMO_USER_ID,
                    title=title,
                    description=description,
                    category=category,
                    price=Decimal(price),
                    image_url=image_url,
                    is_sold=False,
                    created_at=now - timedelta(days=days_ago),
                )
                for n, (title, description, category, price, image_url, days_ago)
                in enumerate(_DEMO_PRODUCTS, start=1)
            ]
        )
        logger.info(f"Seeded {len(_DEMO_PRODUCTS)} demo products")
