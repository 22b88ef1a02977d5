# marketplace/api/__init__.py
from fastapi import FastAPI

from marketplace.api.routers import auth, carts, health, products, purchases, users


def include_routers(app: FastAPI) -> FastAPI:
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(products.router)
    app.include_router(users.router)
    app.include_router(carts.router)
    app.include_router(purchases.router)
    return app
