# marketplace/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from marketplace.api import include_routers
from marketplace.data.seed import seed
from marketplace.data.store import create_store
from marketplace.domain.context import StoreContext
from marketplace.utils import settings
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


def build_context() -> StoreContext:
    url = settings.REDIS_URL if settings.STORE_BACKEND == "redis" else settings.DATABASE_URL
    store = create_store(settings.STORE_BACKEND, url)
    logger.info(f"Using {settings.STORE_BACKEND} store, namespace {settings.STORE_NAMESPACE}")
    return StoreContext(
        store=store,
        namespace=settings.STORE_NAMESPACE,
        mark_sold_on_checkout=settings.MARK_SOLD_ON_CHECKOUT,
    )


def create_app(ctx: StoreContext | None = None, seed_demo_data: bool | None = None) -> FastAPI:
    ctx = ctx or build_context()
    if seed_demo_data is None:
        seed_demo_data = settings.SEED_DEMO_DATA
    if seed_demo_data:
        seed(ctx)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting marketplace...")
        yield
        logger.info("Shutting down marketplace...")
        ctx.store.close()

    app = FastAPI(
        title="Marketplace",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.ctx = ctx

    # Include routers
    include_routers(app)

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
