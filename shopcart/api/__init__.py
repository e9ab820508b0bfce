# shopcart/api/__init__.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from shopcart.api.routers import cart, health
from shopcart.repos.cart_storage import build_storage
from shopcart.services.cart_store import CartStore
from shopcart.services.catalog_client import CatalogClient
from shopcart.services.notification_service import NotificationService
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # koszyk wczytywany raz przy starcie, zepsuty slot zatrzymuje start aplikacji
    if getattr(app.state, "cart_store", None) is None:
        app.state.cart_store = await CartStore.load(
            catalog=CatalogClient(),
            storage=build_storage(),
            notifier=NotificationService(),
        )
        logger.info("CartStore zainicjalizowany")
    yield


def create_app(store: CartStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Cart Service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.cart_store = store

    app.include_router(health.router)
    app.include_router(cart.router)

    return app
