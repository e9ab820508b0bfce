"""Pytest configuration and fixtures"""
import pytest

from shopcart.services.cart_store import CartStore
from tests.fakes import FakeCatalog, FakeNotifier, FakeStorage


SNEAKER = {"id": 1, "title": "Tênis de Caminhada", "price": 179.9, "image": "tenis1.jpg"}
RUNNER = {"id": 2, "title": "Tênis VR Caminhada", "price": 139.9, "image": "tenis2.jpg"}
DURAMO = {"id": 3, "title": "Tênis Adidas Duramo", "price": 219.9, "image": "tenis3.jpg"}


@pytest.fixture
def catalog():
    return FakeCatalog(products=[SNEAKER, RUNNER, DURAMO], stock={1: 3, 2: 5, 3: 2})


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def make_store(catalog, notifier):
    def _make(cart: list[dict] | None = None, storage: FakeStorage | None = None) -> CartStore:
        if storage is None:
            storage = FakeStorage.with_cart(cart) if cart is not None else FakeStorage()
        return CartStore(catalog=catalog, storage=storage, notifier=notifier)

    return _make
