# shopcart/services/cart_store.py
import asyncio
from typing import List

from shopcart.domain.results import (
    ADD_PRODUCT_ERROR,
    OUT_OF_STOCK,
    REMOVE_PRODUCT_ERROR,
    UPDATE_AMOUNT_ERROR,
    CartOutcome,
    CartResult,
)
from shopcart.domain.schemas import Product
from shopcart.repos.cart_storage import CartStorage
from shopcart.services.catalog_client import CatalogClient
from shopcart.services.notification_service import Notifier
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


class CartStore:
    """
    Stan koszyka w pamięci + slot w storage.

    Każda operacja:
    - bierze snapshot koszyka z chwili wywołania i pracuje na głębokiej kopii
    - czeka na wszystkie zdalne sprawdzenia (produkt, stan magazynowy)
    - zapisuje cały nowy koszyk do storage, dopiero potem podmienia stan w pamięci
    - błąd -> powiadomienie + koszyk bez zmian, wyjątek nie wychodzi do wywołującego

    Operacje nie są synchronizowane między sobą, wygrywa ostatni commit.
    """

    def __init__(
        self,
        catalog: CatalogClient,
        storage: CartStorage,
        notifier: Notifier,
        cart: List[Product] | None = None,
        notify: bool = True,
    ):
        self.catalog = catalog
        self.storage = storage
        self.notifier = notifier
        self.notify = notify
        self._commit_lock = asyncio.Lock()
        # zepsuty slot -> wyjątek przy konstrukcji
        self._cart: List[Product] = _copy(cart) if cart is not None else storage.load()

    @classmethod
    async def load(
        cls,
        catalog: CatalogClient,
        storage: CartStorage,
        notifier: Notifier,
        notify: bool = True,
    ) -> "CartStore":
        cart = await asyncio.to_thread(storage.load)
        logger.info(f"Wczytano koszyk ({len(cart)} pozycji)")
        return cls(catalog, storage, notifier, cart=cart, notify=notify)

    @property
    def cart(self) -> List[Product]:
        return _copy(self._cart)

    async def add_product(self, product_id: int) -> CartResult:
        try:
            result = await self._add_product(product_id)
        except Exception:
            logger.exception(f"Błąd podczas dodawania produktu {product_id}")
            result = self._failure(CartOutcome.UNEXPECTED, ADD_PRODUCT_ERROR, product_id)
        await self._notify(result)
        return result

    async def remove_product(self, product_id: int) -> CartResult:
        try:
            result = await self._remove_product(product_id)
        except Exception:
            logger.exception(f"Błąd podczas usuwania produktu {product_id}")
            result = self._failure(CartOutcome.UNEXPECTED, REMOVE_PRODUCT_ERROR, product_id)
        await self._notify(result)
        return result

    async def update_product_amount(self, product_id: int, amount: int) -> CartResult:
        try:
            result = await self._update_product_amount(product_id, amount)
        except Exception:
            logger.exception(f"Błąd podczas zmiany ilości produktu {product_id}")
            result = self._failure(CartOutcome.UNEXPECTED, UPDATE_AMOUNT_ERROR, product_id)
        await self._notify(result)
        return result

    async def _add_product(self, product_id: int) -> CartResult:
        new_cart = _copy(self._cart)
        product = _find(new_cart, product_id)

        if product is None:
            logger.info(f"Produktu {product_id} nie ma w koszyku, pobieram z katalogu")
            fetched = await asyncio.to_thread(self.catalog.fetch_product, product_id)
            if fetched is None:
                return self._failure(CartOutcome.NOT_FOUND, ADD_PRODUCT_ERROR, product_id)
            product = fetched.model_copy(update={"amount": 0})
            new_cart.append(product)

        stock = await asyncio.to_thread(self.catalog.fetch_stock, product_id)
        if stock is None:
            return self._failure(CartOutcome.NOT_FOUND, ADD_PRODUCT_ERROR, product_id)

        if product.amount >= stock.amount:
            return self._failure(CartOutcome.OUT_OF_STOCK, OUT_OF_STOCK, product_id)

        product.amount += 1
        await self._commit(new_cart)

        logger.info(f"Produkt {product_id} dodany, ilość {product.amount}")
        return CartResult(CartOutcome.OK, self.cart)

    async def _remove_product(self, product_id: int) -> CartResult:
        snapshot = self._cart
        new_cart = [p.model_copy(deep=True) for p in snapshot if p.id != product_id]

        if len(new_cart) == len(snapshot):
            return self._failure(CartOutcome.NOT_FOUND, REMOVE_PRODUCT_ERROR, product_id)

        await self._commit(new_cart)

        logger.info(f"Produkt {product_id} usunięty z koszyka")
        return CartResult(CartOutcome.OK, self.cart)

    async def _update_product_amount(self, product_id: int, amount: int) -> CartResult:
        snapshot = self._cart
        if amount <= 0:
            return CartResult(CartOutcome.UNCHANGED, self.cart)

        stock = await asyncio.to_thread(self.catalog.fetch_stock, product_id)
        if stock is None:
            return self._failure(CartOutcome.NOT_FOUND, UPDATE_AMOUNT_ERROR, product_id)

        if amount > stock.amount:
            return self._failure(CartOutcome.OUT_OF_STOCK, OUT_OF_STOCK, product_id)

        new_cart = _copy(snapshot)
        product = _find(new_cart, product_id)
        if product is None:
            return CartResult(CartOutcome.UNCHANGED, self.cart)

        product.amount = amount
        await self._commit(new_cart)

        logger.info(f"Produkt {product_id}, nowa ilość {amount}")
        return CartResult(CartOutcome.OK, self.cart)

    async def _commit(self, new_cart: List[Product]) -> None:
        # najpierw storage, błąd zapisu zostawia stary koszyk w pamięci
        # zapis + podmiana razem, żeby slot i pamięć miały ten sam ostatni commit
        async with self._commit_lock:
            await asyncio.to_thread(self.storage.save, new_cart)
            self._cart = new_cart

    def _failure(self, outcome: CartOutcome, message: str, product_id: int) -> CartResult:
        logger.warning(f"Produkt {product_id}: {outcome.value} ({message})")
        return CartResult(outcome, self.cart, message)

    async def _notify(self, result: CartResult) -> None:
        if not self.notify or result.message is None:
            return
        # wysyłka w osobnym wątku, wolny broker nie blokuje pętli zdarzeń
        try:
            await asyncio.to_thread(self.notifier.error, result.message)
        except Exception as e:
            logger.warning(f"Nie udało się wysłać powiadomienia '{result.message}': {e}")


def _find(cart: List[Product], product_id: int) -> Product | None:
    return next((p for p in cart if p.id == product_id), None)


def _copy(cart: List[Product]) -> List[Product]:
    return [p.model_copy(deep=True) for p in cart]
