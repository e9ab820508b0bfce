# shopcart/repos/cart_storage.py
import os
import tempfile
from pathlib import Path
from typing import List, Protocol

import redis
from redis.exceptions import RedisError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from shopcart.domain.schemas import Product, cart_adapter
from shopcart.utils.settings import (
    CART_STORAGE_BACKEND,
    CART_STORAGE_DIR,
    CART_STORAGE_KEY,
    REDIS_URL,
)
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


#tenacity retry, tylko błędy redisa, zepsuty JSON nie jest ponawiany
def storage_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(RedisError),
    )


class CartStorage(Protocol):
    """Slot na cały koszyk: odczyt raz przy starcie, nadpisanie w całości po każdej zmianie."""

    def load(self) -> List[Product]: ...

    def save(self, cart: List[Product]) -> None: ...


class RedisCartStorage:
    """
    Koszyk jako JSON pod jednym kluczem w redisie.
    brak klucza -> pusty koszyk, zepsuty JSON -> wyjątek (nie zamieniamy na pusty)
    """

    def __init__(self, url: str | None = None, key: str | None = None, client: redis.Redis | None = None):
        self.key = key or CART_STORAGE_KEY
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @storage_retry()
    def load(self) -> List[Product]:
        raw = self.redis.get(self.key)
        if raw is None:
            logger.info(f"Brak klucza {self.key}, pusty koszyk")
            return []
        return cart_adapter.validate_json(raw)

    @storage_retry()
    def save(self, cart: List[Product]) -> None:
        logger.info(f"Zapis koszyka ({len(cart)} pozycji) pod {self.key}")
        self.redis.set(self.key, cart_adapter.dump_json(cart))


class FileCartStorage:
    """Lokalny odpowiednik localStorage: jeden plik JSON na klucz."""

    def __init__(self, directory: str | Path | None = None, key: str | None = None):
        self.key = key or CART_STORAGE_KEY
        self._dir = Path(directory or CART_STORAGE_DIR)
        self._file_path = self._dir / f"{_safe_name(self.key)}.json"

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> List[Product]:
        if not self._file_path.exists():
            logger.info(f"Brak pliku {self._file_path}, pusty koszyk")
            return []
        return cart_adapter.validate_json(self._file_path.read_bytes())

    def save(self, cart: List[Product]) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        # zapis atomowy: osobny plik tymczasowy dla każdego zapisu, potem rename
        with tempfile.NamedTemporaryFile(
            dir=self._dir,
            prefix=f"{self._file_path.stem}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp.write(cart_adapter.dump_json(cart))
        try:
            os.replace(tmp.name, self._file_path)
        except OSError:
            os.unlink(tmp.name)
            raise
        logger.info(f"Zapis koszyka ({len(cart)} pozycji) do {self._file_path}")


def _safe_name(key: str) -> str:
    return "".join(c if c.isalnum() or c in "-_." else "_" for c in key)


def build_storage(backend: str | None = None) -> CartStorage:
    backend = (backend or CART_STORAGE_BACKEND).lower()
    if backend == "redis":
        return RedisCartStorage()
    if backend == "file":
        return FileCartStorage()
    raise ValueError(f"Nieznany backend koszyka: {backend}")
