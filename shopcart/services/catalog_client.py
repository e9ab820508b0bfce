# shopcart/services/catalog_client.py
import requests
from requests import RequestException
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception

from shopcart.domain.schemas import Product, Stock
from shopcart.utils.settings import CATALOG_SERVICE_URL, CATALOG_TIMEOUT_SECONDS
from shopcart.utils.logging import get_logger

logger = get_logger(__name__)


def _is_transient(exc: BaseException) -> bool:
    # 4xx to błąd po naszej stronie, ponawiamy tylko 5xx i błędy sieci
    if isinstance(exc, requests.HTTPError):
        return exc.response is not None and exc.response.status_code >= 500
    return isinstance(exc, RequestException)


def http_retry():
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.3, min=0.3, max=3),
        retry=retry_if_exception(_is_transient),
    )


class CatalogClient:
    """
    Klient HTTP do zewnętrznego serwisu produktów i stanów magazynowych.
    404 -> None, 5xx i błędy sieci -> retry, potem wyjątek, inne 4xx -> wyjątek od razu
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or CATALOG_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else CATALOG_TIMEOUT_SECONDS

    def fetch_product(self, product_id: int) -> Product | None:
        data = self._get(f"/products/{product_id}")
        if data is None:
            return None
        return Product.model_validate(data)

    def fetch_stock(self, product_id: int) -> Stock | None:
        data = self._get(f"/stock/{product_id}")
        if data is None:
            return None
        return Stock.model_validate(data)

    @http_retry()
    def _get(self, path: str) -> dict | None:
        url = f"{self.base_url}{path}"
        logger.info(f"CatalogClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            logger.info(f"CatalogClient {url} -> 404")
            return None
        resp.raise_for_status()
        return resp.json()
