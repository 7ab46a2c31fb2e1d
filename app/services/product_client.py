# app/services/product_client.py
from typing import Dict, Iterable

import requests

from app.utils.retry import http_retry
from app.utils.settings import PRODUCT_SERVICE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """
    Klient katalogu produktow (food).
    Produkt to zewnetrzna encja, tutaj tylko rozwiazujemy id -> rekord.
    """

    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    @http_retry()
    def _get(self, url: str) -> requests.Response:
        resp = requests.get(url, timeout=self.timeout)
        #5xx ponawiamy, 404 to poprawna odpowiedz
        if resp.status_code >= 500:
            resp.raise_for_status()
        return resp

    def fetch_product(self, product_id: str) -> dict | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"ProductClient GET {url}")

        resp = self._get(url)
        if resp.status_code == 404:
            logger.warning(f"Produkt {product_id} nie istnieje w katalogu")
            return None
        resp.raise_for_status()
        return resp.json()

    def fetch_products(self, product_ids: Iterable[str]) -> Dict[str, dict | None]:
        """Rozwiazuje wiele id, kazde pobierane raz."""
        resolved: Dict[str, dict | None] = {}
        for product_id in product_ids:
            if product_id not in resolved:
                resolved[product_id] = self.fetch_product(product_id)
        return resolved
