"""HTTP client for the product API."""

import logging
from typing import Any, Iterator

import requests

from common.config import Config
from fetch_products.errors import RemoteServiceError
from fetch_products.models import RemoteProduct

logger = logging.getLogger(__name__)

PRODUCTS_ENDPOINT = "/items/products"
DEFAULT_STATUS = "fetched"
DEFAULT_TIMEOUT = (5.0, 20.0)

USER_AGENT = "review-catalog/1.0"


class ProductApiClient:
    """Reads product records from the product API.

    Every request bypasses HTTP caches so a build always sees the current
    set of products.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: Config) -> "ProductApiClient":
        remote = config.remote
        read_timeout = remote.read_timeout
        if remote.deadline:
            read_timeout = min(read_timeout, remote.deadline)
        return cls(
            base_url=remote.base_url,
            token=remote.token,
            timeout=(remote.connect_timeout, read_timeout),
        )

    def list_products(
        self,
        status: str | None = DEFAULT_STATUS,
        limit: int | None = None,
        offset: int | None = None,
    ) -> list[RemoteProduct]:
        """Fetch products, newest first.

        Raises:
            RemoteServiceError: Non-2xx response or transport failure.
        """
        params: list[tuple[str, Any]] = [("filter[status][_eq]", status or DEFAULT_STATUS)]
        if limit:
            params.append(("limit", limit))
        if offset:
            params.append(("offset", offset))
        params.append(("sort", "-date_created"))

        records = self._get(PRODUCTS_ENDPOINT, params)
        products = _parse_records(records)
        logger.info("Fetched %d products (status=%s, offset=%s)", len(products), status, offset or 0)
        return products

    def iter_products(
        self,
        status: str | None = DEFAULT_STATUS,
        page_size: int = 100,
        max_items: int | None = None,
    ) -> Iterator[RemoteProduct]:
        """Page through all products by offset until a short page."""
        if page_size <= 0:
            raise ValueError("page_size must be positive")

        offset = 0
        yielded = 0
        while True:
            page = self.list_products(status=status, limit=page_size, offset=offset)
            for product in page:
                if max_items is not None and yielded >= max_items:
                    return
                yield product
                yielded += 1
            if len(page) < page_size:
                return
            offset += page_size

    def get_product_by_asin(self, asin: str) -> RemoteProduct | None:
        """Look up a single product; any failure is logged and returns None."""
        params = [("filter[asin][_eq]", asin), ("limit", 1)]
        try:
            records = self._get(PRODUCTS_ENDPOINT, params)
            if not records:
                return None
            return RemoteProduct.from_record(records[0])
        except (RemoteServiceError, ValueError) as e:
            logger.warning("Failed to fetch product %s: %s", asin, e)
            return None

    def _get(self, endpoint: str, params: list[tuple[str, Any]]) -> list[Any]:
        url = f"{self.base_url}{endpoint}"
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
            "User-Agent": USER_AGENT,
        }

        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteServiceError(str(e)) from e

        if not response.ok:
            raise RemoteServiceError(response.reason or "request failed", response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteServiceError(f"invalid JSON body: {e}", response.status_code) from e

        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise RemoteServiceError("response has no data list", response.status_code)
        return data


def _parse_records(records: list[Any]) -> list[RemoteProduct]:
    products = []
    for record in records:
        try:
            products.append(RemoteProduct.from_record(record))
        except ValueError as e:
            logger.warning("Skipping malformed product record: %s", e)
    return products
