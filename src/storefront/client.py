"""HTTP client for the catalog endpoints used by the storefront."""

from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from storefront.models import CatalogProduct
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "http://localhost:8000"

_PRODUCTS = TypeAdapter(list[CatalogProduct])


class CatalogError(Exception):
    """The catalog API could not be reached or returned an unexpected response."""


class ProductNotFound(CatalogError):
    def __init__(self, identifier: str):
        super().__init__(f"Product not found: {identifier}")
        self.identifier = identifier


class CatalogClient:
    """Read-only access to ``/products``.

    Pass ``http_client`` to reuse an existing ``httpx.Client`` (any client
    with a ``base_url``, including FastAPI's ``TestClient``); otherwise one
    is created for ``base_url`` and closed with this client.
    """

    def __init__(self, base_url: str | None = None, http_client: httpx.Client | None = None, timeout: float = 10.0):
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url or DEFAULT_API_URL, timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def list_products(self) -> list[CatalogProduct]:
        response = self._get("/products")
        return self._parse(_PRODUCTS, response)

    def get_product(self, product_id: str) -> CatalogProduct:
        response = self._get(f"/products/{quote(str(product_id), safe='')}", identifier=str(product_id))
        return self._parse(CatalogProduct, response)

    def find_product(self, name: str) -> CatalogProduct:
        """Look a product up by its exact name."""
        response = self._get(f"/products/name/{quote(name, safe='')}", identifier=name)
        return self._parse(CatalogProduct, response)

    def _get(self, path: str, identifier: str | None = None) -> httpx.Response:
        try:
            response = self._http.get(path)
        except httpx.HTTPError as exc:
            raise CatalogError(f"Catalog request {path} failed: {exc}") from exc

        if response.status_code == 404 and identifier is not None:
            raise ProductNotFound(identifier)
        if response.is_error:
            logger.warning("catalog_request_failed", path=path, status=response.status_code)
            raise CatalogError(f"Catalog request {path} returned HTTP {response.status_code}")
        return response

    @staticmethod
    def _parse(schema, response: httpx.Response):
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_json(response.content)
            return schema.model_validate_json(response.content)
        except ValidationError as exc:
            raise CatalogError(f"Unexpected catalog payload: {exc}") from exc
