# ============================================
# catalog/client.py — Product API Client
# ============================================
# The storefront and admin views talk to the product service only
# through this client. Every failure comes back as a CatalogError whose
# message is ready to show to the user:
#   - the server answered with a non-2xx status -> its {"message"} body
#   - nothing answered                           -> "No response from server"
#   - the request could not even be built        -> the raised message

import logging
from typing import Any, Optional

import httpx

from .config import ClientSettings
from .errors import CatalogError, TransportError, error_for_status

logger = logging.getLogger(__name__)

NO_RESPONSE_MESSAGE = "No response from server"


class CatalogClient:
    """Async client for the /products resource of the catalog API."""

    def __init__(
        self,
        base_url: str,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.http_client = httpx.AsyncClient(transport=transport)

    @classmethod
    def from_settings(cls, settings: ClientSettings, **kwargs) -> "CatalogClient":
        return cls(settings.CATALOG_API_URL, **kwargs)

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Product API ───────────────────────────────────────────
    async def get_products(self) -> list:
        return await self._request("GET", "/products")

    async def get_product(self, product_id: str) -> dict:
        return await self._request("GET", f"/products/{product_id}")

    async def create_product(self, product_data: dict) -> dict:
        return await self._request("POST", "/products", json=product_data)

    async def update_product(self, product_id: str, product_data: dict) -> dict:
        return await self._request("PUT", f"/products/{product_id}", json=product_data)

    async def delete_product(self, product_id: str) -> dict:
        return await self._request("DELETE", f"/products/{product_id}")

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            request = self.http_client.build_request(method, f"{self.base_url}{path}", json=json)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, TypeError, ValueError) as exc:
            raise TransportError(str(exc)) from exc

        try:
            response = await self.http_client.send(request)
        except httpx.UnsupportedProtocol as exc:
            raise TransportError(str(exc)) from exc
        except httpx.TransportError as exc:
            logger.error("%s %s: %s", method, request.url, exc)
            raise TransportError(NO_RESPONSE_MESSAGE) from exc

        if not response.is_success:
            message = _error_message(response)
            logger.error("%s %s returned %s: %s", method, request.url, response.status_code, message)
            raise error_for_status(response.status_code, message)

        try:
            return response.json()
        except ValueError as exc:
            raise CatalogError(f"Invalid JSON from server: {exc}") from exc


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP error! Status: {response.status_code}"
