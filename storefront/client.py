# storefront/client.py
"""Async HTTP client for the products API, used by frontends and scripts."""

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

PRODUCTS_PATH = "/api/products"


class ProductServiceError(Exception):
    """A products API call failed on the network or with a non-2xx status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed with status {response.status_code}"


class ProductServiceClient:
    """
    Thin wrapper over the products endpoints.

    Responses are returned as decoded envelopes, e.g.
    {"success": True, "count": 2, "data": [...]}. Nothing is validated or
    cached locally.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def get_products(self) -> Dict[str, Any]:
        return await self._request("GET", PRODUCTS_PATH)

    async def create_product(self, product: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", PRODUCTS_PATH, json=product)

    async def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ProductServiceError(f"Could not reach products API: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning("%s %s returned %s: %s", method, path, response.status_code, message)
            raise ProductServiceError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ProductServiceError(
                "Products API returned a non-JSON body", status_code=response.status_code
            ) from exc

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ProductServiceClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> bool:
        await self.close()
        return False
