"""Async HTTP client for the WooCommerce REST API."""

import json
from typing import Any

import aiohttp

from apps.productapi.config.settings import AppConfig
from apps.productapi.core.errors import UpstreamError
from apps.productapi.utils.api_auth import WooCommerceAuth
from common.logger import logger


async def read_error_message(response: aiohttp.ClientResponse) -> str:
    """Upstream ``message`` from a JSON error body, else the HTTP reason phrase."""
    try:
        data = await response.json(content_type=None)
    except (json.JSONDecodeError, ValueError):
        data = None

    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])

    return response.reason or f"HTTP {response.status}"


class WooCommerceAPI:
    """One session against the catalog, opened and closed per operation.

    Usage::

        async with WooCommerceAPI(settings) as api:
            products = await api.get("/products", {"page": 1})
    """

    def __init__(self, config: AppConfig):
        self.base_url = config.WOOCOMMERCE_URL.rstrip("/")
        self.auth = WooCommerceAuth(config)
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()
            self.session = None

    async def _request(self, method: str, endpoint: str, params: dict[str, Any] | None = None, payload: dict[str, Any] | None = None) -> Any:
        if not self.session:
            raise RuntimeError("WooCommerce API not initialized. Use async context manager.")

        url = f"{self.base_url}{endpoint}"
        query = {key: str(value) for key, value in (params or {}).items()}
        logger.debug(f"{method} {url} {query or ''}")

        try:
            async with self.session.request(method, url, headers=self.auth.get_auth_headers(), params=query, json=payload) as response:
                if 200 <= response.status < 300:
                    try:
                        return await response.json(content_type=None)
                    except ValueError as e:
                        logger.error(f"WooCommerce API returned a non-JSON body on {method} {endpoint}")
                        raise UpstreamError(response.status, "Invalid JSON in WooCommerce response") from e

                message = await read_error_message(response)
                logger.error(f"WooCommerce API error on {method} {endpoint}: {response.status} - {message}")
                raise UpstreamError(response.status, message)
        except aiohttp.ClientError as e:
            logger.error(f"Network error on {method} {endpoint}: {e}")
            raise UpstreamError(None, f"Network error calling WooCommerce API: {e}") from e

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        return await self._request("GET", endpoint, params=params)

    async def post(self, endpoint: str, payload: dict[str, Any]) -> Any:
        return await self._request("POST", endpoint, payload=payload)
