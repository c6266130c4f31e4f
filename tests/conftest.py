"""Shared fixtures: test configuration and an in-process fake WooCommerce API."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from apps.productapi.config.settings import AppConfig


class FakeCatalog:
    """Minimal WooCommerce stand-in that records every request it receives."""

    def __init__(self):
        self.requests: list[dict] = []
        self.products = [
            {"id": 11, "name": "Phone Case", "sku": "CASE-1", "price": "9.99", "status": "publish"},
            {"id": 12, "name": "USB-C Cable", "sku": "CABLE-1", "price": "4.99", "status": "publish"},
        ]
        self.categories = [
            {"id": 1, "name": "Accessories", "slug": "accessories", "description": "", "parent": 0, "count": 2},
            {"id": 2, "name": "Phones", "slug": "phones", "description": "", "parent": 0, "count": 0},
        ]
        self.failing_names: set[str] = set()
        self.serve_html = False
        self.next_id = 100

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/products", self.get_products)
        app.router.add_post("/products", self.post_product)
        app.router.add_get("/products/categories", self.get_categories)
        app.router.add_post("/products/categories", self.post_category)
        return app

    async def _record(self, request: web.Request) -> dict | None:
        body = await request.json() if request.can_read_body else None
        self.requests.append(
            {
                "method": request.method,
                "path": request.path,
                "query": dict(request.query),
                "headers": dict(request.headers),
                "json": body,
            }
        )
        return body

    async def get_products(self, request: web.Request) -> web.Response:
        await self._record(request)
        if self.serve_html:
            return web.Response(text="<html><body>Maintenance</body></html>", content_type="text/html")
        return web.json_response(self.products)

    async def post_product(self, request: web.Request) -> web.Response:
        body = await self._record(request)
        if body["name"] in self.failing_names:
            return web.json_response({"code": "woocommerce_rest_invalid", "message": f"Invalid product {body['name']}"}, status=400)
        self.next_id += 1
        return web.json_response({"id": self.next_id, **body}, status=201)

    async def get_categories(self, request: web.Request) -> web.Response:
        await self._record(request)
        return web.json_response(self.categories)

    async def post_category(self, request: web.Request) -> web.Response:
        body = await self._record(request)
        self.next_id += 1
        return web.json_response({"id": self.next_id, "slug": body["name"].lower(), "count": 0, **body}, status=201)


def make_config(**overrides) -> AppConfig:
    values = {
        "WOOCOMMERCE_URL": "http://catalog.invalid/wp-json/wc/v3",
        "WOOCOMMERCE_CONSUMER_KEY": "ck_test",
        "WOOCOMMERCE_CONSUMER_SECRET": "cs_test",
        "OPENAI_API_KEY": "sk-test",
    }
    values.update(overrides)
    return AppConfig(**values)


def fake_openai_client(content: str | None) -> SimpleNamespace:
    completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=AsyncMock(return_value=completion))))


@pytest.fixture
def config() -> AppConfig:
    return make_config()


@pytest_asyncio.fixture
async def catalog():
    fake = FakeCatalog()
    server = TestServer(fake.app())
    await server.start_server()
    fake.url = str(server.make_url("/")).rstrip("/")
    try:
        yield fake
    finally:
        await server.close()


@pytest.fixture
def catalog_config(catalog) -> AppConfig:
    return make_config(WOOCOMMERCE_URL=catalog.url)
