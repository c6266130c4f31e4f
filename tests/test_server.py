import json

import pytest
import pytest_asyncio
from aiohttp import test_utils

import apps.productapi.generators.product as generator_mod
from apps.productapi.api.server import create_app
from conftest import fake_openai_client, make_config


@pytest_asyncio.fixture
async def client(catalog_config):
    async with test_utils.TestClient(test_utils.TestServer(create_app(catalog_config))) as test_client:
        yield test_client


@pytest.mark.asyncio
async def test_get_products_wraps_catalog_list(client, catalog):
    response = await client.get("/products", params={"page": "3", "per_page": "2"})
    body = await response.json()

    assert response.status == 200
    assert body["success"] is True
    assert body["message"] == "Products fetched successfully"
    assert len(body["data"]) == 2
    assert catalog.requests[0]["query"] == {"page": "3", "per_page": "2"}


@pytest.mark.asyncio
async def test_get_products_rejects_non_integer_paging(client, catalog):
    response = await client.get("/products", params={"page": "first"})
    body = await response.json()

    assert response.status == 400
    assert body == {"success": False, "error": "Query parameter 'page' must be an integer", "data": []}
    assert catalog.requests == []


@pytest.mark.asyncio
async def test_post_product_requires_name_and_price(client, catalog):
    response = await client.post("/products", json={"name": "Lamp"})
    body = await response.json()

    assert response.status == 400
    assert body["success"] is False
    assert body["error"] == "Name and regular_price are required fields"
    assert catalog.requests == []


@pytest.mark.asyncio
async def test_post_product_rejects_body_that_is_not_utf8(client, catalog):
    response = await client.post("/products", data=b"\xff\xfe{}", headers={"Content-Type": "application/json"})
    body = await response.json()

    assert response.status == 400
    assert body == {"success": False, "error": "Request body must be valid JSON"}
    assert catalog.requests == []


@pytest.mark.asyncio
async def test_post_product_creates_product(client, catalog):
    response = await client.post("/products", json={"name": "Lamp", "regular_price": "15", "manage_stock": True, "stock_quantity": 3})
    body = await response.json()

    assert response.status == 200
    assert body["success"] is True
    assert body["message"] == "Product 'Lamp' created successfully"
    assert catalog.requests[0]["json"]["stock_quantity"] == 3


@pytest.mark.asyncio
async def test_upstream_failure_is_reported_in_envelope(client, catalog):
    catalog.failing_names.add("Lamp")

    response = await client.post("/products", json={"name": "Lamp", "regular_price": "15"})
    body = await response.json()

    assert response.status == 500
    assert body == {"success": False, "error": "400 - Invalid product Lamp"}


@pytest.mark.asyncio
async def test_missing_credentials_are_reported():
    app = create_app(make_config(WOOCOMMERCE_CONSUMER_KEY=""))
    async with test_utils.TestClient(test_utils.TestServer(app)) as test_client:
        response = await test_client.get("/categories")
        body = await response.json()

    assert response.status == 500
    assert body["success"] is False
    assert body["error"] == "WooCommerce consumer key and secret are not configured"
    assert body["data"] == []


@pytest.mark.asyncio
async def test_bulk_route_returns_counts(client, catalog):
    catalog.failing_names.add("B")

    response = await client.post(
        "/products/bulk",
        json={"products": [{"name": "A", "regular_price": "1"}, {"name": "B", "regular_price": "2"}, {"name": "C"}]},
    )
    body = await response.json()

    assert response.status == 200
    assert body["data"] == {"success_count": 1, "error_count": 1}
    assert body["message"] == "Bulk insert completed: 1 successful, 1 failed"


@pytest.mark.asyncio
async def test_categories_routes(client, catalog):
    listed = await (await client.get("/categories")).json()
    created_response = await client.post("/categories", json={"name": "Tablets", "description": "Slates"})
    created = await created_response.json()

    assert [category["name"] for category in listed["data"]] == ["Accessories", "Phones"]
    assert catalog.requests[0]["query"] == {"per_page": "100", "orderby": "name", "order": "asc"}
    assert created["success"] is True
    assert created["message"] == "Category 'Tablets' created successfully"
    assert catalog.requests[1]["json"] == {"name": "Tablets", "description": "Slates"}


@pytest.mark.asyncio
async def test_post_category_requires_name(client):
    response = await client.post("/categories", json={"description": "No name"})
    body = await response.json()

    assert response.status == 400
    assert body["error"] == "Category name is required"


@pytest.mark.asyncio
async def test_ai_generate_returns_draft(client, monkeypatch):
    fake = fake_openai_client(json.dumps({"name": "Lamp", "regular_price": "12", "seo": {"title": "Lamp"}}))
    monkeypatch.setattr(generator_mod, "get_openai_client", lambda config: fake)

    response = await client.post("/ai-generate", json={"prompt": "a desk lamp", "categories": [{"name": "Lighting"}]})
    body = await response.json()

    assert response.status == 200
    assert body["success"] is True
    assert body["data"]["name"] == "Lamp"
    assert body["data"]["seo"] == {"title": "Lamp"}


@pytest.mark.asyncio
async def test_ai_generate_empty_prompt_is_rejected(client, monkeypatch):
    fake = fake_openai_client("{}")
    monkeypatch.setattr(generator_mod, "get_openai_client", lambda config: fake)

    response = await client.post("/ai-generate", json={"prompt": ""})
    body = await response.json()

    assert response.status == 400
    assert body == {"success": False, "error": "Prompt is required"}
    fake.chat.completions.create.assert_not_called()


@pytest.mark.asyncio
async def test_ai_generate_parse_failure_returns_raw_text(client, monkeypatch):
    raw = "I could not produce JSON for that."
    monkeypatch.setattr(generator_mod, "get_openai_client", lambda config: fake_openai_client(raw))

    response = await client.post("/ai-generate", json={"prompt": "a desk lamp"})
    body = await response.json()

    assert response.status == 500
    assert body["success"] is False
    assert body["error"] == "Failed to parse AI response as JSON"
    assert body["raw_response"] == raw
