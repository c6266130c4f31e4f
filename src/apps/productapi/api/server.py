"""HTTP surface: proxies catalog calls and AI generation behind a uniform JSON envelope."""

import functools
from collections.abc import Awaitable, Callable
from typing import Any

from aiohttp import web
from pydantic import ValidationError as PydanticValidationError

from apps.productapi.config.constants import (
    DEFAULT_CATEGORIES_ORDER,
    DEFAULT_CATEGORIES_ORDERBY,
    DEFAULT_CATEGORIES_PER_PAGE,
    DEFAULT_PRODUCTS_PAGE,
    DEFAULT_PRODUCTS_PER_PAGE,
)
from apps.productapi.config.settings import AppConfig
from apps.productapi.core.bulk import bulk_insert
from apps.productapi.core.categories import create_category, list_categories
from apps.productapi.core.errors import ParseError, ProductAPIError, ValidationError
from apps.productapi.core.normalizer import has_required_fields
from apps.productapi.core.products import create_product, list_products
from apps.productapi.generators.product import generate_product_draft
from apps.productapi.models.category import CategoryCreate
from apps.productapi.models.product import ProductDraft
from apps.productapi.utils.api_utils import WooCommerceAPI
from common.logger import logger


CONFIG_KEY = web.AppKey("config", AppConfig)

Handler = Callable[[web.Request], Awaitable[web.Response]]


def success_response(data: Any, message: str) -> web.Response:
    return web.json_response({"success": True, "data": data, "message": message})


def error_response(error: str, status: int, **extra: Any) -> web.Response:
    return web.json_response({"success": False, "error": error, **extra}, status=status)


def handle_errors(fallback_message: str, list_route: bool = False) -> Callable[[Handler], Handler]:
    """Turn every failure of a handler into a ``{success: false, error}`` response."""
    extra: dict[str, Any] = {"data": []} if list_route else {}

    def decorator(handler: Handler) -> Handler:
        @functools.wraps(handler)
        async def wrapper(request: web.Request) -> web.Response:
            try:
                return await handler(request)
            except ParseError as e:
                logger.error(f"{fallback_message}: {e}")
                return error_response(str(e), e.http_status, raw_response=e.raw_output, **extra)
            except ProductAPIError as e:
                logger.error(f"{fallback_message}: {e}")
                return error_response(str(e) or fallback_message, e.http_status, **extra)
            except Exception as e:
                logger.exception(f"{fallback_message}: {e}")
                return error_response(str(e) or fallback_message, 500, **extra)

        return wrapper

    return decorator


def int_param(request: web.Request, name: str, default: int) -> int:
    value = request.query.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValidationError(f"Query parameter '{name}' must be an integer") from e


async def read_json(request: web.Request) -> Any:
    try:
        return await request.json()
    except ValueError as e:
        raise ValidationError("Request body must be valid JSON") from e


async def read_json_object(request: web.Request) -> dict[str, Any]:
    body = await read_json(request)
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def build_draft(data: dict[str, Any]) -> ProductDraft:
    try:
        return ProductDraft.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid product data: {e.error_count()} invalid fields") from e


@handle_errors("Failed to fetch products", list_route=True)
async def get_products(request: web.Request) -> web.Response:
    page = int_param(request, "page", DEFAULT_PRODUCTS_PAGE)
    per_page = int_param(request, "per_page", DEFAULT_PRODUCTS_PER_PAGE)

    async with WooCommerceAPI(request.app[CONFIG_KEY]) as api:
        products = await list_products(api, page=page, per_page=per_page)

    return success_response(products, "Products fetched successfully")


@handle_errors("Failed to create product")
async def post_product(request: web.Request) -> web.Response:
    draft = build_draft(await read_json_object(request))
    if not has_required_fields(draft):
        raise ValidationError("Name and regular_price are required fields")

    async with WooCommerceAPI(request.app[CONFIG_KEY]) as api:
        product = await create_product(api, draft)

    return success_response(product, f"Product '{product.get('name', draft.name)}' created successfully")


@handle_errors("Failed to bulk insert products")
async def post_products_bulk(request: web.Request) -> web.Response:
    body = await read_json(request)
    drafts = body.get("products") if isinstance(body, dict) else body
    if not isinstance(drafts, list):
        raise ValidationError("Request body must be a list of products")

    async with WooCommerceAPI(request.app[CONFIG_KEY]) as api:
        result = await bulk_insert(api, drafts)

    return success_response(result.model_dump(exclude={"message"}), result.message)


@handle_errors("Failed to fetch categories", list_route=True)
async def get_categories(request: web.Request) -> web.Response:
    per_page = int_param(request, "per_page", DEFAULT_CATEGORIES_PER_PAGE)
    orderby = request.query.get("orderby") or DEFAULT_CATEGORIES_ORDERBY
    order = request.query.get("order") or DEFAULT_CATEGORIES_ORDER

    async with WooCommerceAPI(request.app[CONFIG_KEY]) as api:
        categories = await list_categories(api, per_page=per_page, orderby=orderby, order=order)

    return success_response([category.model_dump(mode="json") for category in categories], "Categories fetched successfully")


@handle_errors("Failed to create category")
async def post_category(request: web.Request) -> web.Response:
    try:
        data = CategoryCreate.model_validate(await read_json_object(request))
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid category data: {e.error_count()} invalid fields") from e

    if not data.name.strip():
        raise ValidationError("Category name is required")

    async with WooCommerceAPI(request.app[CONFIG_KEY]) as api:
        category = await create_category(api, data.name, description=data.description, slug=data.slug, parent=data.parent)

    return success_response(category.model_dump(mode="json"), f"Category '{category.name}' created successfully")


@handle_errors("Failed to generate product data")
async def post_ai_generate(request: web.Request) -> web.Response:
    body = await read_json_object(request)
    categories = body.get("categories")
    if not isinstance(categories, list):
        categories = None

    draft = await generate_product_draft(str(body.get("prompt") or ""), categories, request.app[CONFIG_KEY])

    return success_response(draft.model_dump(mode="json", exclude_none=True), "Product data generated successfully")


def create_app(config: AppConfig) -> web.Application:
    app = web.Application()
    app[CONFIG_KEY] = config

    app.router.add_get("/products", get_products)
    app.router.add_post("/products", post_product)
    app.router.add_post("/products/bulk", post_products_bulk)
    app.router.add_get("/categories", get_categories)
    app.router.add_post("/categories", post_category)
    app.router.add_post("/ai-generate", post_ai_generate)

    return app


def run_server(config: AppConfig, host: str | None = None, port: int | None = None):
    host = host or config.HOST
    port = port or config.PORT
    logger.info(f"Serving product API on http://{host}:{port}")
    web.run_app(create_app(config), host=host, port=port, print=None)
