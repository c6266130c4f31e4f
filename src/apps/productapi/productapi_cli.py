import asyncio
import functools
import sys
from pathlib import Path

import click
from rich.table import Table

from apps.productapi.api.server import run_server
from apps.productapi.config.constants import (
    DEFAULT_CATEGORIES_ORDER,
    DEFAULT_CATEGORIES_ORDERBY,
    DEFAULT_CATEGORIES_PER_PAGE,
    DEFAULT_PRODUCTS_PAGE,
    DEFAULT_PRODUCTS_PER_PAGE,
)
from apps.productapi.config.settings import settings
from apps.productapi.core.bulk import bulk_insert
from apps.productapi.core.categories import create_category, list_categories
from apps.productapi.core.errors import ParseError, ProductAPIError
from apps.productapi.core.products import create_product, list_products
from apps.productapi.generators.product import generate_product_draft
from apps.productapi.models.product import ProductDraft
from apps.productapi.utils.api_utils import WooCommerceAPI
from common.json_files import load_json_file, save_to_json
from common.logger import console, logger


def reports_errors(command):
    """Report failures through the logger and exit non-zero instead of raising."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except ParseError as e:
            logger.fail(str(e))
            console.print(e.raw_output, markup=False)
            sys.exit(1)
        except (ProductAPIError, FileNotFoundError, ValueError) as e:
            logger.fail(str(e))
            sys.exit(1)

    return wrapper


@click.group()
def productapi_cli():
    logger.set_level(settings.LOG_LEVEL)


@productapi_cli.command()
@click.option("--host", type=str, default=None, help="Interface to bind (defaults to HOST)")
@click.option("--port", type=int, default=None, help="Port to listen on (defaults to PORT)")
def serve(host: str | None, port: int | None):
    """Run the product API HTTP server"""
    run_server(settings, host=host, port=port)


@productapi_cli.command()
@click.option("--page", type=int, default=DEFAULT_PRODUCTS_PAGE, help="Page of results to fetch")
@click.option("--per-page", type=int, default=DEFAULT_PRODUCTS_PER_PAGE, help="Number of products per page")
@reports_errors
def products(page: int, per_page: int):
    """List products from the catalog"""

    async def fetch():
        async with WooCommerceAPI(settings) as api:
            return await list_products(api, page=page, per_page=per_page)

    logger.start("Fetching products...")
    result = asyncio.run(fetch())
    logger.succeed(f"Fetched {len(result)} products")

    table = Table("ID", "Name", "SKU", "Price", "Status")
    for product in result:
        table.add_row(str(product.get("id", "")), product.get("name", ""), product.get("sku", ""), str(product.get("price", "")), product.get("status", ""))
    console.print(table)


@productapi_cli.command()
@click.option("--per-page", type=int, default=DEFAULT_CATEGORIES_PER_PAGE, help="Number of categories to fetch")
@click.option("--orderby", type=str, default=DEFAULT_CATEGORIES_ORDERBY, help="Field to sort by")
@click.option("--order", type=click.Choice(["asc", "desc"]), default=DEFAULT_CATEGORIES_ORDER, help="Sort direction")
@reports_errors
def categories(per_page: int, orderby: str, order: str):
    """List product categories from the catalog"""

    async def fetch():
        async with WooCommerceAPI(settings) as api:
            return await list_categories(api, per_page=per_page, orderby=orderby, order=order)

    logger.start("Fetching categories...")
    result = asyncio.run(fetch())
    logger.succeed(f"Fetched {len(result)} categories")

    table = Table("ID", "Name", "Slug", "Parent", "Count")
    for category in result:
        table.add_row(str(category.id), category.name, category.slug, str(category.parent or ""), str(category.count or 0))
    console.print(table)


@productapi_cli.command("create-category")
@click.argument("name")
@click.option("--description", type=str, default=None)
@click.option("--slug", type=str, default=None)
@click.option("--parent", type=int, default=None, help="ID of the parent category")
@reports_errors
def create_category_command(name: str, description: str | None, slug: str | None, parent: int | None):
    """Create a product category"""

    async def create():
        async with WooCommerceAPI(settings) as api:
            return await create_category(api, name, description=description, slug=slug, parent=parent)

    logger.start(f"Creating category '{name}'...")
    category = asyncio.run(create())
    logger.succeed(f"Category '{category.name}' created (id {category.id})")


@productapi_cli.command("create-product")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@reports_errors
def create_product_command(file: Path):
    """Create a product from a JSON draft file"""
    draft = ProductDraft.model_validate(load_json_file(file))

    async def create():
        async with WooCommerceAPI(settings) as api:
            return await create_product(api, draft)

    logger.start(f"Creating product '{draft.name}'...")
    product = asyncio.run(create())
    logger.succeed(f"Product '{product.get('name', draft.name)}' created (id {product.get('id')})")


@productapi_cli.command("bulk-insert")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@reports_errors
def bulk_insert_command(file: Path):
    """Create every product in a JSON list of drafts, one at a time"""
    drafts = load_json_file(file)
    if isinstance(drafts, dict):
        drafts = drafts.get("products")
    if not isinstance(drafts, list):
        raise ValueError(f"{file} must contain a list of products")

    async def insert():
        async with WooCommerceAPI(settings) as api:
            return await bulk_insert(api, drafts)

    result = asyncio.run(insert())
    if result.error_count:
        logger.fail(result.message)
        sys.exit(1)
    logger.succeed(result.message)


@productapi_cli.command()
@click.argument("prompt")
@click.option("--output", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Where to save the generated draft")
@click.option("--use-catalog-categories", is_flag=True, help="Steer the model toward the catalog's existing categories")
@reports_errors
def generate(prompt: str, output: Path | None, use_catalog_categories: bool):
    """Generate a product draft from a free-text prompt"""

    async def generate_draft():
        known_categories = None
        if use_catalog_categories:
            async with WooCommerceAPI(settings) as api:
                known_categories = await list_categories(api)
        return await generate_product_draft(prompt, known_categories, settings)

    logger.start("Generating product draft...")
    draft = asyncio.run(generate_draft())

    output = output or settings.DATA_PATH.joinpath("generated_product.json")
    save_to_json(draft.model_dump(mode="json", exclude_none=True), output)
    logger.succeed(f"Generated '{draft.name}', saved to {output}")
