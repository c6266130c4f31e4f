from typing import Any

from apps.productapi.config.constants import DEFAULT_PRODUCTS_PAGE, DEFAULT_PRODUCTS_PER_PAGE, WooCommerceEndpoint
from apps.productapi.core.normalizer import normalize
from apps.productapi.models.product import ProductDraft
from apps.productapi.utils.api_utils import WooCommerceAPI
from common.logger import logger


async def list_products(api: WooCommerceAPI, page: int = DEFAULT_PRODUCTS_PAGE, per_page: int = DEFAULT_PRODUCTS_PER_PAGE) -> list[dict[str, Any]]:
    """Fetch one page of products from the catalog."""
    products = await api.get(WooCommerceEndpoint.PRODUCTS.value, {"page": page, "per_page": per_page})
    logger.info(f"Fetched {len(products)} products (page {page})")
    return products


async def create_product(api: WooCommerceAPI, draft: ProductDraft) -> dict[str, Any]:
    """Normalize a draft and create it in the catalog."""
    payload = normalize(draft).to_payload()

    product = await api.post(WooCommerceEndpoint.PRODUCTS.value, payload)
    logger.info(f"Created product: {product.get('name', draft.name)} (id {product.get('id')})")
    return product
