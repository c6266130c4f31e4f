from apps.productapi.config.constants import (
    DEFAULT_CATEGORIES_ORDER,
    DEFAULT_CATEGORIES_ORDERBY,
    DEFAULT_CATEGORIES_PER_PAGE,
    WooCommerceEndpoint,
)
from apps.productapi.core.errors import ValidationError
from apps.productapi.models.category import Category, CategoryCreate
from apps.productapi.utils.api_utils import WooCommerceAPI
from common.logger import logger


async def list_categories(
    api: WooCommerceAPI,
    per_page: int = DEFAULT_CATEGORIES_PER_PAGE,
    orderby: str = DEFAULT_CATEGORIES_ORDERBY,
    order: str = DEFAULT_CATEGORIES_ORDER,
) -> list[Category]:
    """Fetch product categories from the catalog."""
    result = await api.get(WooCommerceEndpoint.CATEGORIES.value, {"per_page": per_page, "orderby": orderby, "order": order})
    categories = [Category.model_validate(item) for item in result]
    logger.info(f"Fetched {len(categories)} categories")
    return categories


async def create_category(
    api: WooCommerceAPI,
    name: str,
    description: str | None = None,
    slug: str | None = None,
    parent: int | None = None,
) -> Category:
    """Create a single product category."""
    if not name or not name.strip():
        raise ValidationError("Category name is required")

    category_data = CategoryCreate(name=name, description=description, slug=slug, parent=parent)

    result = await api.post(WooCommerceEndpoint.CATEGORIES.value, category_data.to_payload())
    category = Category.model_validate(result)
    logger.info(f"Created category: {category.name}")
    return category
