"""Translate a product draft into the WooCommerce product payload."""

from typing import Any

from apps.productapi.config.constants import DIMENSION_FIELDS, SEO_DESCRIPTION_MAX_LENGTH, SEO_META_KEYS
from apps.productapi.core.errors import ValidationError
from apps.productapi.models.product import Dimensions, ExternalProductPayload, MetaData, ProductDraft, Seo
from common.logger import logger


def has_required_fields(draft: ProductDraft | dict[str, Any]) -> bool:
    if isinstance(draft, dict):
        return _text(draft.get("name")) is not None and _text(draft.get("regular_price")) is not None
    return _text(draft.name) is not None and _text(draft.regular_price) is not None


def _text(value) -> str | None:
    """Return the string form of a value, or None when it is empty."""
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def build_dimensions(draft: ProductDraft) -> Dimensions | None:
    values = {field: _text(getattr(draft, field)) for field in DIMENSION_FIELDS}
    present = {field: value for field, value in values.items() if value is not None}
    if not present:
        return None
    return Dimensions(**present)


def build_seo_meta_data(seo: Seo | None) -> list[MetaData] | None:
    """Flatten SEO fields into Rank Math meta_data entries in a fixed order."""
    if seo is None:
        return None

    if seo.description and len(seo.description) > SEO_DESCRIPTION_MAX_LENGTH:
        logger.warning(f"SEO description is {len(seo.description)} characters, longer than the advised {SEO_DESCRIPTION_MAX_LENGTH}")

    meta_data = []
    for field, meta_key in SEO_META_KEYS:
        value = _text(getattr(seo, field))
        if value is not None:
            meta_data.append(MetaData(key=meta_key, value=value))

    return meta_data or None


def normalize(draft: ProductDraft) -> ExternalProductPayload:
    """
    Build the catalog payload for a draft.

    Absent or empty optional fields are left out rather than sent as empty
    strings. The only values not taken from the draft are the ``type`` and
    ``status`` defaults the draft model already carries.

    Raises:
        ValidationError: if ``name`` or ``regular_price`` is missing
    """
    if not has_required_fields(draft):
        raise ValidationError("Name and regular_price are required fields")

    stock_quantity = None
    if draft.manage_stock is True and draft.stock_quantity is not None:
        stock_quantity = draft.stock_quantity

    return ExternalProductPayload(
        name=draft.name,
        type=draft.type,
        regular_price=_text(draft.regular_price),
        sale_price=_text(draft.sale_price),
        description=_text(draft.description),
        short_description=_text(draft.short_description),
        sku=_text(draft.sku),
        weight=_text(draft.weight),
        dimensions=build_dimensions(draft),
        manage_stock=draft.manage_stock,
        stock_quantity=stock_quantity,
        stock_status=draft.stock_status,
        categories=[category.model_copy() for category in draft.categories] if draft.categories else None,
        images=[image.model_copy() for image in draft.images] if draft.images else None,
        status=draft.status,
        meta_data=build_seo_meta_data(draft.seo),
    )
