from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from apps.productapi.core.normalizer import has_required_fields
from apps.productapi.core.products import create_product
from apps.productapi.models.product import ProductDraft
from apps.productapi.utils.api_utils import WooCommerceAPI
from common.logger import logger


class BulkResult(BaseModel):
    success_count: int = 0
    error_count: int = 0
    message: str = ""


async def bulk_insert(api: WooCommerceAPI, drafts: list[ProductDraft | dict[str, Any]]) -> BulkResult:
    """
    Create drafts one at a time, in order.

    Drafts without a name or regular price are skipped and counted as neither
    success nor error. A dict that has both but fails model validation
    counts as an error. A failed creation is counted and the loop moves on.
    """
    total = len(drafts)
    logger.info(f"Starting bulk insert - Total drafts: {total}")

    result = BulkResult()

    for idx, item in enumerate(drafts, 1):
        if isinstance(item, dict) and not has_required_fields(item):
            logger.debug(f"[{idx}/{total}] Skipping draft without name or regular_price")
            continue

        try:
            draft = item if isinstance(item, ProductDraft) else ProductDraft.model_validate(item)
        except PydanticValidationError as e:
            result.error_count += 1
            logger.error(f"[{idx}/{total}] ✗ Invalid draft: {e.error_count()} validation errors")
            continue

        if not has_required_fields(draft):
            logger.debug(f"[{idx}/{total}] Skipping draft without name or regular_price")
            continue

        try:
            await create_product(api, draft)
            result.success_count += 1
            logger.info(f"[{idx}/{total}] ✓ Created: '{draft.name}'")
        except Exception as e:
            result.error_count += 1
            logger.error(f"[{idx}/{total}] ✗ Failed to create '{draft.name}': {e}")

    result.message = f"Bulk insert completed: {result.success_count} successful, {result.error_count} failed"
    logger.info(result.message)
    return result
