import re
from collections.abc import Sequence
from typing import Any

import openai
from pydantic import ValidationError as PydanticValidationError

from apps.productapi.config.constants import FALLBACK_CATEGORIES
from apps.productapi.config.settings import AppConfig
from apps.productapi.core.errors import ParseError, UpstreamError, ValidationError
from apps.productapi.generators.prompts.product_prompts import SYSTEM_PROMPT
from apps.productapi.models.product import ProductDraft
from apps.productapi.utils.openai import get_openai_client, validate_openai_config
from common.logger import logger


CODE_FENCE_PATTERN = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def category_names(categories: Sequence[Any] | None) -> list[str]:
    """Names from category dicts, models or plain strings."""
    names = []
    for category in categories or []:
        if isinstance(category, str):
            name = category
        elif isinstance(category, dict):
            name = category.get("name")
        else:
            name = getattr(category, "name", None)
        if name:
            names.append(str(name))
    return names


def create_system_prompt(categories: Sequence[Any] | None) -> str:
    names = category_names(categories) or FALLBACK_CATEGORIES
    return SYSTEM_PROMPT.format(categories_list=", ".join(names))


def parse_product_draft(raw_output: str) -> ProductDraft:
    """
    Read a completion as a product draft.

    Raises:
        ParseError: carrying ``raw_output`` unchanged when the text is not a
            JSON object with the draft's shape
    """
    text = raw_output.strip()
    fenced = CODE_FENCE_PATTERN.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        return ProductDraft.model_validate_json(text)
    except PydanticValidationError as e:
        errors = e.errors()
        if any(error["type"] == "json_invalid" for error in errors):
            raise ParseError("Failed to parse AI response as JSON", raw_output) from e
        if any(error["type"] == "model_type" and not error["loc"] for error in errors):
            raise ParseError("AI response is not a JSON object", raw_output) from e
        raise ParseError(f"AI response does not match the product structure: {e.error_count()} invalid fields", raw_output) from e


async def generate_product_draft(
    prompt: str,
    categories: Sequence[Any] | None,
    config: AppConfig,
    client: openai.AsyncOpenAI | None = None,
) -> ProductDraft:
    """Ask the model for a product draft steered toward the given categories."""
    if not prompt or not prompt.strip():
        raise ValidationError("Prompt is required")

    validate_openai_config(config)
    client = client or get_openai_client(config)

    logger.info(f"Generating product draft with {config.DEFAULT_MODEL}...")
    try:
        completion = await client.chat.completions.create(
            model=config.DEFAULT_MODEL,
            messages=[
                {"role": "system", "content": create_system_prompt(categories)},
                {"role": "user", "content": prompt},
            ],
            temperature=config.TEMPERATURE,
            max_tokens=config.MAX_OUTPUT_TOKENS,
        )
    except openai.APIStatusError as e:
        logger.error(f"OpenAI API request failed: {e.status_code}")
        raise UpstreamError(e.status_code, e.message) from e
    except openai.APIConnectionError as e:
        logger.error(f"OpenAI API network error: {e}")
        raise UpstreamError(None, f"Network error calling OpenAI API: {e}") from e

    content = completion.choices[0].message.content if completion.choices else None
    if not content:
        raise ParseError("No response from OpenAI", "")

    draft = parse_product_draft(content)
    logger.info(f"Generated product draft: {draft.name}")
    return draft
