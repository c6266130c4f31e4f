from openai import AsyncOpenAI

from apps.productapi.config.settings import AppConfig
from apps.productapi.core.errors import ConfigError
from common.logger import logger


def validate_openai_config(config: AppConfig) -> None:
    if not config.OPENAI_API_KEY:
        raise ConfigError("OpenAI API key not configured")

    logger.debug("OpenAI API configuration validated")


def get_openai_client(config: AppConfig) -> AsyncOpenAI:
    validate_openai_config(config)
    return AsyncOpenAI(api_key=config.OPENAI_API_KEY)
