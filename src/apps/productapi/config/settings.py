from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """
    Application configuration settings loaded from environment variables.
    """

    LOG_LEVEL: str = "INFO"

    # WooCommerce REST API
    WOOCOMMERCE_URL: str = "https://mobiletechspecialists.com/wp-json/wc/v3"
    WOOCOMMERCE_CONSUMER_KEY: str = ""
    WOOCOMMERCE_CONSUMER_SECRET: str = ""

    # OpenAI
    OPENAI_API_KEY: str = ""
    DEFAULT_MODEL: str = "gpt-4"
    TEMPERATURE: float = 0.7
    MAX_OUTPUT_TOKENS: int = 1500

    # HTTP server
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    DATA_PATH: Path = Path(__file__).parent.parent.joinpath("data")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Created once at process start and passed explicitly into clients
settings = AppConfig()
