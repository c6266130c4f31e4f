import base64

from apps.productapi.config.settings import AppConfig
from apps.productapi.core.errors import ConfigError


class WooCommerceAuth:
    """Builds the Basic auth header from the configured consumer key pair."""

    def __init__(self, config: AppConfig):
        if not config.WOOCOMMERCE_CONSUMER_KEY or not config.WOOCOMMERCE_CONSUMER_SECRET:
            raise ConfigError("WooCommerce consumer key and secret are not configured")

        self.consumer_key = config.WOOCOMMERCE_CONSUMER_KEY
        self.consumer_secret = config.WOOCOMMERCE_CONSUMER_SECRET

    def get_authorization(self) -> str:
        credentials = f"{self.consumer_key}:{self.consumer_secret}"
        return f"Basic {base64.b64encode(credentials.encode('utf-8')).decode('ascii')}"

    def get_auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": self.get_authorization(),
            "Content-Type": "application/json",
        }
