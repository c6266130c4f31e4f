class ProductAPIError(Exception):
    """Base error for failures reported back to the caller."""

    http_status = 500


class ValidationError(ProductAPIError):
    """Raised when a required input field is missing or malformed."""

    http_status = 400


class ConfigError(ProductAPIError):
    """Raised when a required secret is not configured."""


class UpstreamError(ProductAPIError):
    """Raised when the catalog or the OpenAI API answers with a non-2xx status."""

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(message)
        else:
            super().__init__(f"{status_code} - {message}")


class ParseError(ProductAPIError):
    """Raised when model output cannot be read as a product draft."""

    def __init__(self, message: str, raw_output: str):
        self.raw_output = raw_output
        super().__init__(message)
