# connections/shopify/errors.py
"""
Errors raised by the Shopify connection.
"""


class ShopifyError(Exception):
    """Base class for every Shopify connection failure."""


class ConfigurationError(ShopifyError):
    """Required settings are missing."""


class TransportError(ShopifyError):
    """The HTTP call itself failed (non-2xx status or network error)."""

    def __init__(self, status_code, body):
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(f"Request failed: {body}")
        else:
            super().__init__(f"HTTP {status_code}: {body}")


class RemoteQueryError(ShopifyError):
    """GraphQL returned an `errors` array inside a successful response."""

    def __init__(self, errors):
        self.errors = errors
        super().__init__(f"GraphQL errors: {errors}")


class NotFoundError(ShopifyError):
    """A looked-up resource does not exist."""


class WriteError(ShopifyError):
    """A mutation reported userErrors."""

    def __init__(self, operation, user_errors):
        self.operation = operation
        self.user_errors = user_errors
        super().__init__(f"{operation} userErrors: {user_errors}")
