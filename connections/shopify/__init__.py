# connections/shopify/__init__.py
"""
Shopify Admin GraphQL client.
"""
import json
import logging
import os
from dataclasses import dataclass

import requests
import shopify
from dotenv import load_dotenv
from shopify.api_version import VersionNotFoundError

from .errors import (
    ConfigurationError,
    NotFoundError,
    RemoteQueryError,
    ShopifyError,
    TransportError,
    WriteError,
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2024-10"
DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class ShopifyConfig:
    """Connection settings for one shop."""
    shop: str
    token: str
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "ShopifyConfig":
        """
        Build settings from the environment (and a .env file if present).

        Raises ConfigurationError when SHOPIFY_SHOP or SHOPIFY_ADMIN_TOKEN is unset.
        """
        load_dotenv()
        shop = os.environ.get("SHOPIFY_SHOP", "").strip()
        token = os.environ.get("SHOPIFY_ADMIN_TOKEN", "").strip()
        if not all([shop, token]):
            raise ConfigurationError("Missing SHOPIFY_SHOP or SHOPIFY_ADMIN_TOKEN environment variables")

        api_version = os.environ.get("SHOPIFY_API_VERSION", "").strip() or DEFAULT_API_VERSION
        timeout = os.environ.get("SHOPIFY_TIMEOUT", "").strip()
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"SHOPIFY_TIMEOUT must be a number of seconds, got {timeout!r}")

        return cls(shop=shop, token=token, api_version=api_version, timeout=timeout)


class ShopifyClient:
    """Client for the Shopify Admin GraphQL API."""

    def __init__(self, config: ShopifyConfig):
        self.config = config
        try:
            self.session = shopify.Session(config.shop, config.api_version, config.token)
        except VersionNotFoundError:
            raise ConfigurationError(f"Unknown Shopify API version: {config.api_version!r}")

    @property
    def shop_domain(self) -> str:
        """Normalized `<shop>.myshopify.com` host."""
        return self.session.url

    @property
    def graphql_url(self) -> str:
        return f"{self.session.site}/graphql.json"

    def get_headers(self):
        """Return headers with the required Shopify access token."""
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.config.token
        }

    def execute(self, query, variables=None):
        """
        Execute a Shopify GraphQL query/mutation and return its `data` payload.

        Raises TransportError for non-2xx responses or network failures and
        RemoteQueryError when the response carries GraphQL `errors`.
        """
        payload = {"query": query, "variables": variables or {}}
        try:
            response = requests.post(
                self.graphql_url,
                headers=self.get_headers(),
                json=payload,
                timeout=self.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to execute GraphQL: {e}")
            raise TransportError(None, str(e)) from e

        if not response.ok:
            logger.error(f"GraphQL request returned HTTP {response.status_code}")
            raise TransportError(response.status_code, response.text)

        try:
            parsed = response.json()
        except ValueError as e:
            raise TransportError(response.status_code, response.text) from e
        if not isinstance(parsed, dict):
            raise TransportError(response.status_code, response.text)

        if parsed.get("errors"):
            raise RemoteQueryError(json.dumps(parsed["errors"]))

        logger.debug(f"Executed GraphQL: {query.strip()[:50]}...")
        return parsed.get("data") or {}

    def mutate(self, mutation, variables=None, dry_run=False):
        """Execute a GraphQL mutation with dry-run support."""
        if dry_run:
            logger.info(f"[DRY RUN] Would execute mutation with variables: {_summarize(variables)}")
            return None

        return self.execute(mutation, variables)


def get_client(config: ShopifyConfig = None) -> ShopifyClient:
    """Get a ShopifyClient instance, reading settings from the environment if none are given."""
    return ShopifyClient(config or ShopifyConfig.from_env())


def safe_get(data, *keys, default=None):
    """Safely extract nested values from a dictionary."""
    current = data
    for key in keys:
        try:
            if current is None or key not in current:
                return default
            current = current[key]
        except (TypeError, KeyError, AttributeError):
            return default
    return current if current is not None else default


def _summarize(variables, limit=200):
    """Shorten long variable payloads (e.g. rendered HTML) for log lines."""
    text = json.dumps(variables or {}, ensure_ascii=False)
    if len(text) > limit:
        return f"{text[:limit]}... ({len(text)} chars)"
    return text


__all__ = [
    "ShopifyConfig",
    "ShopifyClient",
    "get_client",
    "safe_get",
    "ShopifyError",
    "ConfigurationError",
    "TransportError",
    "RemoteQueryError",
    "NotFoundError",
    "WriteError",
]
