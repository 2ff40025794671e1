# connections/shopify/metafields.py
"""
Shop-level metafield writes.
The collection card is stored at: shop.metafields.email.collection_html_1
"""
import logging
from dataclasses import dataclass
from typing import List

from . import ShopifyClient, safe_get
from .errors import NotFoundError, WriteError

logger = logging.getLogger(__name__)

EMAIL_NAMESPACE = "email"
COLLECTION_HTML_KEY = "collection_html_1"
MULTI_LINE_TEXT = "multi_line_text_field"

# ============================================================
# QUERIES / MUTATIONS
# ============================================================

SHOP_ID_QUERY = """
query shopId {
  shop {
    id
  }
}
"""

METAFIELDS_SET_MUTATION = """
mutation metafieldsSet($metafields: [MetafieldsSetInput!]!) {
  metafieldsSet(metafields: $metafields) {
    metafields {
      id
      namespace
      key
    }
    userErrors {
      field
      message
    }
  }
}
"""


# ============================================================
# MODELS
# ============================================================

@dataclass(frozen=True)
class MetafieldTarget:
    owner_id: str
    namespace: str = EMAIL_NAMESPACE
    key: str = COLLECTION_HTML_KEY
    type: str = MULTI_LINE_TEXT

    def to_input(self, value: str) -> dict:
        return {
            "ownerId": self.owner_id,
            "namespace": self.namespace,
            "key": self.key,
            "type": self.type,
            "value": value,
        }


# ============================================================
# PUBLIC FUNCTIONS
# ============================================================

def get_shop_id(client: ShopifyClient) -> str:
    """Return the shop's GID (gid://shopify/Shop/...)."""
    data = client.execute(SHOP_ID_QUERY)
    shop_id = safe_get(data, "shop", "id")
    if not shop_id:
        raise NotFoundError("Shop id not returned by the API")
    return shop_id


def set_metafield(
    client: ShopifyClient,
    target: MetafieldTarget,
    value: str,
    dry_run: bool = False
) -> List[dict]:
    """
    Create or replace a single metafield.

    Raises WriteError when metafieldsSet reports userErrors, even though the
    HTTP call succeeded. Returns the written metafields ([] on dry run).
    """
    variables = {"metafields": [target.to_input(value)]}
    data = client.mutate(METAFIELDS_SET_MUTATION, variables, dry_run=dry_run)

    if dry_run:
        return []

    user_errors = safe_get(data, "metafieldsSet", "userErrors", default=[])
    if user_errors:
        logger.error(f"Failed to set {target.namespace}.{target.key} on {target.owner_id}: {user_errors}")
        raise WriteError("metafieldsSet", user_errors)

    logger.info(f"Set {target.namespace}.{target.key} on {target.owner_id} ({len(value)} chars)")
    return safe_get(data, "metafieldsSet", "metafields", default=[])


def publish_collection_html(client: ShopifyClient, html: str, dry_run: bool = False) -> List[dict]:
    """Write the rendered collection card into the shop's email.collection_html_1 metafield."""
    target = MetafieldTarget(owner_id=get_shop_id(client))
    return set_metafield(client, target, html, dry_run=dry_run)
