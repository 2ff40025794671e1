# connections/shopify/collections.py
"""
Shopify collection lookups.
"""
import logging
from dataclasses import dataclass

from . import ShopifyClient, safe_get
from .errors import NotFoundError

logger = logging.getLogger(__name__)

# ============================================================
# QUERIES
# ============================================================

COLLECTION_BY_HANDLE_QUERY = """
query collectionByHandle($handle: String!) {
  collectionByHandle(handle: $handle) {
    id
    title
  }
}
"""


# ============================================================
# MODELS
# ============================================================

@dataclass(frozen=True)
class CollectionRef:
    handle: str
    title: str
    numeric_id: str

    @classmethod
    def from_node(cls, handle: str, node: dict) -> "CollectionRef":
        return cls(
            handle=handle,
            title=safe_get(node, "title", default=""),
            numeric_id=gid_to_numeric_id(safe_get(node, "id", default="")),
        )


# ============================================================
# PUBLIC FUNCTIONS
# ============================================================

def get_collection_by_handle(client: ShopifyClient, handle: str) -> CollectionRef:
    """
    Resolve a collection handle to its title and numeric id.

    Raises NotFoundError when no collection has this handle.
    """
    data = client.execute(COLLECTION_BY_HANDLE_QUERY, {"handle": handle})
    node = safe_get(data, "collectionByHandle")
    if not node:
        raise NotFoundError(f"Collection not found: {handle}")

    collection = CollectionRef.from_node(handle, node)
    logger.info(f"Resolved collection '{handle}' to id {collection.numeric_id} ({collection.title})")
    return collection


def collection_url(client: ShopifyClient, handle: str) -> str:
    """Storefront URL of a collection."""
    return f"https://{client.shop_domain}/collections/{handle}"


# ============================================================
# HELPERS
# ============================================================

def gid_to_numeric_id(gid: str) -> str:
    """'gid://shopify/Collection/123' -> '123'."""
    return str(gid).rsplit("/", 1)[-1]
