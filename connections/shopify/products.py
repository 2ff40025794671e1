# connections/shopify/products.py
"""
Shopify product listings for a collection.
Products are returned sorted by title, first page only.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import List

from . import ShopifyClient, safe_get

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 50
CENTS = Decimal("0.01")

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "HUF": "Ft ",
    "CAD": "CA$",
    "AUD": "A$",
}

# ============================================================
# QUERIES
# ============================================================

PRODUCTS_IN_COLLECTION_QUERY = """
query productsInCollection($first: Int!, $query: String!) {
  products(first: $first, query: $query, sortKey: TITLE) {
    edges {
      node {
        title
        handle
        onlineStoreUrl
        featuredImage {
          url
          altText
        }
        priceRangeV2 {
          minVariantPrice {
            amount
            currencyCode
          }
        }
      }
    }
  }
}
"""


# ============================================================
# MODELS
# ============================================================

@dataclass(frozen=True)
class ProductRecord:
    title: str
    url: str
    price: str
    image_url: str
    image_alt: str

    @classmethod
    def from_node(cls, node: dict, shop_domain: str) -> "ProductRecord":
        """
        Decode one `products.edges[].node`.

        Missing fields get explicit defaults: empty title, empty price when the
        amount is not a number, empty image fields when there is no featured
        image, and a synthesized storefront URL when onlineStoreUrl is null.
        """
        title = safe_get(node, "title", default="")

        money = safe_get(node, "priceRangeV2", "minVariantPrice")
        price = format_money(money.get("amount"), money.get("currencyCode")) if money else ""

        image = safe_get(node, "featuredImage")
        if image:
            image_url = safe_get(image, "url", default="")
            image_alt = safe_get(image, "altText") or title
        else:
            image_url = image_alt = ""

        url = safe_get(node, "onlineStoreUrl")
        if not url:
            url = f"https://{shop_domain}/products/{safe_get(node, 'handle', default='')}"

        return cls(title=title, url=url, price=price, image_url=image_url, image_alt=image_alt)


# ============================================================
# PUBLIC FUNCTIONS
# ============================================================

def get_collection_products(
    client: ShopifyClient,
    numeric_id: str,
    limit: int = DEFAULT_LIMIT
) -> List[ProductRecord]:
    """
    List up to `limit` products of a collection, ordered by title.

    Products past the first page are not fetched.
    """
    variables = {"first": limit, "query": f"collection_id:{numeric_id}"}
    data = client.execute(PRODUCTS_IN_COLLECTION_QUERY, variables)

    edges = safe_get(data, "products", "edges", default=[])
    products = [ProductRecord.from_node(safe_get(edge, "node", default={}), client.shop_domain) for edge in edges]

    if len(products) >= limit:
        logger.warning(f"Collection {numeric_id} returned {len(products)} products; anything past {limit} is omitted")
    logger.info(f"Fetched {len(products)} product(s) for collection {numeric_id}")
    return products


def format_money(amount, currency_code) -> str:
    """
    Format a MoneyV2 amount for email, e.g. ('12.5', 'USD') -> '$12.50'.

    Unknown currencies are prefixed with their ISO code ('SEK 12.50').
    Halves round up ('0.125' -> '0.13'). Returns '' when the amount is
    not a finite decimal number.
    """
    text = "" if amount is None else str(amount).strip()
    # Decimal() accepts digit separators; MoneyV2 amounts never carry them
    if not text or "_" in text:
        return ""
    try:
        value = Decimal(text)
        if not value.is_finite():
            return ""
        value = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return ""

    code = str(currency_code or "").upper()
    prefix = CURRENCY_SYMBOLS.get(code, f"{code} " if code else "")
    return f"{prefix}{value}"
