# projects/collection_email/update_collection.py
"""
Render next week's collection into the shop's email metafield.

    python -m projects.collection_email [collection-handle] [--dry-run]

Without a handle the collection is week-<N>-plants, N being the ISO week
number of today + 7 days (UTC). Requires SHOPIFY_SHOP and SHOPIFY_ADMIN_TOKEN.
"""
import argparse
import logging
import sys
from dataclasses import dataclass
from datetime import datetime

from connections.shopify import ShopifyClient, ShopifyConfig, ShopifyError, get_client
from connections.shopify.errors import ConfigurationError
from connections.shopify.collections import get_collection_by_handle, collection_url
from connections.shopify.products import get_collection_products
from connections.shopify.metafields import (
    COLLECTION_HTML_KEY,
    EMAIL_NAMESPACE,
    publish_collection_html,
)

from .config import PRODUCT_LIMIT, USAGE
from .render import render_collection_html
from .week import HandleResolver

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    handle: str
    title: str
    product_count: int
    collection_link: str
    html: str


def run(
    client: ShopifyClient,
    handle: str = None,
    resolver: HandleResolver = None,
    now: datetime = None,
    dry_run: bool = False
) -> RunResult:
    """Resolve the handle, fetch the collection, render it and write the metafield."""
    resolver = resolver or HandleResolver()
    handle = resolver.resolve(handle, now=now)
    print(f"Using collection handle: {handle}")

    collection = get_collection_by_handle(client, handle)
    products = get_collection_products(client, collection.numeric_id, PRODUCT_LIMIT)

    link = collection_url(client, handle)
    html = render_collection_html(collection.title, products, link)

    publish_collection_html(client, html, dry_run=dry_run)

    return RunResult(
        handle=handle,
        title=collection.title,
        product_count=len(products),
        collection_link=link,
        html=html,
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Write a collection card to the shop email metafield.")
    parser.add_argument("handle", nargs="?", help="collection handle (default: week-<next ISO week>-plants)")
    parser.add_argument("--dry-run", action="store_true", help="render and print the HTML without writing it")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        client = get_client(ShopifyConfig.from_env())
    except ConfigurationError as e:
        print(USAGE, file=sys.stderr)
        logger.error(str(e))
        return 1

    print(f"=== Update Collection Email ===")
    print(f"Mode: {'DRY RUN' if args.dry_run else 'LIVE'}\n")

    try:
        result = run(client, args.handle, dry_run=args.dry_run)
    except ShopifyError as e:
        logger.exception(f"Run failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Unexpected failure: {e}")
        return 1

    if args.dry_run:
        print(result.html)
        print(f"\nDRY RUN - rendered {result.product_count} products from \"{result.title}\", metafield not written.")
    else:
        print(f"✓ Wrote {result.product_count} products from \"{result.title}\" "
              f"to shop metafield {EMAIL_NAMESPACE}.{COLLECTION_HTML_KEY}")
    print(f"Collection link used: {result.collection_link}")
    return 0

