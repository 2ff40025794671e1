"""Pytest fixtures for the collection email pipeline."""

import pytest

SHOP_DOMAIN = "flwr-farm.myshopify.com"


def operation_name(query):
    """'query shopId { ... }' -> 'shopId'."""
    return query.split("(")[0].split("{")[0].split()[1]


class FakeClient:
    """Stands in for ShopifyClient; answers each operation from a canned payload."""

    shop_domain = SHOP_DOMAIN

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def execute(self, query, variables=None):
        name = operation_name(query)
        self.calls.append((name, variables))
        response = self.responses[name]
        if isinstance(response, Exception):
            raise response
        return response

    def mutate(self, mutation, variables=None, dry_run=False):
        if dry_run:
            self.calls.append(("dry_run", variables))
            return None
        return self.execute(mutation, variables)

    def called(self, name):
        return [variables for op, variables in self.calls if op == name]


def product_node(title, amount="12.5", currency="USD", image=True, alt="", handle=None, url=None):
    return {
        "title": title,
        "handle": handle or title.lower().replace(" ", "-"),
        "onlineStoreUrl": url,
        "featuredImage": {"url": f"https://cdn.shopify.com/{title}.jpg", "altText": alt} if image else None,
        "priceRangeV2": {"minVariantPrice": {"amount": amount, "currencyCode": currency}},
    }


def shop_responses(nodes, collection=True, user_errors=None):
    return {
        "collectionByHandle": {
            "collectionByHandle": {"id": "gid://shopify/Collection/4242", "title": "Week 4 Plants"}
            if collection else None
        },
        "productsInCollection": {"products": {"edges": [{"node": n} for n in nodes]}},
        "shopId": {"shop": {"id": "gid://shopify/Shop/1"}},
        "metafieldsSet": {
            "metafieldsSet": {
                "metafields": [] if user_errors else [
                    {"id": "gid://shopify/Metafield/9", "namespace": "email", "key": "collection_html_1"}
                ],
                "userErrors": user_errors or [],
            }
        },
    }


@pytest.fixture
def make_client():
    def _make(nodes=(), **kwargs):
        return FakeClient(shop_responses(list(nodes), **kwargs))
    return _make
