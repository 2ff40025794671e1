# projects/collection_email/__init__.py
"""
Weekly collection email card.

Renders the products of a Shopify collection into an email-safe HTML card and
stores it in the shop metafield email.collection_html_1.
"""
