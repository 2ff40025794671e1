# projects/collection_email/config.py
"""
Project settings for the collection email card.
"""

# ============================================================
# CONFIGURATION
# ============================================================
HANDLE_SUFFIX = "plants"      # default handle: week-<N>-plants
LEAD_DAYS = 7                 # build next week's card
PRODUCT_LIMIT = 50

USAGE = (
    "Usage: SHOPIFY_SHOP=... SHOPIFY_ADMIN_TOKEN=... "
    "python -m projects.collection_email [collection-handle] [--dry-run]"
)
