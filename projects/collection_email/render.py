# projects/collection_email/render.py
"""
Render the collection card HTML for email.
"""
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

from connections.shopify.products import ProductRecord

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATE_NAME = "collection_card.html"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_collection_html(
    collection_title: str,
    products: Sequence[ProductRecord],
    collection_link: str
) -> str:
    """
    Render the whole card as one clickable link to `collection_link`.

    All values are HTML-escaped. Rows keep the order of `products`; an empty
    list renders a single "No products found." row.
    """
    template = _env.get_template(TEMPLATE_NAME)
    html = template.render(
        collection_title=collection_title,
        products=list(products),
        collection_link=collection_link,
    )
    return html.strip()
