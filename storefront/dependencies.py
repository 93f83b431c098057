from fastapi import Request
from fastapi.templating import Jinja2Templates

from storefront.config import settings
from storefront.services.formatting import format_money
from storefront.services.shopify import ShopifyClient

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)
templates.env.filters["money"] = format_money


def get_shopify_client(request: Request) -> ShopifyClient:
    """Provide the shared Storefront client to endpoint functions."""
    return request.app.state.shopify


def get_templates() -> Jinja2Templates:
    return templates
