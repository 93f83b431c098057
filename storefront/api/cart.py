import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import RedirectResponse

from storefront.config import settings
from storefront.dependencies import get_shopify_client
from storefront.models.schemas import CartLine
from storefront.services.shopify import ShopifyClient, ShopifyError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/cart", tags=["cart"])


def _safe_return_path(return_to: str) -> str:
    # Only same-site paths; "//host" would be protocol-relative
    if not return_to.startswith("/") or return_to.startswith("//"):
        return "/"
    return return_to


@router.post("")
async def add_to_cart(
    request: Request,
    merchandise_id: str = Form(alias="merchandiseId"),
    quantity: int = Form(default=1, ge=1),
    return_to: str = Form(default="/", alias="returnTo"),
    client: ShopifyClient = Depends(get_shopify_client),
):
    lines = [CartLine(merchandise_id=merchandise_id, quantity=quantity)]
    cart_id = request.cookies.get(settings.CART_COOKIE_NAME)

    try:
        if cart_id:
            cart = await client.add_cart_lines(cart_id, lines)
        else:
            cart = await client.create_cart(lines)
    except ShopifyError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info("Added %s x%d to cart %s", merchandise_id, quantity, cart.id)

    response = RedirectResponse(f"{_safe_return_path(return_to)}#cart-aside", status_code=303)
    response.set_cookie(settings.CART_COOKIE_NAME, cart.id, httponly=True, samesite="lax")
    return response
