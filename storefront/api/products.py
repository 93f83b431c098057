from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from storefront.dependencies import get_shopify_client, get_templates
from storefront.models.product import SelectedOption
from storefront.models.schemas import ProductPageResponse
from storefront.services.formatting import shop_pay_url
from storefront.services.metafields import additional_features, manufacturer_info
from storefront.services.product_page import load_product_page
from storefront.services.shopify import ShopifyClient
from storefront.services.variants import build_option_choices, parse_selected_options

router = APIRouter(tags=["products"])


async def _load_or_404(
    client: ShopifyClient, handle: str, selection: list[SelectedOption]
) -> ProductPageResponse:
    page = await load_product_page(client, handle, selection)
    if page is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return page


@router.get("/api/products/{handle}", response_model=ProductPageResponse)
async def get_product_data(
    request: Request,
    handle: str,
    client: ShopifyClient = Depends(get_shopify_client),
):
    selection = parse_selected_options(request.query_params.multi_items())
    return await _load_or_404(client, handle, selection)


@router.get("/products/{handle}", response_class=HTMLResponse)
async def get_product_page(
    request: Request,
    handle: str,
    client: ShopifyClient = Depends(get_shopify_client),
    templates: Jinja2Templates = Depends(get_templates),
):
    selection = parse_selected_options(request.query_params.multi_items())
    page = await load_product_page(client, handle, selection)
    if page is None:
        return Response(status_code=404)
    product = page.product
    variant = page.selected_variant

    return_to = request.url.path
    if request.url.query:
        return_to = f"{return_to}?{request.url.query}"

    return templates.TemplateResponse(
        request,
        "product.html",
        {
            "shop": page.shop,
            "product": product,
            "selected_variant": variant,
            "image": (variant.image if variant else None) or product.featured_image,
            "option_choices": build_option_choices(
                request.url.path, product.options, variant, selection
            ),
            "shop_pay_url": (
                shop_pay_url(page.shop, [variant.id])
                if variant is not None and variant.available_for_sale
                else None
            ),
            "additional_features": additional_features(product.metafields),
            "manufacturer": manufacturer_info(product.metafields),
            "return_to": return_to,
        },
    )
