import logging

from storefront.models.product import SelectedOption
from storefront.models.schemas import ProductPageResponse
from storefront.services.shopify import ShopifyClient
from storefront.services.variants import NotOrderableError, resolve_selected_variant

logger = logging.getLogger(__name__)


async def load_product_page(
    client: ShopifyClient, handle: str, selection: list[SelectedOption]
) -> ProductPageResponse | None:
    """Fetch a product and settle on the variant to show.

    Returns None when the handle doesn't resolve to a product.
    """
    logger.debug("Selected options for %s: %s", handle, [s.model_dump() for s in selection])

    result = await client.get_product(handle, selection)
    if result is None:
        logger.info("Product not found: %s", handle)
        return None
    shop, product = result

    try:
        selected_variant = resolve_selected_variant(product, selection)
    except NotOrderableError:
        logger.warning("Product %s has no variants", handle)
        return ProductPageResponse(shop=shop, product=product, selected_variant=None, orderable=False)

    return ProductPageResponse(shop=shop, product=product, selected_variant=selected_variant)
