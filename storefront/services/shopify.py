import logging

import httpx

from storefront.models.product import Cart, Product, SelectedOption, Shop
from storefront.models.schemas import CartLine
from storefront.services.metafields import ADDITIONAL_FEATURES_KEY, MANUFACTURER_INFO_KEY

logger = logging.getLogger(__name__)


PRODUCT_METAFIELD_KEYS = (ADDITIONAL_FEATURES_KEY, MANUFACTURER_INFO_KEY)


class ShopifyError(Exception):
    """The Storefront API answered, but with errors."""


PRODUCT_QUERY = """
query product(
    $handle: String!
    $selectedOptions: [SelectedOptionInput!]!
    $metafields: [HasMetafieldsIdentifier!]!
) {
    shop {
        primaryDomain { url }
    }
    product(handle: $handle) {
        id
        title
        handle
        vendor
        description
        descriptionHtml
        metafields(identifiers: $metafields) {
            key
            value
            type
            reference {
                ... on Metaobject {
                    id
                    handle
                    fields { key value type }
                }
            }
        }
        featuredImage { id url altText width height }
        options {
            name
            optionValues { name }
        }
        selectedVariant: variantBySelectedOptions(selectedOptions: $selectedOptions) {
            id
            availableForSale
            selectedOptions { name value }
            image { id url altText width height }
            price { amount currencyCode }
            compareAtPrice { amount currencyCode }
            sku
            title
            unitPrice { amount currencyCode }
            product { title handle }
        }
        variants(first: 1) {
            nodes {
                id
                title
                availableForSale
                price { currencyCode amount }
                compareAtPrice { currencyCode amount }
                selectedOptions { name value }
            }
        }
    }
}
"""

CART_FIELDS = """
    cart { id checkoutUrl totalQuantity }
    userErrors { field message }
"""

CART_CREATE_MUTATION = f"""
mutation cartCreate($input: CartInput!) {{
    cartCreate(input: $input) {{ {CART_FIELDS} }}
}}
"""

CART_LINES_ADD_MUTATION = f"""
mutation cartLinesAdd($cartId: ID!, $lines: [CartLineInput!]!) {{
    cartLinesAdd(cartId: $cartId, lines: $lines) {{ {CART_FIELDS} }}
}}
"""


class ShopifyClient:
    def __init__(
        self,
        store_domain: str,
        storefront_token: str,
        api_version: str = "2025-01",
        timeout: float = 15.0,
        metafield_namespace: str = "furniture",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.storefront_url = f"https://{store_domain}/api/{api_version}/graphql.json"
        self.metafield_namespace = metafield_namespace
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

        self.storefront_headers = {
            "X-Shopify-Storefront-Access-Token": storefront_token,
            "Content-Type": "application/json",
        }

    # -- Low-level helpers --

    async def _storefront_query(self, query: str, variables: dict | None = None) -> dict:
        """Send a GraphQL query to the Storefront API."""
        response = await self._client.post(
            self.storefront_url,
            headers=self.storefront_headers,
            json={"query": query, "variables": variables or {}},
        )
        response.raise_for_status()
        data = response.json()
        if "errors" in data:
            logger.error("Storefront API returned errors: %s", data["errors"])
            raise ShopifyError(f"Shopify Storefront API error: {data['errors']}")
        return data["data"]

    # -- Product methods --

    async def get_product(
        self, handle: str, selected_options: list[SelectedOption]
    ) -> tuple[Shop, Product] | None:
        """Fetch a product by handle along with the variant matching the selection.

        Returns None if no product has that handle.
        """
        data = await self._storefront_query(
            PRODUCT_QUERY,
            {
                "handle": handle,
                "selectedOptions": [opt.model_dump() for opt in selected_options],
                "metafields": [
                    {"namespace": self.metafield_namespace, "key": key}
                    for key in PRODUCT_METAFIELD_KEYS
                ],
            },
        )
        node = data.get("product")
        if not node or not node.get("id"):
            return None
        return Shop.model_validate(data.get("shop") or {}), Product.model_validate(node)

    # -- Cart methods --

    async def create_cart(self, lines: list[CartLine]) -> Cart:
        data = await self._storefront_query(
            CART_CREATE_MUTATION,
            {"input": {"lines": [line.model_dump(by_alias=True) for line in lines]}},
        )
        return self._parse_cart(data["cartCreate"])

    async def add_cart_lines(self, cart_id: str, lines: list[CartLine]) -> Cart:
        data = await self._storefront_query(
            CART_LINES_ADD_MUTATION,
            {"cartId": cart_id, "lines": [line.model_dump(by_alias=True) for line in lines]},
        )
        return self._parse_cart(data["cartLinesAdd"])

    def _parse_cart(self, payload: dict) -> Cart:
        """Raise on user errors, otherwise return the cart."""
        errors = payload.get("userErrors") or []
        if errors or not payload.get("cart"):
            messages = [e.get("message", "") for e in errors] or ["No cart returned"]
            logger.error("Cart mutation failed: %s", messages)
            raise ShopifyError("; ".join(messages))
        return Cart.model_validate(payload["cart"])

    async def close(self):
        """Close the underlying HTTP client."""
        await self._client.aclose()
