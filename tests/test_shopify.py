import asyncio

import httpx
import pytest

from storefront.models.product import SelectedOption
from storefront.models.schemas import CartLine
from storefront.services.shopify import ShopifyClient, ShopifyError


def test_get_product_sends_handle_selection_and_metafields(shopify_client, storefront):
    selection = [SelectedOption(name="Color", value="Walnut"), SelectedOption(name="Size", value="Large")]
    shop, product = asyncio.run(shopify_client.get_product("oak-chair", selection))

    sent = storefront.requests[0]["variables"]
    assert sent["handle"] == "oak-chair"
    assert sent["selectedOptions"] == [
        {"name": "Color", "value": "Walnut"},
        {"name": "Size", "value": "Large"},
    ]
    assert sent["metafields"] == [
        {"namespace": "furniture", "key": "additional_features"},
        {"namespace": "furniture", "key": "manufacturer_info"},
    ]

    assert shop.primary_domain.url == "https://oak-and-walnut.example"
    assert product.selected_variant.id == "gid://shopify/ProductVariant/4"
    assert [v.id for v in product.variants] == ["gid://shopify/ProductVariant/1"]
    assert product.metafields == []


def test_get_product_missing_returns_none(shopify_client):
    assert asyncio.run(shopify_client.get_product("does-not-exist", [])) is None


def test_get_product_without_id_returns_none():
    def handler(request):
        return httpx.Response(200, json={"data": {"shop": None, "product": {"id": None}}})

    client = ShopifyClient("shop.myshopify.com", "token", transport=httpx.MockTransport(handler))
    assert asyncio.run(client.get_product("oak-chair", [])) is None


def test_request_goes_to_versioned_storefront_endpoint():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["token"] = request.headers["X-Shopify-Storefront-Access-Token"]
        return httpx.Response(200, json={"data": {"shop": None, "product": None}})

    client = ShopifyClient(
        "shop.myshopify.com", "secret", api_version="2024-10", transport=httpx.MockTransport(handler)
    )
    asyncio.run(client.get_product("oak-chair", []))
    assert seen["url"] == "https://shop.myshopify.com/api/2024-10/graphql.json"
    assert seen["token"] == "secret"


def test_graphql_errors_raise():
    def handler(request):
        return httpx.Response(200, json={"errors": [{"message": "Throttled"}]})

    client = ShopifyClient("shop.myshopify.com", "token", transport=httpx.MockTransport(handler))
    with pytest.raises(ShopifyError, match="Throttled"):
        asyncio.run(client.get_product("oak-chair", []))


def test_http_errors_raise():
    def handler(request):
        return httpx.Response(401, json={"errors": "Unauthorized"})

    client = ShopifyClient("shop.myshopify.com", "token", transport=httpx.MockTransport(handler))
    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.get_product("oak-chair", []))


def test_create_then_add_cart_lines(shopify_client):
    line = CartLine(merchandise_id="gid://shopify/ProductVariant/1")

    async def scenario():
        cart = await shopify_client.create_cart([line])
        return cart, await shopify_client.add_cart_lines(cart.id, [line])

    created, updated = asyncio.run(scenario())
    assert created.total_quantity == 1
    assert updated.id == created.id
    assert updated.total_quantity == 2


def test_cart_user_errors_raise(shopify_client):
    line = CartLine(merchandise_id="gid://shopify/ProductVariant/1")
    with pytest.raises(ShopifyError, match="does not exist"):
        asyncio.run(shopify_client.add_cart_lines("gid://shopify/Cart/missing", [line]))
