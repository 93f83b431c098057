import httpx
import pytest

from storefront.services.shopify import ShopifyClient
from tests.factories import FakeStorefront, make_product, make_variant


@pytest.fixture
def storefront():
    return FakeStorefront([
        make_product(),
        make_product(
            "sold-out-stool",
            variants=[make_variant(9, "Oak", "Small", "80.0", available=False)],
        ),
        make_product("ghost-lamp", variants=[]),
    ])


@pytest.fixture
def shopify_client(storefront):
    return ShopifyClient(
        store_domain="oak-and-walnut.myshopify.com",
        storefront_token="test-token",
        transport=httpx.MockTransport(storefront),
    )


@pytest.fixture
def client(shopify_client):
    from fastapi.testclient import TestClient

    from storefront.dependencies import get_shopify_client
    from storefront.main import app

    app.dependency_overrides[get_shopify_client] = lambda: shopify_client
    yield TestClient(app)
    app.dependency_overrides.clear()
