import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from storefront.config import settings
from storefront.api.router import router
from storefront.services.shopify import ShopifyClient

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup: one Storefront client shared by every request
    app.state.shopify = ShopifyClient(
        store_domain=settings.SHOPIFY_STORE_DOMAIN,
        storefront_token=settings.SHOPIFY_STOREFRONT_ACCESS_TOKEN,
        api_version=settings.SHOPIFY_API_VERSION,
        timeout=settings.SHOPIFY_REQUEST_TIMEOUT,
        metafield_namespace=settings.METAFIELD_NAMESPACE,
    )
    logger.info("Storefront client ready for %s", settings.SHOPIFY_STORE_DOMAIN or "<unset>")
    yield
    # shutdown: cleanup resources
    await app.state.shopify.close()

app = FastAPI(
    title="Storefront Product Pages",
    description="Product detail pages rendered from the Shopify Storefront API.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
