from pathlib import Path
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent

class Settings(BaseSettings):
    SHOPIFY_STORE_DOMAIN: str = ""          # mystore.myshopify.com
    SHOPIFY_STOREFRONT_ACCESS_TOKEN: str = ""
    SHOPIFY_API_VERSION: str = "2025-01"
    SHOPIFY_REQUEST_TIMEOUT: float = 15.0
    METAFIELD_NAMESPACE: str = "furniture"
    TEMPLATES_DIR: str = str(BASE_DIR / "templates")
    CART_COOKIE_NAME: str = "cart"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings() #type: ignore
