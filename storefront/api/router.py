from fastapi import APIRouter
from storefront.api.cart import router as cart_router
from storefront.api.products import router as products_router

router = APIRouter()
router.include_router(products_router)
router.include_router(cart_router)
