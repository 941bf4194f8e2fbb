"""API routes. Every endpoint is mounted here under settings.API_PREFIX."""

from fastapi import APIRouter

from app.api.routes import addresses, auth, categories, health, orders, products, users

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, tags=["users"])
router.include_router(categories.router, tags=["categories"])
router.include_router(products.router, tags=["products"])
router.include_router(orders.router, tags=["orders"])
router.include_router(addresses.router, tags=["addresses"])
