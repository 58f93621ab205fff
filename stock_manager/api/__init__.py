from fastapi import APIRouter
from .routes import (
    categories_router,
    subcategories_router,
    producers_router,
    products_router,
    product_history_router,
    customers_router,
    clients_router,
    orders_router,
    order_items_router,
    users_router,
    auth_router,
)

# Main API router, mounted under settings.api_prefix
api_router = APIRouter()

api_router.include_router(categories_router)
api_router.include_router(subcategories_router)
api_router.include_router(producers_router)
api_router.include_router(products_router)
api_router.include_router(product_history_router)
api_router.include_router(customers_router)
api_router.include_router(clients_router)
api_router.include_router(orders_router)
api_router.include_router(order_items_router)
api_router.include_router(users_router)
api_router.include_router(auth_router)

__all__ = ["api_router"]
