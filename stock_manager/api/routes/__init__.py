from .categories import router as categories_router
from .subcategories import router as subcategories_router
from .producers import router as producers_router
from .products import router as products_router
from .product_history import router as product_history_router
from .customers import router as customers_router
from .clients import router as clients_router
from .orders import router as orders_router
from .order_items import router as order_items_router
from .users import router as users_router
from .auth import router as auth_router

__all__ = [
    "categories_router",
    "subcategories_router",
    "producers_router",
    "products_router",
    "product_history_router",
    "customers_router",
    "clients_router",
    "orders_router",
    "order_items_router",
    "users_router",
    "auth_router"
]
