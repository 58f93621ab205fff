from .catalog import CategoryService, SubcategoryService, ProducerService
from .party_service import CustomerService, ClientService
from .product_service import ProductService
from .product_history_service import ProductHistoryService
from .order_service import OrderService
from .order_item_service import OrderItemService
from .user_service import UserService
from .auth_service import AuthService, TokenPair

__all__ = [
    "CategoryService",
    "SubcategoryService",
    "ProducerService",
    "CustomerService",
    "ClientService",
    "ProductService",
    "ProductHistoryService",
    "OrderService",
    "OrderItemService",
    "UserService",
    "AuthService",
    "TokenPair"
]
