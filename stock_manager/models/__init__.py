from .category import Category
from .subcategory import Subcategory
from .producer import Producer
from .product import Product, Unit
from .product_history import ProductHistory
from .customer import Customer
from .client import Client
from .order import Order, OrderStatus
from .order_item import OrderItem
from .user import User

__all__ = [
    "Category",
    "Subcategory",
    "Producer",
    "Product",
    "Unit",
    "ProductHistory",
    "Customer",
    "Client",
    "Order",
    "OrderStatus",
    "OrderItem",
    "User"
]
