from .base import MessageResponse, NamedRef
from .category import CategoryCreate, CategoryUpdate, CategoryResponse
from .subcategory import SubcategoryCreate, SubcategoryUpdate, SubcategoryResponse
from .producer import ProducerCreate, ProducerUpdate, ProducerResponse
from .product import ProductCreate, ProductUpdate, ProductResponse, ProductSummary
from .product_history import ProductHistoryCreate, ProductHistoryUpdate, ProductHistoryResponse
from .party import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    ClientCreate,
    ClientUpdate,
    ClientResponse
)
from .order_item import OrderItemNestedCreate, OrderItemCreate, OrderItemUpdate, OrderItemResponse
from .order import OrderCreate, OrderUpdate, OrderResponse
from .user import UserCreate, UserUpdate, UserResponse
from .auth import LoginRequest, AuthResponse

__all__ = [
    "MessageResponse",
    "NamedRef",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryResponse",
    "SubcategoryCreate",
    "SubcategoryUpdate",
    "SubcategoryResponse",
    "ProducerCreate",
    "ProducerUpdate",
    "ProducerResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "ProductSummary",
    "ProductHistoryCreate",
    "ProductHistoryUpdate",
    "ProductHistoryResponse",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "ClientCreate",
    "ClientUpdate",
    "ClientResponse",
    "OrderItemNestedCreate",
    "OrderItemCreate",
    "OrderItemUpdate",
    "OrderItemResponse",
    "OrderCreate",
    "OrderUpdate",
    "OrderResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "LoginRequest",
    "AuthResponse"
]
