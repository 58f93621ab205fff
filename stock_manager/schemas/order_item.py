from typing import Optional
from .base import CamelModel, Money, Price, Quantity
from .product import ProductSummary


class OrderItemNestedCreate(CamelModel):
    """Item created together with its order"""

    product_id: int
    quantity: Quantity
    unit_price: Price


class OrderItemCreate(OrderItemNestedCreate):
    order_id: int


class OrderItemUpdate(CamelModel):
    order_id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: Optional[Quantity] = None
    unit_price: Optional[Price] = None


class OrderItemResponse(CamelModel):
    id: int
    order_id: int
    product_id: int
    quantity: Money
    unit_price: Money

    product: Optional[ProductSummary] = None
