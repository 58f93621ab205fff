from pydantic import Field
from typing import List, Optional
from datetime import datetime
from .base import CamelModel, Money, Price
from .order_item import OrderItemNestedCreate, OrderItemResponse
from .party import CustomerResponse, ClientResponse
from ..models.order import OrderStatus


class OrderCreate(CamelModel):
    customer_id: Optional[int] = None
    client_id: Optional[int] = None
    order_date: Optional[datetime] = None
    status: Optional[OrderStatus] = None
    # Accepted for compatibility, the stored total is always recomputed from the items
    total_amount: Optional[Price] = None
    order_items: List[OrderItemNestedCreate] = Field(default_factory=list)


class OrderUpdate(CamelModel):
    customer_id: Optional[int] = None
    client_id: Optional[int] = None
    order_date: Optional[datetime] = None
    status: Optional[OrderStatus] = None
    total_amount: Optional[Price] = None


class OrderResponse(CamelModel):
    id: int
    customer_id: Optional[int] = None
    client_id: Optional[int] = None
    order_date: datetime
    status: OrderStatus
    total_amount: Money

    customer: Optional[CustomerResponse] = None
    client: Optional[ClientResponse] = None
    order_items: List[OrderItemResponse] = Field(default_factory=list)
