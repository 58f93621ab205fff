from sqlalchemy import Column, Integer, DateTime, Enum, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from enum import Enum as PyEnum
from ..database import Base


class OrderStatus(str, PyEnum):
    PENDING = "PENDING"  # waiting to be prepared
    PREPARED = "PREPARED"  # ready for pickup / delivery
    COMPLETED = "COMPLETED"  # handed over
    CANCELLED = "CANCELLED"


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    # Exactly one of the two parties is set
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=True, index=True)

    order_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(Enum(OrderStatus), default=OrderStatus.PENDING, nullable=False)

    # Sum of quantity * unit_price over the items: 2dp x 2dp needs 4dp,
    # 18 integer digits hold many lines at the largest quantity and price
    total_amount = Column(Numeric(22, 4), nullable=False, default=0)

    customer = relationship("Customer", back_populates="orders")
    client = relationship("Client", back_populates="orders")
    # Items are removed by the order service before the order itself
    order_items = relationship("OrderItem", back_populates="order")
