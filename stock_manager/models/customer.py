from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from ..database import Base


class Customer(Base):
    """Individual buying from the shop"""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(50), nullable=True)

    orders = relationship("Order", back_populates="customer")
