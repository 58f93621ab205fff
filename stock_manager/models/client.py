from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from ..database import Base


class Client(Base):
    """Business account buying from the shop"""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    phone_number = Column(String(50), nullable=True)

    orders = relationship("Order", back_populates="client")
