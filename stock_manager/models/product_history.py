from sqlalchemy import Column, Integer, Date, Numeric, Text, ForeignKey
from sqlalchemy.orm import relationship
from ..database import Base


class ProductHistory(Base):
    """Weekly stock record of a product"""

    __tablename__ = "product_history"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    week_start_date = Column(Date, nullable=False, index=True)
    received_quantity = Column(Integer, nullable=False, default=0)
    sold_quantity = Column(Integer, nullable=False, default=0)
    unsold_quantity = Column(Integer, nullable=False, default=0)

    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=True)

    product = relationship("Product", back_populates="history")
