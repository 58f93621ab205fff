from sqlalchemy import Column, Integer, String, Text, Boolean, Enum, ForeignKey
from sqlalchemy.orm import relationship
from enum import Enum as PyEnum
from ..database import Base


class Unit(str, PyEnum):
    KG = "KG"  # kilograms
    L = "L"  # litres
    UN = "UN"  # units


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    unit = Column(Enum(Unit), nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    subcategory_id = Column(Integer, ForeignKey("subcategories.id"), nullable=True, index=True)
    producer_id = Column(Integer, ForeignKey("producers.id"), nullable=False, index=True)

    category = relationship("Category")
    subcategory = relationship("Subcategory")
    producer = relationship("Producer")
    history = relationship("ProductHistory", back_populates="product")
