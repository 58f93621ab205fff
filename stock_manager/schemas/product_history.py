from datetime import date
from pydantic import NonNegativeInt, PositiveInt
from typing import Optional
from .base import CamelModel, Money, Price
from .product import ProductSummary


class ProductHistoryCreate(CamelModel):
    product_id: PositiveInt
    week_start_date: date
    received_quantity: NonNegativeInt
    sold_quantity: NonNegativeInt
    unsold_quantity: NonNegativeInt
    description: Optional[str] = None
    price: Optional[Price] = None


class ProductHistoryUpdate(CamelModel):
    product_id: Optional[PositiveInt] = None
    week_start_date: Optional[date] = None
    received_quantity: Optional[NonNegativeInt] = None
    sold_quantity: Optional[NonNegativeInt] = None
    unsold_quantity: Optional[NonNegativeInt] = None
    description: Optional[str] = None
    price: Optional[Price] = None


class ProductHistoryResponse(CamelModel):
    id: int
    product_id: int
    week_start_date: date
    received_quantity: int
    sold_quantity: int
    unsold_quantity: int
    description: Optional[str] = None
    price: Optional[Money] = None

    product: Optional[ProductSummary] = None
