from pydantic import Field
from typing import Optional
from .base import CamelModel, NamedRef
from ..models.product import Unit


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1)
    unit: Unit
    description: Optional[str] = None
    category_id: int
    subcategory_id: Optional[int] = None
    producer_id: int
    is_active: bool = True


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    unit: Optional[Unit] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    subcategory_id: Optional[int] = None
    producer_id: Optional[int] = None
    is_active: Optional[bool] = None


class ProductSummary(CamelModel):
    """Product as embedded in order items and history records"""

    id: int
    name: str
    unit: Unit
    producer: Optional[NamedRef] = None


class ProductResponse(CamelModel):
    id: int
    name: str
    unit: Unit
    description: Optional[str] = None
    category_id: int
    subcategory_id: Optional[int] = None
    producer_id: int
    is_active: bool

    category: Optional[NamedRef] = None
    subcategory: Optional[NamedRef] = None
    producer: Optional[NamedRef] = None
