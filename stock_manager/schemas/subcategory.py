from pydantic import Field
from typing import Optional
from .base import CamelModel


class SubcategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)
    category_id: int


class SubcategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    category_id: Optional[int] = None


class SubcategoryResponse(CamelModel):
    id: int
    name: str
    category_id: int
