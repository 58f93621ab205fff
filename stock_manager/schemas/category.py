from pydantic import Field
from typing import Optional
from .base import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1)


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)


class CategoryResponse(CamelModel):
    id: int
    name: str
