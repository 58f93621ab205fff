from pydantic import EmailStr, Field
from typing import Optional
from .base import CamelModel


class ProducerCreate(CamelModel):
    name: str = Field(..., min_length=1)
    address: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    contact_info: Optional[str] = None


class ProducerUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    contact_info: Optional[str] = None


class ProducerResponse(CamelModel):
    id: int
    name: str
    address: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    contact_info: Optional[str] = None
