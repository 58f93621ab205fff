"""Schemas for the two kinds of order party: customers and clients"""

from pydantic import EmailStr, Field
from typing import Optional
from .base import CamelModel


class PartyCreate(CamelModel):
    name: str = Field(..., min_length=1)
    address: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None


class PartyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None


class PartyResponse(CamelModel):
    id: int
    name: str
    address: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None


class CustomerCreate(PartyCreate):
    pass


class CustomerUpdate(PartyUpdate):
    pass


class CustomerResponse(PartyResponse):
    pass


class ClientCreate(PartyCreate):
    pass


class ClientUpdate(PartyUpdate):
    pass


class ClientResponse(PartyResponse):
    pass
