from pydantic import EmailStr, Field, field_validator
from typing import Optional
from .base import CamelModel

# bcrypt refuses passwords longer than 72 bytes
PASSWORD_MAX_BYTES = 72


def check_password_bytes(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password cannot be longer than {PASSWORD_MAX_BYTES} bytes")
    return value


class UserCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone_number: Optional[str] = None
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_bytes(value)


class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    password: Optional[str] = Field(None, min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: Optional[str]) -> Optional[str]:
        return check_password_bytes(value)


class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    phone_number: Optional[str] = None
