from pydantic import BaseModel, EmailStr
from .user import UserResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    access_token: str
    user: UserResponse
