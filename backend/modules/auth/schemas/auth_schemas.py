# backend/modules/auth/schemas/auth_schemas.py

from typing import Optional

from pydantic import Field

from core.schemas import CamelModel


class UserRegister(CamelModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)


class UserLogin(CamelModel):
    email: str
    password: str


class RegisteredUser(CamelModel):
    user_id: int
    email: str
    role: str


class UserProfile(CamelModel):
    """Returned on login; the client keeps it for the session"""

    user_id: int
    email: str
    first_name: str
    last_name: str
    role: str
