from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from storerate.core.security import password_policy_error
from .base import CamelModel
from .enums import Role

class UserBase(CamelModel):
    name: str = Field(..., min_length=2, max_length=60)
    email: EmailStr
    address: Optional[str] = Field(None, max_length=400)

class UserCreate(UserBase):
    password: str
    role: Role = Role.normal_user

    @field_validator("password")
    @classmethod
    def check_password_policy(cls, value: str) -> str:
        error = password_policy_error(value)
        if error:
            raise ValueError(error)
        return value

class User(CamelModel):
    id: int
    name: str
    email: str
    role: Role
    address: Optional[str] = None

class UserWithRating(User):
    created_at: Optional[datetime] = None
    # Average over the stores a Store Owner owns; None for other roles
    rating: Optional[float] = None
