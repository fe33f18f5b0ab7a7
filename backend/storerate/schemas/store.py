from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from .base import CamelModel
from .user import User

class StoreBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    address: str = Field(..., min_length=1, max_length=400)

class StoreCreate(StoreBase):
    # Only honoured when an administrator creates the store
    owner_id: Optional[int] = None

class StoreUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    address: Optional[str] = Field(None, max_length=400)
    owner_id: Optional[int] = None

    @field_validator("name", "email", "address", mode="before")
    @classmethod
    def blank_means_unchanged(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

class Store(StoreBase):
    id: int
    email: str
    owner_id: Optional[int] = None
    rating: float = 0.0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class StoreWithOwner(CamelModel):
    id: int
    name: str
    email: str
    address: str
    owner: Optional[User] = None
    rating: float = 0.0

class GuestStore(CamelModel):
    id: int
    name: str
    address: str
    rating: float = 0.0
    rating_count: int = 0

class PublicStore(GuestStore):
    email: str
    my_rating: int = 0
