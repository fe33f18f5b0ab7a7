# storerate/schemas/__init__.py

from .enums import Role
from .message import Message
from .user import User, UserBase, UserCreate, UserWithRating
from .auth import LoginRequest, SignupRequest, PasswordUpdate, AuthResponse
from .store import (
    Store,
    StoreBase,
    StoreCreate,
    StoreUpdate,
    StoreWithOwner,
    GuestStore,
    PublicStore,
)
from .rating import RatingCreate
from .stats import AdminStats, Review, StoreStats, StoreStatsResponse, UserStats

__all__ = [
    "Role",
    "Message",
    "User", "UserBase", "UserCreate", "UserWithRating",
    "LoginRequest", "SignupRequest", "PasswordUpdate", "AuthResponse",
    "Store", "StoreBase", "StoreCreate", "StoreUpdate", "StoreWithOwner",
    "GuestStore", "PublicStore",
    "RatingCreate",
    "AdminStats", "Review", "StoreStats", "StoreStatsResponse", "UserStats",
]
