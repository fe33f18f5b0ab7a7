from typing import Dict, List, Optional
from datetime import datetime

from .base import CamelModel

class AdminStats(CamelModel):
    total_ratings: int
    total_users: int
    total_stores: int
    active_users: int

class Review(CamelModel):
    id: int
    user: Optional[str] = None
    score: int
    date: Optional[datetime] = None

class StoreStats(CamelModel):
    id: int
    name: str
    address: str
    email: str
    total_ratings: int
    average_rating: float
    rating_counts: Dict[int, int]
    reviews: List[Review]

class StoreStatsResponse(CamelModel):
    stores: List[StoreStats]

class UserStats(CamelModel):
    total_reviews_given: int
    average_rating_given: float
    member_since: Optional[datetime] = None
