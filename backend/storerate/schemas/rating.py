from pydantic import Field

from .base import CamelModel

class RatingCreate(CamelModel):
    store_id: int = Field(..., gt=0)
    score: int = Field(..., ge=1, le=5)
