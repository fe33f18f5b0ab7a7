from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from storerate import models, schemas
from storerate.services import rating_service, store_service
from storerate.api import deps

router = APIRouter()

@router.post("", response_model=schemas.Message)
def submit_rating(
    rating_in: schemas.RatingCreate,
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.get_current_user),
):
    """
    Submit a 1-5 score for a store, replacing any score the caller gave it before.
    """
    if not store_service.get(db, store_id=rating_in.store_id):
        raise HTTPException(status_code=404, detail="Store not found")
    rating_service.submit(
        db, user_id=current_user.id, store_id=rating_in.store_id, score=rating_in.score
    )
    return schemas.Message(message="Rating submitted successfully")
