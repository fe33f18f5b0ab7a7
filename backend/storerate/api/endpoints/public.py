from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional
from storerate import models, schemas
from storerate.services import store_service
from storerate.api import deps

router = APIRouter()

@router.get("/public/stores", response_model=List[schemas.PublicStore])
def read_public_stores(
    search: Optional[str] = None,
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.get_current_user),
):
    """
    Every store with its average rating and the caller's own score (0 if unrated).
    """
    return store_service.get_listing(db, search=search, user_id=current_user.id)

@router.get("/guest/stores", response_model=List[schemas.GuestStore])
def read_guest_stores(search: Optional[str] = None, db: Session = Depends(deps.get_db)):
    return store_service.get_listing(db, search=search)
