from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from storerate import models, schemas
from storerate.services import user_service
from storerate.api import deps

router = APIRouter()

def register_user(db: Session, user_in: schemas.UserCreate) -> models.User:
    if user_service.get_by_email(db, email=user_in.email):
        raise HTTPException(status_code=400, detail="User already exists")
    user = user_service.create(db, user=user_in)
    if user is None:
        raise HTTPException(status_code=400, detail="User already exists")
    return user

@router.get("", response_model=List[schemas.UserWithRating])
def read_users(
    db: Session = Depends(deps.get_db),
    admin: models.User = Depends(deps.require_admin),
):
    return user_service.get_all_with_ratings(db)

@router.post("", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: schemas.UserCreate,
    db: Session = Depends(deps.get_db),
    admin: models.User = Depends(deps.require_admin),
):
    return register_user(db, user_in)
