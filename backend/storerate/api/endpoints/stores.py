from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from storerate import models, schemas
from storerate.core import policy
from storerate.services import store_service, user_service
from storerate.api import deps

router = APIRouter()

def _check_owner_exists(db: Session, owner_id: int) -> None:
    if not user_service.get(db, user_id=owner_id):
        raise HTTPException(status_code=400, detail="Owner not found")

@router.get("", response_model=List[schemas.StoreWithOwner])
def read_stores(
    db: Session = Depends(deps.get_db),
    admin: models.User = Depends(deps.require_admin),
):
    return store_service.get_all_with_owner(db)

@router.post("", response_model=schemas.Store, status_code=status.HTTP_201_CREATED)
def create_store(
    store_in: schemas.StoreCreate,
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.require_store_owner),
):
    owner_id = policy.resolve_store_owner(current_user, store_in.owner_id)
    if owner_id != current_user.id:
        _check_owner_exists(db, owner_id)
    store = store_service.create(db, store=store_in, owner_id=owner_id)
    return store_service.to_schema(db, store)

@router.put("/{store_id}", response_model=schemas.Store)
def update_store(
    store_id: int,
    store_in: schemas.StoreUpdate,
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.get_current_user),
):
    store = store_service.get_manageable(db, current_user, store_id=store_id)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")

    owner_id = None
    if store_in.owner_id and policy.is_admin(current_user):
        _check_owner_exists(db, store_in.owner_id)
        owner_id = store_in.owner_id

    store = store_service.update(db, store, store_in, owner_id=owner_id)
    return store_service.to_schema(db, store)

@router.delete("/{store_id}", response_model=schemas.Message)
def delete_store(
    store_id: int,
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.get_current_user),
):
    store = store_service.get_manageable(db, current_user, store_id=store_id)
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    store_service.delete(db, store)
    return schemas.Message(message="Store removed")
