from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from storerate import models, schemas
from storerate.services import stats_service
from storerate.api import deps

router = APIRouter()

@router.get("/admin", response_model=schemas.AdminStats)
def read_admin_stats(
    db: Session = Depends(deps.get_db),
    admin: models.User = Depends(deps.require_admin),
):
    return stats_service.get_admin_stats(db)

@router.get("/store", response_model=schemas.StoreStatsResponse)
def read_store_stats(
    db: Session = Depends(deps.get_db),
    owner: models.User = Depends(deps.require_store_owner),
):
    """
    Ratings breakdown for each store the caller owns.
    """
    return stats_service.get_store_stats(db, owner_id=owner.id)

@router.get("/user", response_model=schemas.UserStats)
def read_user_stats(
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.get_current_user),
):
    return stats_service.get_user_stats(db, current_user)
