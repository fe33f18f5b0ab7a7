from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import Dict, List, Optional
from storerate import models, schemas
from storerate.core.logger import setup_logger
from storerate.core.security import hash_password, verify_password
from storerate.schemas.enums import Role
from storerate.utils.ratings import average_rating

logger = setup_logger("services.user")

class UserService:
    def get(self, db: Session, user_id: int):
        return db.query(models.User).filter(models.User.id == user_id).first()

    def get_by_email(self, db: Session, email: str):
        return db.query(models.User).filter(models.User.email == email).first()

    def authenticate(self, db: Session, email: str, password: str) -> Optional[models.User]:
        user = self.get_by_email(db, email=email)
        if not user or not verify_password(password, user.password):
            return None
        return user

    def create(self, db: Session, user: schemas.UserCreate) -> Optional[models.User]:
        db_user = models.User(
            name=user.name,
            email=user.email,
            address=user.address,
            role=user.role,
            password=hash_password(user.password),
        )
        try:
            db.add(db_user)
            db.commit()
            db.refresh(db_user)
        except IntegrityError:
            # Lost a race with another signup for the same email
            db.rollback()
            return None
        logger.info(f"Created user {db_user.id} ({db_user.role.value})")
        return db_user

    def update_password(self, db: Session, user: models.User, new_password: str) -> models.User:
        user.password = hash_password(new_password)
        db.commit()
        db.refresh(user)
        logger.info(f"Password changed for user {user.id}")
        return user

    def get_owner_ratings(self, db: Session) -> Dict[int, float]:
        """Average score across every store each owner owns, keyed by owner id."""
        rows = (
            db.query(
                models.Store.owner_id,
                func.sum(models.Rating.score),
                func.count(models.Rating.id),
            )
            .join(models.Rating, models.Rating.store_id == models.Store.id)
            .filter(models.Store.owner_id.isnot(None))
            .group_by(models.Store.owner_id)
            .all()
        )
        return {owner_id: average_rating(total, count) for owner_id, total, count in rows}

    def get_all_with_ratings(self, db: Session) -> List[dict]:
        users = (
            db.query(models.User)
            .order_by(models.User.created_at.desc(), models.User.id.desc())
            .all()
        )
        owner_ratings = self.get_owner_ratings(db)

        result = []
        for user in users:
            rating = None
            if user.role == Role.store_owner:
                rating = owner_ratings.get(user.id, 0.0)
            result.append({
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "role": user.role,
                "address": user.address,
                "created_at": user.created_at,
                "rating": rating,
            })
        return result

user_service = UserService()
