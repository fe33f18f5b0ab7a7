from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload
from typing import Dict, List, Optional, Tuple
from storerate import models, schemas
from storerate.core import policy
from storerate.core.logger import setup_logger
from storerate.utils.ratings import average_rating

logger = setup_logger("services.store")

class StoreService:
    def get(self, db: Session, store_id: int):
        return db.query(models.Store).filter(models.Store.id == store_id).first()

    def get_manageable(self, db: Session, user: models.User, store_id: int):
        """The store if it exists and the caller may change it, else None."""
        store = self.get(db, store_id=store_id)
        if store is None or not policy.can_manage_store(user, store):
            return None
        return store

    def rating_summary(self, db: Session, store_id: int) -> Tuple[float, int]:
        total, count = (
            db.query(func.sum(models.Rating.score), func.count(models.Rating.id))
            .filter(models.Rating.store_id == store_id)
            .one()
        )
        return average_rating(total, count), count or 0

    def _with_rating_totals(self, db: Session):
        totals = (
            db.query(
                models.Rating.store_id.label("store_id"),
                func.sum(models.Rating.score).label("total"),
                func.count(models.Rating.id).label("count"),
            )
            .group_by(models.Rating.store_id)
            .subquery()
        )
        return (
            db.query(models.Store, totals.c.total, totals.c.count)
            .outerjoin(totals, totals.c.store_id == models.Store.id)
        )

    def get_all_with_owner(self, db: Session) -> List[dict]:
        rows = (
            self._with_rating_totals(db)
            .options(joinedload(models.Store.owner))
            .order_by(models.Store.created_at.desc(), models.Store.id.desc())
            .all()
        )
        return [
            {
                "id": store.id,
                "name": store.name,
                "email": store.email,
                "address": store.address,
                "owner": schemas.User.model_validate(store.owner) if store.owner else None,
                "rating": average_rating(total, count),
            }
            for store, total, count in rows
        ]

    def get_listing(
        self,
        db: Session,
        search: Optional[str] = None,
        user_id: Optional[int] = None,
    ) -> List[dict]:
        """Every store with its live average; includes the caller's own score when user_id is given."""
        query = self._with_rating_totals(db)
        if search:
            escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            pattern = f"%{escaped}%"
            query = query.filter(
                or_(
                    models.Store.name.ilike(pattern, escape="\\"),
                    models.Store.address.ilike(pattern, escape="\\"),
                )
            )
        rows = query.order_by(models.Store.id).all()

        my_ratings: Dict[int, int] = {}
        if user_id is not None:
            my_ratings = dict(
                db.query(models.Rating.store_id, models.Rating.score)
                .filter(models.Rating.user_id == user_id)
                .all()
            )

        listing = []
        for store, total, count in rows:
            item = {
                "id": store.id,
                "name": store.name,
                "email": store.email,
                "address": store.address,
                "rating": average_rating(total, count),
                "rating_count": count or 0,
            }
            if user_id is not None:
                item["my_rating"] = my_ratings.get(store.id, 0)
            listing.append(item)
        return listing

    def to_schema(self, db: Session, store: models.Store) -> schemas.Store:
        rating, _ = self.rating_summary(db, store.id)
        return schemas.Store(
            id=store.id,
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=store.owner_id,
            rating=rating,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )

    def create(self, db: Session, store: schemas.StoreCreate, owner_id: int) -> models.Store:
        db_store = models.Store(
            name=store.name,
            email=store.email,
            address=store.address,
            owner_id=owner_id,
        )
        db.add(db_store)
        db.commit()
        db.refresh(db_store)
        logger.info(f"Created store {db_store.id} for owner {owner_id}")
        return db_store

    def update(
        self,
        db: Session,
        db_store: models.Store,
        store_in: schemas.StoreUpdate,
        owner_id: Optional[int] = None,
    ) -> models.Store:
        if store_in.name:
            db_store.name = store_in.name
        if store_in.email:
            db_store.email = store_in.email
        if store_in.address:
            db_store.address = store_in.address
        if owner_id is not None:
            db_store.owner_id = owner_id
        db.commit()
        db.refresh(db_store)
        logger.info(f"Updated store {db_store.id}")
        return db_store

    def delete(self, db: Session, db_store: models.Store) -> None:
        store_id = db_store.id
        db.delete(db_store)
        db.commit()
        logger.info(f"Deleted store {store_id}")

store_service = StoreService()
