from collections import defaultdict
from sqlalchemy import func
from sqlalchemy.orm import Session
from storerate import models, schemas
from storerate.schemas.enums import Role
from storerate.utils.ratings import average_rating, rating_histogram

class StatsService:
    def get_admin_stats(self, db: Session) -> schemas.AdminStats:
        return schemas.AdminStats(
            total_ratings=db.query(func.count(models.Rating.id)).scalar() or 0,
            total_users=db.query(func.count(models.User.id)).scalar() or 0,
            total_stores=db.query(func.count(models.Store.id)).scalar() or 0,
            active_users=db.query(func.count(models.User.id))
            .filter(models.User.role == Role.normal_user)
            .scalar() or 0,
        )

    def get_store_stats(self, db: Session, owner_id: int) -> schemas.StoreStatsResponse:
        """Per-store rating breakdown for every store the owner owns."""
        stores = (
            db.query(models.Store)
            .filter(models.Store.owner_id == owner_id)
            .order_by(models.Store.id)
            .all()
        )
        if not stores:
            return schemas.StoreStatsResponse(stores=[])

        rows = (
            db.query(models.Rating, models.User.name)
            .join(models.User, models.User.id == models.Rating.user_id)
            .filter(models.Rating.store_id.in_([store.id for store in stores]))
            .order_by(models.Rating.created_at.desc(), models.Rating.id.desc())
            .all()
        )
        ratings_by_store = defaultdict(list)
        for rating, rater_name in rows:
            ratings_by_store[rating.store_id].append((rating, rater_name))

        stats = []
        for store in stores:
            store_ratings = ratings_by_store[store.id]
            scores = [rating.score for rating, _ in store_ratings]
            stats.append(schemas.StoreStats(
                id=store.id,
                name=store.name,
                address=store.address,
                email=store.email,
                total_ratings=len(scores),
                average_rating=average_rating(sum(scores), len(scores)),
                rating_counts=rating_histogram(scores),
                reviews=[
                    schemas.Review(id=rating.id, user=rater_name, score=rating.score, date=rating.created_at)
                    for rating, rater_name in store_ratings
                ],
            ))
        return schemas.StoreStatsResponse(stores=stats)

    def get_user_stats(self, db: Session, user: models.User) -> schemas.UserStats:
        total, count = (
            db.query(func.sum(models.Rating.score), func.count(models.Rating.id))
            .filter(models.Rating.user_id == user.id)
            .one()
        )
        return schemas.UserStats(
            total_reviews_given=count or 0,
            average_rating_given=average_rating(total, count),
            member_since=user.created_at,
        )

stats_service = StatsService()
