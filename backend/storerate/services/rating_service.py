from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from storerate import models
from storerate.core.logger import setup_logger

logger = setup_logger("services.rating")

# Dialects with INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

class RatingService:
    def get(self, db: Session, user_id: int, store_id: int):
        return db.query(models.Rating).filter(
            models.Rating.user_id == user_id,
            models.Rating.store_id == store_id
        ).first()

    def submit(self, db: Session, user_id: int, store_id: int, score: int) -> None:
        """Insert the user's rating for a store, or overwrite the score they gave before.

        Runs as one INSERT ... ON CONFLICT statement against the
        (user_id, store_id) unique constraint, so two concurrent submissions
        for the same pair still leave a single row.
        """
        dialect = db.get_bind().dialect.name
        insert = UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Rating upsert is not supported on {dialect}")

        stmt = insert(models.Rating).values(user_id=user_id, store_id=store_id, score=score)
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "store_id"],
            set_={"score": stmt.excluded.score, "updated_at": func.now()},
        )
        db.execute(stmt)
        db.commit()
        logger.info(f"User {user_id} rated store {store_id} with {score}")

rating_service = RatingService()
