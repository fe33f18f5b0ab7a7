"""Print users, stores and ratings as tables.

    python -m storerate.scripts.view_data
"""
import pandas as pd
from sqlalchemy.orm import Session

from storerate import models
from storerate.database.database import SessionLocal, check_connection
from storerate.services import store_service


def users_frame(db: Session) -> pd.DataFrame:
    users = db.query(models.User).order_by(models.User.id).all()
    return pd.DataFrame(
        [{"id": u.id, "name": u.name, "email": u.email, "role": u.role.value} for u in users],
        columns=["id", "name", "email", "role"],
    )


def stores_frame(db: Session) -> pd.DataFrame:
    listing = store_service.get_listing(db)
    return pd.DataFrame(listing, columns=["id", "name", "email", "rating", "rating_count"])


def ratings_frame(db: Session) -> pd.DataFrame:
    ratings = db.query(models.Rating).order_by(models.Rating.id).all()
    return pd.DataFrame(
        [
            {"id": r.id, "user_id": r.user_id, "store_id": r.store_id, "score": r.score,
             "created_at": r.created_at}
            for r in ratings
        ],
        columns=["id", "user_id", "store_id", "score", "created_at"],
    )


def main() -> None:
    check_connection()
    with SessionLocal() as db:
        for title, frame in (
            ("USERS", users_frame(db)),
            ("STORES", stores_frame(db)),
            ("RATINGS", ratings_frame(db)),
        ):
            print(f"\n=== {title} ===")
            print(frame.to_string(index=False) if not frame.empty else "(none)")


if __name__ == "__main__":
    main()
