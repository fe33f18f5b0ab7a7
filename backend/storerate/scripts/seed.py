"""Seed demo accounts, a flagship store and a starter rating.

Safe to run repeatedly: every record is looked up by email (or owner) first.

    python -m storerate.scripts.seed
"""
from sqlalchemy.orm import Session

from storerate import models
from storerate.core.logger import setup_logger
from storerate.core.security import hash_password
from storerate.database.database import SessionLocal, check_connection, init_db
from storerate.schemas.enums import Role
from storerate.services import rating_service

logger = setup_logger("scripts.seed")

DEMO_USERS = [
    {"name": "System Administrator", "email": "admin@roxiler.com", "password": "Admin@123",
     "address": "Admin HQ", "role": Role.admin},
    {"name": "Store Owner", "email": "owner@roxiler.com", "password": "Owner@123",
     "address": "123 Store St", "role": Role.store_owner},
    {"name": "Normal User", "email": "user@roxiler.com", "password": "User@123",
     "address": "789 User Ln", "role": Role.normal_user},
    {"name": "New Owner", "email": "newowner@roxiler.com", "password": "Newowner@123",
     "address": "New Owner Address", "role": Role.store_owner},
    {"name": "Another Store Owner", "email": "storeownerid@roxiler.com", "password": "StoreOwner@123",
     "address": "Another Store Address", "role": Role.store_owner},
    {"name": "Demo Normal User", "email": "normaluser@roxiler.com", "password": "NormalUser@123",
     "address": "Demo User Address", "role": Role.normal_user},
]

FLAGSHIP_STORE = {
    "name": "Roxiler Flagship Store",
    "email": "store@roxiler.com",
    "address": "456 Commerce Blvd, Tech City",
}


def ensure_user(db: Session, name, email, password, address, role) -> models.User:
    user = db.query(models.User).filter(models.User.email == email).first()
    if user:
        logger.info(f"{email} already exists")
        return user
    user = models.User(
        name=name, email=email, address=address, role=role, password=hash_password(password)
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Seeded {role.value} {email}")
    return user


def ensure_flagship_store(db: Session, owner: models.User) -> models.Store:
    store = db.query(models.Store).filter(models.Store.owner_id == owner.id).first()
    if store:
        logger.info("Flagship store already exists")
        return store
    store = models.Store(owner_id=owner.id, **FLAGSHIP_STORE)
    db.add(store)
    db.commit()
    db.refresh(store)
    logger.info(f"Seeded store {store.name}")
    return store


def seed(db: Session) -> None:
    users = {spec["email"]: ensure_user(db, **spec) for spec in DEMO_USERS}
    store = ensure_flagship_store(db, users["owner@roxiler.com"])

    has_ratings = db.query(models.Rating).filter(models.Rating.store_id == store.id).first()
    if has_ratings:
        logger.info("Ratings already exist")
        return
    rating_service.submit(db, user_id=users["user@roxiler.com"].id, store_id=store.id, score=5)
    logger.info("Seeded starter rating")


def main() -> None:
    check_connection()
    init_db()
    with SessionLocal() as db:
        seed(db)


if __name__ == "__main__":
    main()
