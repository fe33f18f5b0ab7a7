import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["LOG_TO_FILE"] = "false"
os.environ["DB_SYNC"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storerate import models
from storerate.api import deps
from storerate.core.security import create_access_token, hash_password
from storerate.database import database
from storerate.main import app
from storerate.schemas.enums import Role

DEFAULT_PASSWORD = "Secret@123"


@pytest.fixture
def engine(monkeypatch):
    test_engine = database.build_engine("sqlite://", poolclass=StaticPool)
    database.init_db(test_engine)
    monkeypatch.setattr(database, "engine", test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory):
    def override_get_db():
        with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make_user(role=Role.normal_user, name=None, email=None, password=DEFAULT_PASSWORD, address="1 Main St"):
        counter["n"] += 1
        user = models.User(
            name=name or f"Test User {counter['n']}",
            email=email or f"user{counter['n']}@example.com",
            password=hash_password(password),
            address=address,
            role=role,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_store(db):
    def _make_store(owner, name="Corner Shop", email="shop@example.com", address="42 Market Rd"):
        store = models.Store(name=name, email=email, address=address, owner_id=owner.id if owner else None)
        db.add(store)
        db.commit()
        db.refresh(store)
        return store

    return _make_store


@pytest.fixture
def rate(db):
    def _rate(user, store, score):
        rating = models.Rating(user_id=user.id, store_id=store.id, score=score)
        db.add(rating)
        db.commit()
        return rating

    return _rate


def auth_headers(user):
    role = user.role.value if isinstance(user.role, Role) else user.role
    return {"Authorization": f"Bearer {create_access_token(user.id, role)}"}


@pytest.fixture
def headers_for():
    return auth_headers
