import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from storerate import models
from storerate.core import errors
from storerate.main import app
from storerate.schemas.enums import Role
from storerate.services import rating_service


def test_resubmitting_updates_existing_rating(client, db, make_user, make_store, headers_for):
    owner = make_user(role=Role.store_owner)
    rater = make_user()
    store = make_store(owner)

    first = client.post("/api/ratings", json={"storeId": store.id, "score": 5}, headers=headers_for(rater))
    second = client.post("/api/ratings", json={"storeId": store.id, "score": 3}, headers=headers_for(rater))

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json() == {"message": "Rating submitted successfully"}

    rows = db.query(models.Rating).filter(
        models.Rating.user_id == rater.id, models.Rating.store_id == store.id
    ).all()
    assert len(rows) == 1
    assert rows[0].score == 3


def test_service_upsert_keeps_one_row_per_pair(db, make_user, make_store):
    rater = make_user()
    store = make_store(make_user())

    for score in (1, 2, 3, 4, 5):
        rating_service.submit(db, user_id=rater.id, store_id=store.id, score=score)

    assert db.query(models.Rating).count() == 1
    assert rating_service.get(db, user_id=rater.id, store_id=store.id).score == 5


def test_ratings_from_different_users_are_separate_rows(client, db, make_user, make_store, headers_for):
    store = make_store(make_user())
    for score in (2, 4):
        client.post("/api/ratings", json={"storeId": store.id, "score": score}, headers=headers_for(make_user()))

    assert db.query(models.Rating).filter(models.Rating.store_id == store.id).count() == 2


@pytest.mark.parametrize("payload", [
    {"storeId": 1, "score": 0},
    {"storeId": 1, "score": 6},
    {"storeId": 1, "score": "great"},
    {"storeId": 1},
    {"score": 4},
    {"storeId": 0, "score": 4},
])
def test_invalid_submission_is_rejected(client, make_user, make_store, headers_for, payload):
    rater = make_user()
    make_store(make_user())

    response = client.post("/api/ratings", json=payload, headers=headers_for(rater))

    assert response.status_code == 400
    assert "message" in response.json()


def test_rating_unknown_store_returns_404(client, make_user, headers_for):
    response = client.post("/api/ratings", json={"storeId": 999, "score": 4}, headers=headers_for(make_user()))

    assert response.status_code == 404
    assert response.json() == {"message": "Store not found"}


def test_rating_requires_token(client):
    response = client.post("/api/ratings", json={"storeId": 1, "score": 4})

    assert response.status_code == 401
    assert response.json() == {"message": "Not authorized, no token"}


def test_submit_failure_goes_through_global_error_handler(client, monkeypatch, make_user, make_store, headers_for):
    rater = make_user()
    store = make_store(make_user(role=Role.store_owner))

    def boom(*args, **kwargs):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(rating_service, "submit", boom)
    monkeypatch.setattr(errors.settings, "ENVIRONMENT", "development")
    failing_client = TestClient(app, raise_server_exceptions=False)

    response = failing_client.post(
        "/api/ratings", json={"storeId": store.id, "score": 4}, headers=headers_for(rater)
    )

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Internal Server Error"
    assert "kaboom" in body["error"]


def test_database_rejects_duplicate_rating_pair(db, make_user, make_store):
    rater = make_user()
    store = make_store(make_user())
    db.add(models.Rating(user_id=rater.id, store_id=store.id, score=4))
    db.commit()

    db.add(models.Rating(user_id=rater.id, store_id=store.id, score=2))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert db.query(models.Rating).count() == 1


@pytest.mark.parametrize("score", [0, 6])
def test_database_rejects_out_of_range_score(db, make_user, make_store, score):
    rater = make_user()
    store = make_store(make_user())

    db.add(models.Rating(user_id=rater.id, store_id=store.id, score=score))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()

    assert db.query(models.Rating).count() == 0
