from storerate.schemas.enums import Role
from storerate.services import stats_service


def test_admin_stats_on_fresh_database_are_zero(db):
    stats = stats_service.get_admin_stats(db)

    assert stats.model_dump(by_alias=True) == {
        "totalRatings": 0,
        "totalUsers": 0,
        "totalStores": 0,
        "activeUsers": 0,
    }


def test_admin_stats_counts(client, make_user, make_store, rate, headers_for):
    admin = make_user(role=Role.admin)
    owner = make_user(role=Role.store_owner)
    alice = make_user()
    bob = make_user()
    store = make_store(owner)
    make_store(owner, name="Second Shop")
    rate(alice, store, 4)
    rate(bob, store, 2)

    response = client.get("/api/stats/admin", headers=headers_for(admin))

    assert response.status_code == 200
    assert response.json() == {
        "totalRatings": 2,
        "totalUsers": 4,
        "totalStores": 2,
        "activeUsers": 2,
    }


def test_admin_stats_rejects_non_admin(client, make_user, headers_for):
    response = client.get("/api/stats/admin", headers=headers_for(make_user(role=Role.store_owner)))

    assert response.status_code == 401
    assert response.json() == {"message": "Not authorized as an admin"}


def test_store_stats_breakdown(client, make_user, make_store, rate, headers_for):
    owner = make_user(role=Role.store_owner)
    store = make_store(owner, name="Bakery")
    other_store = make_store(make_user(role=Role.store_owner), name="Not Mine")
    raters = [make_user(name=f"Rater {i}") for i in range(4)]
    for rater, score in zip(raters, (1, 2, 2, 2)):
        rate(rater, store, score)
    rate(raters[0], other_store, 5)

    response = client.get("/api/stats/store", headers=headers_for(owner))

    assert response.status_code == 200
    stores = response.json()["stores"]
    assert len(stores) == 1
    bakery = stores[0]
    assert bakery["name"] == "Bakery"
    assert bakery["totalRatings"] == 4
    # 7 / 4 = 1.75 rounds half-up
    assert bakery["averageRating"] == 1.8
    assert bakery["ratingCounts"] == {"1": 1, "2": 3, "3": 0, "4": 0, "5": 0}
    assert sorted(review["user"] for review in bakery["reviews"]) == [f"Rater {i}" for i in range(4)]
    # newest first
    assert [review["id"] for review in bakery["reviews"]] == sorted(
        (review["id"] for review in bakery["reviews"]), reverse=True
    )


def test_store_stats_without_stores(client, make_user, headers_for):
    response = client.get("/api/stats/store", headers=headers_for(make_user(role=Role.store_owner)))

    assert response.status_code == 200
    assert response.json() == {"stores": []}


def test_store_stats_unrated_store(client, make_user, make_store, headers_for):
    owner = make_user(role=Role.store_owner)
    make_store(owner)

    store = client.get("/api/stats/store", headers=headers_for(owner)).json()["stores"][0]

    assert store["totalRatings"] == 0
    assert store["averageRating"] == 0
    assert store["reviews"] == []


def test_store_stats_rejects_normal_user(client, make_user, headers_for):
    response = client.get("/api/stats/store", headers=headers_for(make_user()))

    assert response.status_code == 401


def test_user_stats_without_ratings(client, make_user, headers_for):
    response = client.get("/api/stats/user", headers=headers_for(make_user()))

    assert response.status_code == 200
    body = response.json()
    assert body["totalReviewsGiven"] == 0
    assert body["averageRatingGiven"] == 0
    assert body["memberSince"] is not None


def test_user_stats_with_ratings(client, make_user, make_store, rate, headers_for):
    user = make_user()
    owner = make_user(role=Role.store_owner)
    for score, name in ((5, "A"), (4, "B"), (4, "C")):
        rate(user, make_store(owner, name=name), score)

    body = client.get("/api/stats/user", headers=headers_for(user)).json()

    assert body["totalReviewsGiven"] == 3
    # 13 / 3 = 4.333...
    assert body["averageRatingGiven"] == 4.3
