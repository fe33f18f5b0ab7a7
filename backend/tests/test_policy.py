import pytest

from storerate import models
from storerate.core import policy
from storerate.schemas.enums import Role
from storerate.services import store_service


def user(user_id, role):
    return models.User(id=user_id, role=role)


@pytest.mark.parametrize("role,admin,owner", [
    (Role.admin, True, True),
    (Role.store_owner, False, True),
    (Role.normal_user, False, False),
])
def test_role_predicates(role, admin, owner):
    assert policy.is_admin(user(1, role)) is admin
    assert policy.is_store_owner(user(1, role)) is owner


def test_predicates_reject_missing_user():
    assert policy.is_admin(None) is False
    assert policy.is_store_owner(None) is False


def test_can_manage_store():
    store = models.Store(id=10, owner_id=1)

    assert policy.can_manage_store(user(1, Role.store_owner), store)
    assert not policy.can_manage_store(user(2, Role.store_owner), store)
    assert policy.can_manage_store(user(3, Role.admin), store)


def test_resolve_store_owner():
    assert policy.resolve_store_owner(user(1, Role.store_owner), 5) == 1
    assert policy.resolve_store_owner(user(1, Role.store_owner), None) == 1
    assert policy.resolve_store_owner(user(9, Role.admin), 5) == 5
    assert policy.resolve_store_owner(user(9, Role.admin), None) == 9


def test_get_manageable_hides_foreign_stores(db, make_user, make_store):
    owner = make_user(role=Role.store_owner)
    other = make_user(role=Role.store_owner)
    admin = make_user(role=Role.admin)
    mine = make_store(owner, name="Mine")
    theirs = make_store(other, name="Theirs")

    assert store_service.get_manageable(db, owner, store_id=mine.id).id == mine.id
    assert store_service.get_manageable(db, owner, store_id=theirs.id) is None
    assert store_service.get_manageable(db, admin, store_id=theirs.id).id == theirs.id
    assert store_service.get_manageable(db, admin, store_id=404) is None
