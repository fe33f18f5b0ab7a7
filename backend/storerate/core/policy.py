"""
Role-based authorization rules.

Every endpoint that needs to know whether a caller may see or change
something asks this module instead of comparing role strings inline.
Role failures surface as 401 and unmanageable stores as 404, so a caller
can't distinguish "not yours" from "doesn't exist".
"""
from typing import Optional

from storerate import models
from storerate.schemas.enums import Role


def is_admin(user: Optional[models.User]) -> bool:
    return user is not None and user.role == Role.admin


def is_store_owner(user: Optional[models.User]) -> bool:
    """Store Owners and Administrators may manage stores."""
    return user is not None and user.role in (Role.store_owner, Role.admin)


def can_manage_store(user: models.User, store: models.Store) -> bool:
    return is_admin(user) or store.owner_id == user.id


def resolve_store_owner(user: models.User, requested_owner_id: Optional[int]) -> int:
    """Pick the owner of a store the caller is creating or reassigning.

    Only administrators may name another owner; everyone else owns what they
    create, whatever the payload says.
    """
    if is_admin(user) and requested_owner_id:
        return requested_owner_id
    return user.id
