from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storerate import models
from storerate.core import policy
from storerate.core.logger import setup_logger
from storerate.core.security import decode_access_token
from storerate.database.database import SessionLocal
from storerate.services import user_service

logger = setup_logger("api.deps")

bearer_scheme = HTTPBearer(auto_error=False)

def get_db():
    with SessionLocal() as db:
        yield db

def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authorized, no token")

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = int(payload["id"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as e:
        logger.warning(f"Rejected bearer token: {e}")
        raise _unauthorized("Not authorized, token failed")

    user = user_service.get(db, user_id=user_id)
    if not user:
        raise _unauthorized("Not authorized, user not found")
    return user

def require_admin(user: models.User = Depends(get_current_user)) -> models.User:
    if not policy.is_admin(user):
        raise _unauthorized("Not authorized as an admin")
    return user

def require_store_owner(user: models.User = Depends(get_current_user)) -> models.User:
    if not policy.is_store_owner(user):
        raise _unauthorized("Not authorized as a store owner")
    return user
