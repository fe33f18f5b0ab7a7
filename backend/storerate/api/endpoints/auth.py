from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from storerate import models, schemas
from storerate.api import deps
from storerate.api.endpoints.users import register_user
from storerate.core.logger import setup_logger
from storerate.core.security import create_access_token, verify_password
from storerate.services import user_service

router = APIRouter()

logger = setup_logger("api.auth")

def _auth_response(user: models.User) -> schemas.AuthResponse:
    return schemas.AuthResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role,
        token=create_access_token(user.id, user.role.value),
    )

@router.post("/login", response_model=schemas.AuthResponse)
def login(credentials: schemas.LoginRequest, db: Session = Depends(deps.get_db)):
    user = user_service.authenticate(db, email=credentials.email, password=credentials.password)
    if not user:
        logger.info(f"Failed login for {credentials.email}")
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _auth_response(user)

@router.post("/signup", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user_in: schemas.SignupRequest, db: Session = Depends(deps.get_db)):
    user = register_user(db, user_in)
    return _auth_response(user)

@router.put("/password", response_model=schemas.Message)
def update_password(
    passwords: schemas.PasswordUpdate,
    db: Session = Depends(deps.get_db),
    current_user: models.User = Depends(deps.get_current_user),
):
    if not verify_password(passwords.current_password, current_user.password):
        raise HTTPException(status_code=400, detail="Current password is incorrect")
    user_service.update_password(db, current_user, passwords.new_password)
    return schemas.Message(message="Password updated successfully")

@router.post("/add-user", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def add_user(
    user_in: schemas.UserCreate,
    db: Session = Depends(deps.get_db),
    admin: models.User = Depends(deps.require_admin),
):
    """Administrator creates an account of any role."""
    return register_user(db, user_in)
