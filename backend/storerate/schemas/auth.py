from pydantic import EmailStr, field_validator

from storerate.core.security import password_policy_error
from .base import CamelModel
from .enums import Role
from .user import UserCreate

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class SignupRequest(UserCreate):
    @field_validator("role")
    @classmethod
    def forbid_admin_signup(cls, value: Role) -> Role:
        if value == Role.admin:
            raise ValueError("Administrators can only be created by another administrator")
        return value

class PasswordUpdate(CamelModel):
    current_password: str
    new_password: str

    @field_validator("new_password")
    @classmethod
    def check_password_policy(cls, value: str) -> str:
        error = password_policy_error(value)
        if error:
            raise ValueError(error)
        return value

class AuthResponse(CamelModel):
    id: int
    name: str
    email: str
    role: Role
    token: str
