from __future__ import annotations

from datetime import datetime

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field

from src.application.dtos.common_dto import required
from src.domain.entities.user import UserEntity
from src.domain.errors import ErrorItem

MIN_PASSWORD_LENGTH = 5


def _email_errors(email: str | None) -> list[ErrorItem]:
    try:
        validate_email(email or "", check_deliverability=False)
    except EmailNotValidError:
        return [ErrorItem(msg="Please include a valid email", param="email")]
    return []


class RegisterRequest(BaseModel):
    """Request model for user registration."""
    name: str | None = Field(None, description="Display name", examples=["John Doe"])
    email: str | None = Field(None, description="Unique email address", examples=["john@example.com"])
    password: str | None = Field(None, description="Plaintext password, 5 characters or more")

    def violations(self) -> list[ErrorItem]:
        errors = required(self.name, "name", "Name is required")
        errors += _email_errors(self.email)
        if self.password is None or len(self.password) < MIN_PASSWORD_LENGTH:
            errors.append(
                ErrorItem(
                    msg=f"Please enter a password with {MIN_PASSWORD_LENGTH} or more characters",
                    param="password",
                )
            )
        return errors


class LoginRequest(BaseModel):
    """Request model for email/password authentication."""
    email: str | None = Field(None, description="Registered email address")
    password: str | None = Field(None, description="Account password")

    def violations(self) -> list[ErrorItem]:
        errors = _email_errors(self.email)
        if not self.password:
            errors.append(ErrorItem(msg="Password is required", param="password"))
        return errors


class TokenResponse(BaseModel):
    """Signed bearer token to send back in the x-auth-token header."""
    token: str = Field(..., description="Signed token valid for 100 hours")


class UserResponse(BaseModel):
    """A user record without its password hash."""
    id: str = Field(..., description="Unique identifier of the user")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    avatar: str = Field(..., description="Gravatar URL derived from the email")
    date: datetime = Field(..., description="Registration timestamp")

    @classmethod
    def from_entity(cls, user: UserEntity) -> UserResponse:
        return cls(id=user.id, name=user.name, email=user.email, avatar=user.avatar, date=user.date)
