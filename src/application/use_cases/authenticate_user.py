from __future__ import annotations

from dataclasses import dataclass

from src.application.dtos.user_dto import LoginRequest
from src.domain.entities.user import UserEntity
from src.domain.errors import AuthError, ValidationError
from src.infrastructure.database.repositories.user_repository import UserRepository
from src.infrastructure.security.credential_service import CredentialService

INVALID_CREDENTIALS = "Invalid Credentials"


@dataclass
class AuthenticateUserUseCase:
    users: UserRepository
    credentials: CredentialService

    def execute(self, request: LoginRequest) -> str:
        """
        Check an email/password pair and return a fresh token.

        Unknown email and wrong password fail with the same error so callers
        cannot tell which check failed.
        """
        errors = request.violations()
        if errors:
            raise ValidationError(errors)

        user = self.users.get_by_email((request.email or "").strip().lower())
        if user is None or not self.credentials.verify_password(request.password or "", user.password):
            raise AuthError(INVALID_CREDENTIALS, status_code=400)
        return self.credentials.issue_token(user.id)

    def current_user(self, user_id: str) -> UserEntity:
        """Load the caller's record for GET /api/auth."""
        user = self.users.get(user_id)
        if user is None:
            # token outlived its account
            raise AuthError("Token is not valid")
        return user
