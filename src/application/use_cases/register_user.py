from __future__ import annotations

import logging
from dataclasses import dataclass

from src.application.dtos.user_dto import RegisterRequest
from src.domain.errors import ConflictError, ValidationError
from src.infrastructure.database.repositories.user_repository import UserRepository
from src.infrastructure.security.credential_service import CredentialService, gravatar_url

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserUseCase:
    users: UserRepository
    credentials: CredentialService

    def execute(self, request: RegisterRequest) -> str:
        """
        Register a new user and return a signed token for it.

        Raises:
            ValidationError: one item per invalid field
            ConflictError: the email is already registered
        """
        errors = request.violations()
        if errors:
            raise ValidationError(errors)

        email = (request.email or "").strip().lower()
        if self.users.get_by_email(email) is not None:
            raise ConflictError("User already exists")

        user = self.users.create(
            name=(request.name or "").strip(),
            email=email,
            password_hash=self.credentials.hash_password(request.password or ""),
            avatar=gravatar_url(email),
        )
        logger.info("Registered user %s", user.id)
        return self.credentials.issue_token(user.id)
