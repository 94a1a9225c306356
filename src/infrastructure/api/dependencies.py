from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Security
from fastapi.security import APIKeyHeader

from src.infrastructure.database.mongo_client import get_mongo_database
from src.infrastructure.database.repositories.post_repository import PostRepository
from src.infrastructure.database.repositories.profile_repository import ProfileRepository
from src.infrastructure.database.repositories.user_repository import UserRepository
from src.infrastructure.github.github_gateway import GitHubGateway
from src.infrastructure.security.credential_service import CredentialService

TOKEN_HEADER = "x-auth-token"

_token_scheme = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def get_credential_service() -> CredentialService:
    return CredentialService()


def get_current_user_id(
    token: Annotated[str | None, Security(_token_scheme)],
    credentials: Annotated[CredentialService, Depends(get_credential_service)],
) -> str:
    """Resolve the caller from the x-auth-token header or reject with 401."""
    return credentials.verify_token(token)


def get_user_repo() -> UserRepository:
    return UserRepository(get_mongo_database())


def get_profile_repo() -> ProfileRepository:
    return ProfileRepository(get_mongo_database())


def get_post_repo() -> PostRepository:
    return PostRepository(get_mongo_database())


def get_github_gateway() -> GitHubGateway:
    return GitHubGateway()
