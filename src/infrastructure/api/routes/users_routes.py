from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.dtos.common_dto import ErrorResponse
from src.application.dtos.user_dto import RegisterRequest, TokenResponse
from src.application.use_cases.register_user import RegisterUserUseCase
from src.infrastructure.api.dependencies import get_credential_service, get_user_repo
from src.infrastructure.database.repositories.user_repository import UserRepository
from src.infrastructure.security.credential_service import CredentialService

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
    responses={400: {"model": ErrorResponse, "description": "Invalid fields or email already registered"}},
)


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Register User",
    description="""
    Register a new account and receive a signed token.

    **Request Requirements:**
    - Name must not be empty
    - Email must be valid and not already registered
    - Password must be 5 characters or more

    The avatar is derived from the email through Gravatar.

    **Authentication required**: No
    """,
    response_description="Signed token for the new user",
)
def register(
    body: RegisterRequest,
    users: UserRepository = Depends(get_user_repo),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Register a user and return a token."""
    token = RegisterUserUseCase(users=users, credentials=credentials).execute(body)
    return {"token": token}
