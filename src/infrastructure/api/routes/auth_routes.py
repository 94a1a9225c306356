from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.dtos.common_dto import ErrorResponse
from src.application.dtos.user_dto import LoginRequest, TokenResponse, UserResponse
from src.application.use_cases.authenticate_user import AuthenticateUserUseCase
from src.infrastructure.api.dependencies import (
    get_credential_service,
    get_current_user_id,
    get_user_repo,
)
from src.infrastructure.database.repositories.user_repository import UserRepository
from src.infrastructure.security.credential_service import CredentialService

router = APIRouter(
    prefix="/api/auth",
    tags=["Authentication"],
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid or missing authentication token"},
    },
)


@router.get(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Get Current User",
    description="""
    Return the user identified by the x-auth-token header, without the
    password hash.

    **Authentication required**: Yes (x-auth-token header)
    """,
    response_description="The authenticated user",
)
def get_me(
    user_id: str = Depends(get_current_user_id),
    users: UserRepository = Depends(get_user_repo),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Load the authenticated user."""
    user = AuthenticateUserUseCase(users=users, credentials=credentials).current_user(user_id)
    return UserResponse.from_entity(user)


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Log In",
    description="""
    Exchange an email/password pair for a signed token.

    An unknown email and a wrong password produce the same 400 response.

    **Authentication required**: No
    """,
    response_description="Signed token for the user",
    responses={400: {"model": ErrorResponse, "description": "Invalid Credentials"}},
)
def login(
    body: LoginRequest,
    users: UserRepository = Depends(get_user_repo),
    credentials: CredentialService = Depends(get_credential_service),
):
    """Authenticate and return a token."""
    token = AuthenticateUserUseCase(users=users, credentials=credentials).execute(body)
    return {"token": token}
