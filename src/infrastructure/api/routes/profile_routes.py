from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from src.application.dtos.common_dto import ErrorResponse, MessageResponse
from src.application.dtos.profile_dto import (
    EducationRequest,
    ExperienceRequest,
    ProfileResponse,
    ProfileUpsertRequest,
)
from src.application.use_cases.delete_account import DeleteAccountUseCase
from src.application.use_cases.profile_entries import ProfileEntriesUseCase
from src.application.use_cases.upsert_profile import ReadProfilesUseCase, UpsertProfileUseCase
from src.infrastructure.api.dependencies import (
    get_current_user_id,
    get_github_gateway,
    get_post_repo,
    get_profile_repo,
    get_user_repo,
)
from src.infrastructure.database.repositories.post_repository import PostRepository
from src.infrastructure.database.repositories.profile_repository import ProfileRepository
from src.infrastructure.database.repositories.user_repository import UserRepository
from src.infrastructure.github.github_gateway import GitHubGateway

router = APIRouter(
    prefix="/api/profile",
    tags=["Profiles"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid fields or no profile"},
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid or missing authentication token"},
    },
)


def _profile_response(
    profiles: ProfileRepository, users: UserRepository, profile
) -> ProfileResponse:
    profile, owner = ReadProfilesUseCase(profiles=profiles, users=users).with_user(profile)
    return ProfileResponse.from_entity(profile, owner)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get My Profile",
    description="""
    Return the profile of the authenticated user with their name and avatar.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def get_my_profile(
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """Get the caller's profile."""
    profile, owner = ReadProfilesUseCase(profiles=profiles, users=users).mine(user_id)
    return ProfileResponse.from_entity(profile, owner)


@router.post(
    "",
    response_model=ProfileResponse,
    summary="Create or Update Profile",
    description="""
    Create the caller's profile, or update it in place when it exists.

    **Request Requirements:**
    - `status` and `skills` are required
    - `skills` is a comma-separated string; entries are trimmed
    - Fields left out keep their stored value

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def upsert_profile(
    body: ProfileUpsertRequest,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """Create or update the caller's profile."""
    profile = UpsertProfileUseCase(profiles=profiles, users=users).execute(user_id, body)
    return _profile_response(profiles, users, profile)


@router.get(
    "",
    response_model=list[ProfileResponse],
    summary="List Profiles",
    description="""
    Return every profile with its owner's name and avatar.

    **Authentication required**: No
    """,
)
def list_profiles(
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """List all profiles."""
    rows = ReadProfilesUseCase(profiles=profiles, users=users).all()
    return [ProfileResponse.from_entity(profile, owner) for profile, owner in rows]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    summary="Get Profile By User",
    description="""
    Return the profile owned by `user_id`.

    A malformed id and an unknown id both answer 400 "Profile not found".

    **Authentication required**: No
    """,
)
def get_profile_by_user(
    user_id: str,
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """Get a profile by its owner's user id."""
    profile, owner = ReadProfilesUseCase(profiles=profiles, users=users).by_user_id(user_id)
    return ProfileResponse.from_entity(profile, owner)


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Delete Account",
    description="""
    Delete the caller's posts, then their profile, then the user record.

    The three steps are not atomic.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def delete_account(
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """Delete the caller's account and everything they own."""
    DeleteAccountUseCase(posts=posts, profiles=profiles, users=users).execute(user_id)
    return {"msg": "User deleted"}


@router.put(
    "/experience",
    response_model=ProfileResponse,
    summary="Add Experience",
    description="""
    Add an experience entry at the head of the caller's list.

    **Request Requirements:** `title`, `company` and `from` are required.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def add_experience(
    body: ExperienceRequest,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    profile = ProfileEntriesUseCase(profiles=profiles).add_experience(user_id, body)
    return _profile_response(profiles, users, profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    summary="Delete Experience",
    description="""
    Remove the experience entry `exp_id`. An unknown id changes nothing.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def delete_experience(
    exp_id: str,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    profile = ProfileEntriesUseCase(profiles=profiles).remove_experience(user_id, exp_id)
    return _profile_response(profiles, users, profile)


@router.put(
    "/education",
    response_model=ProfileResponse,
    summary="Add Education",
    description="""
    Add an education entry at the head of the caller's list.

    **Request Requirements:** `school`, `degree`, `fieldofstudy` and `from`
    are required.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def add_education(
    body: EducationRequest,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    profile = ProfileEntriesUseCase(profiles=profiles).add_education(user_id, body)
    return _profile_response(profiles, users, profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    summary="Delete Education",
    description="""
    Remove the education entry `edu_id`. An unknown id changes nothing.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def delete_education(
    edu_id: str,
    user_id: str = Depends(get_current_user_id),
    profiles: ProfileRepository = Depends(get_profile_repo),
    users: UserRepository = Depends(get_user_repo),
):
    profile = ProfileEntriesUseCase(profiles=profiles).remove_education(user_id, edu_id)
    return _profile_response(profiles, users, profile)


@router.get(
    "/github/{username}",
    response_model=list[dict[str, Any]],
    summary="List GitHub Repositories",
    description="""
    Return up to 5 public repositories of a GitHub user, oldest first.

    Any upstream failure answers 400 "No Github profile found".

    **Authentication required**: No
    """,
)
def github_repositories(
    username: str,
    gateway: GitHubGateway = Depends(get_github_gateway),
):
    """Proxy the GitHub repository list."""
    return gateway.fetch_repositories(username)
