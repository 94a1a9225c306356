from __future__ import annotations

from dataclasses import dataclass

from src.application.dtos.profile_dto import ProfileUpsertRequest
from src.domain.entities.profile import ProfileEntity
from src.domain.entities.user import UserEntity
from src.domain.errors import AuthError, NotFoundError, ValidationError
from src.infrastructure.database.mongo_client import to_object_id
from src.infrastructure.database.repositories.profile_repository import ProfileRepository
from src.infrastructure.database.repositories.user_repository import UserRepository

NO_PROFILE = "There is no profile for this user"


@dataclass
class UpsertProfileUseCase:
    profiles: ProfileRepository
    users: UserRepository

    def execute(self, user_id: str, request: ProfileUpsertRequest) -> ProfileEntity:
        errors = request.violations()
        if errors:
            raise ValidationError(errors)
        # a profile must reference a live user at write time
        if self.users.get(user_id) is None:
            raise AuthError("Token is not valid")
        return self.profiles.upsert(user_id, request.profile_fields(), request.social_fields())


@dataclass
class ReadProfilesUseCase:
    """Read-side queries that join the owner's name and avatar."""

    profiles: ProfileRepository
    users: UserRepository

    def with_user(self, profile: ProfileEntity) -> tuple[ProfileEntity, UserEntity | None]:
        return profile, self.users.get(profile.user_id)

    def mine(self, user_id: str) -> tuple[ProfileEntity, UserEntity | None]:
        profile = self.profiles.get_by_user(user_id)
        if profile is None:
            raise NotFoundError(NO_PROFILE, status_code=400)
        return self.with_user(profile)

    def by_user_id(self, user_id: str) -> tuple[ProfileEntity, UserEntity | None]:
        to_object_id(user_id, "Profile", status_code=400)
        profile = self.profiles.get_by_user(user_id)
        if profile is None:
            raise NotFoundError("Profile not found", status_code=400)
        return self.with_user(profile)

    def all(self) -> list[tuple[ProfileEntity, UserEntity | None]]:
        profiles = self.profiles.list_all()
        users = self.users.get_many([p.user_id for p in profiles])
        return [(p, users.get(p.user_id)) for p in profiles]
