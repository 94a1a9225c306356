from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from src.application.dtos.profile_dto import EducationRequest, ExperienceRequest
from src.application.use_cases.upsert_profile import NO_PROFILE
from src.domain.entities.profile import EducationEntry, ExperienceEntry, ProfileEntity
from src.domain.errors import NotFoundError, ValidationError
from src.infrastructure.database.mongo_client import new_id
from src.infrastructure.database.repositories.profile_repository import ProfileRepository


def _aware(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _remove_by_id(entries: list, entry_id: str) -> bool:
    """Drop the first entry with ``entry_id``; False when there is none."""
    for index, entry in enumerate(entries):
        if entry.id == entry_id:
            del entries[index]
            return True
    return False


@dataclass
class ProfileEntriesUseCase:
    """Experience and education lists embedded in the caller's own profile.

    New entries go to the head of the list. Removing an unknown id leaves the
    list as it is.
    """

    profiles: ProfileRepository

    def _own_profile(self, user_id: str) -> ProfileEntity:
        profile = self.profiles.get_by_user(user_id)
        if profile is None:
            raise NotFoundError(NO_PROFILE, status_code=400)
        return profile

    def add_experience(self, user_id: str, request: ExperienceRequest) -> ProfileEntity:
        errors = request.violations()
        if errors:
            raise ValidationError(errors)
        profile = self._own_profile(user_id)
        entry = ExperienceEntry(
            id=new_id(),
            title=(request.title or "").strip(),
            company=(request.company or "").strip(),
            location=request.location,
            from_date=_aware(request.from_),
            to_date=None if request.current else _aware(request.to),
            current=request.current,
            description=request.description,
        )
        profile.experience.insert(0, entry)
        return self.profiles.save_entries(profile)

    def remove_experience(self, user_id: str, exp_id: str) -> ProfileEntity:
        profile = self._own_profile(user_id)
        if not _remove_by_id(profile.experience, exp_id):
            return profile
        return self.profiles.save_entries(profile)

    def add_education(self, user_id: str, request: EducationRequest) -> ProfileEntity:
        errors = request.violations()
        if errors:
            raise ValidationError(errors)
        profile = self._own_profile(user_id)
        entry = EducationEntry(
            id=new_id(),
            school=(request.school or "").strip(),
            degree=(request.degree or "").strip(),
            fieldofstudy=(request.fieldofstudy or "").strip(),
            from_date=_aware(request.from_),
            to_date=None if request.current else _aware(request.to),
            current=request.current,
            description=request.description,
        )
        profile.education.insert(0, entry)
        return self.profiles.save_entries(profile)

    def remove_education(self, user_id: str, edu_id: str) -> ProfileEntity:
        profile = self._own_profile(user_id)
        if not _remove_by_id(profile.education, edu_id):
            return profile
        return self.profiles.save_entries(profile)
