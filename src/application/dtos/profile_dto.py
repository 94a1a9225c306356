from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.common_dto import is_blank, required
from src.domain.entities.profile import (
    SOCIAL_NETWORKS,
    EducationEntry,
    ExperienceEntry,
    ProfileEntity,
)
from src.domain.entities.user import UserEntity
from src.domain.errors import ErrorItem


class ProfileUpsertRequest(BaseModel):
    """Request model for creating or updating the caller's profile.

    ``skills`` is a comma-separated string. Omitted or empty fields leave the
    stored value untouched.
    """
    status: str | None = Field(None, description="Professional status", examples=["Developer"])
    skills: str | None = Field(None, description="Comma-separated skills", examples=["js, node , react"])
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = Field(None, description="GitHub login used for the repository list")
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def violations(self) -> list[ErrorItem]:
        return required(self.status, "status", "Status is required") + required(
            self.skills, "skills", "Skills are required"
        )

    def profile_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for name in ("company", "website", "location", "bio", "status", "githubusername"):
            value = getattr(self, name)
            if not is_blank(value):
                fields[name] = value
        if not is_blank(self.skills):
            fields["skills"] = split_skills(self.skills or "")
        return fields

    def social_fields(self) -> dict[str, str]:
        return {net: getattr(self, net) for net in SOCIAL_NETWORKS if not is_blank(getattr(self, net))}


def split_skills(raw: str) -> list[str]:
    """``"js, node , react"`` -> ``["js", "node", "react"]``."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]


class ExperienceRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    company: str | None = None
    location: str | None = None
    from_: datetime | None = Field(None, alias="from", description="Start date")
    to: datetime | None = Field(None, description="End date, ignored when current is true")
    current: bool = False
    description: str | None = None

    def violations(self) -> list[ErrorItem]:
        errors = required(self.title, "title", "Title is required")
        errors += required(self.company, "company", "Company is required")
        if self.from_ is None:
            errors.append(ErrorItem(msg="From date is required", param="from"))
        return errors


class EducationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: str | None = None
    degree: str | None = None
    fieldofstudy: str | None = None
    from_: datetime | None = Field(None, alias="from", description="Start date")
    to: datetime | None = None
    current: bool = False
    description: str | None = None

    def violations(self) -> list[ErrorItem]:
        errors = required(self.school, "school", "School is required")
        errors += required(self.degree, "degree", "Degree is required")
        errors += required(self.fieldofstudy, "fieldofstudy", "Field of study is required")
        if self.from_ is None:
            errors.append(ErrorItem(msg="From date is required", param="from"))
        return errors


class ProfileUser(BaseModel):
    """User fields joined into a profile at read time."""
    id: str
    name: str
    avatar: str


class SocialLinkItem(BaseModel):
    network: str = Field(..., examples=["twitter"])
    url: str


class ExperienceItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    company: str
    location: str | None = None
    from_: datetime = Field(..., alias="from")
    to: datetime | None = None
    current: bool = False
    description: str | None = None

    @classmethod
    def from_entity(cls, exp: ExperienceEntry) -> ExperienceItem:
        return cls(
            id=exp.id,
            title=exp.title,
            company=exp.company,
            location=exp.location,
            from_=exp.from_date,
            to=exp.to_date,
            current=exp.current,
            description=exp.description,
        )


class EducationItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_: datetime = Field(..., alias="from")
    to: datetime | None = None
    current: bool = False
    description: str | None = None

    @classmethod
    def from_entity(cls, edu: EducationEntry) -> EducationItem:
        return cls(
            id=edu.id,
            school=edu.school,
            degree=edu.degree,
            fieldofstudy=edu.fieldofstudy,
            from_=edu.from_date,
            to=edu.to_date,
            current=edu.current,
            description=edu.description,
        )


class ProfileResponse(BaseModel):
    """A profile with its owner's name and avatar embedded."""
    id: str = Field(..., description="Unique identifier of the profile")
    user: ProfileUser | None = Field(None, description="Owning user, joined at read time")
    status: str | None = None
    skills: list[str] = Field(default_factory=list, examples=[["js", "node", "react"]])
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    social: list[SocialLinkItem] = Field(default_factory=list)
    experience: list[ExperienceItem] = Field(default_factory=list, description="Newest entry first")
    education: list[EducationItem] = Field(default_factory=list, description="Newest entry first")
    date: datetime | None = None

    @classmethod
    def from_entity(cls, profile: ProfileEntity, user: UserEntity | None) -> ProfileResponse:
        return cls(
            id=profile.id,
            user=ProfileUser(id=user.id, name=user.name, avatar=user.avatar) if user else None,
            status=profile.status,
            skills=list(profile.skills),
            company=profile.company,
            website=profile.website,
            location=profile.location,
            bio=profile.bio,
            githubusername=profile.githubusername,
            social=[SocialLinkItem(network=link.network, url=link.url) for link in profile.social],
            experience=[ExperienceItem.from_entity(exp) for exp in profile.experience],
            education=[EducationItem.from_entity(edu) for edu in profile.education],
            date=profile.date,
        )
