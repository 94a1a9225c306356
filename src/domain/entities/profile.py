from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


@dataclass(frozen=True)
class SocialLink:
    network: str
    url: str


@dataclass(frozen=True)
class ExperienceEntry:
    id: str
    title: str
    company: str
    from_date: datetime
    location: str | None = None
    to_date: datetime | None = None  # None while current is True
    current: bool = False
    description: str | None = None


@dataclass(frozen=True)
class EducationEntry:
    id: str
    school: str
    degree: str
    fieldofstudy: str
    from_date: datetime
    to_date: datetime | None = None
    current: bool = False
    description: str | None = None


@dataclass
class ProfileEntity:
    id: str
    user_id: str  # unique: one profile per user
    status: str | None = None
    skills: list[str] = field(default_factory=list)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    githubusername: str | None = None
    social: list[SocialLink] = field(default_factory=list)
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    date: datetime | None = None
