"""
Tests for the experience/education use case.
"""
from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import Mock

import pytest

from src.application.dtos.profile_dto import EducationRequest, ExperienceRequest, split_skills
from src.application.use_cases.profile_entries import ProfileEntriesUseCase
from src.domain.entities.profile import ExperienceEntry, ProfileEntity
from src.domain.errors import NotFoundError, ValidationError


@pytest.fixture
def profiles():
    repo = Mock()
    repo.save_entries.side_effect = lambda profile: profile
    return repo


def _profile(*exp_ids: str) -> ProfileEntity:
    start = datetime(2020, 1, 1, tzinfo=UTC)
    return ProfileEntity(
        id="prof_1",
        user_id="user_1",
        experience=[ExperienceEntry(id=i, title=f"t{i}", company="c", from_date=start) for i in exp_ids],
    )


class TestExperience:
    def test_add_inserts_at_head(self, profiles):
        profiles.get_by_user.return_value = _profile("a", "b")
        uc = ProfileEntriesUseCase(profiles)

        body = ExperienceRequest.model_validate({"title": "Dev", "company": "Acme", "from": "2021-05-01"})
        result = uc.add_experience("user_1", body)

        assert [e.title for e in result.experience] == ["Dev", "ta", "tb"]
        assert result.experience[0].from_date.tzinfo is not None
        profiles.save_entries.assert_called_once()

    def test_current_entry_drops_to_date(self, profiles):
        profiles.get_by_user.return_value = _profile()
        body = ExperienceRequest.model_validate(
            {"title": "Dev", "company": "Acme", "from": "2021-05-01", "to": "2022-01-01", "current": True}
        )
        result = ProfileEntriesUseCase(profiles).add_experience("user_1", body)
        assert result.experience[0].to_date is None
        assert result.experience[0].current is True

    def test_validation_lists_every_missing_field(self, profiles):
        with pytest.raises(ValidationError) as excinfo:
            ProfileEntriesUseCase(profiles).add_experience("user_1", ExperienceRequest())
        params = [item.param for item in excinfo.value.errors]
        assert params == ["title", "company", "from"]
        profiles.get_by_user.assert_not_called()

    def test_remove_existing_entry(self, profiles):
        profiles.get_by_user.return_value = _profile("a", "b", "c")
        result = ProfileEntriesUseCase(profiles).remove_experience("user_1", "b")
        assert [e.id for e in result.experience] == ["a", "c"]
        profiles.save_entries.assert_called_once()

    def test_remove_unknown_id_is_a_no_op(self, profiles):
        profiles.get_by_user.return_value = _profile("a", "b", "c")
        result = ProfileEntriesUseCase(profiles).remove_experience("user_1", "zzz")
        # the last entry must survive an unknown id
        assert [e.id for e in result.experience] == ["a", "b", "c"]
        profiles.save_entries.assert_not_called()

    def test_no_profile(self, profiles):
        profiles.get_by_user.return_value = None
        with pytest.raises(NotFoundError) as excinfo:
            ProfileEntriesUseCase(profiles).remove_experience("user_1", "a")
        assert excinfo.value.status_code == 400


class TestEducation:
    def test_add_and_remove(self, profiles):
        profiles.get_by_user.return_value = _profile()
        uc = ProfileEntriesUseCase(profiles)
        body = EducationRequest.model_validate(
            {"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "2015-09-01"}
        )
        profile = uc.add_education("user_1", body)
        assert profile.education[0].school == "MIT"

        profiles.get_by_user.return_value = profile
        edu_id = profile.education[0].id
        assert uc.remove_education("user_1", "unknown").education[0].id == edu_id
        assert uc.remove_education("user_1", edu_id).education == []

    def test_validation(self, profiles):
        with pytest.raises(ValidationError) as excinfo:
            ProfileEntriesUseCase(profiles).add_education("user_1", EducationRequest(school="MIT"))
        assert [item.msg for item in excinfo.value.errors] == [
            "Degree is required",
            "Field of study is required",
            "From date is required",
        ]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("js, node , react", ["js", "node", "react"]),
        ("python", ["python"]),
        (" a,,b , ", ["a", "b"]),
    ],
)
def test_split_skills(raw, expected):
    assert split_skills(raw) == expected
