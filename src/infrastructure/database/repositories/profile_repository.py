from __future__ import annotations

import copy
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.database import Database

from src.domain.entities.profile import (
    SOCIAL_NETWORKS,
    EducationEntry,
    ExperienceEntry,
    ProfileEntity,
    SocialLink,
)
from src.infrastructure.database.mongo_client import memory_collection, memory_key


class ProfileRepository:
    def __init__(self, db: Database | None) -> None:
        self.collection = db["profiles"] if db is not None else None
        self._mem = memory_collection("profiles")

    def _doc_to_entity(self, doc: dict[str, Any]) -> ProfileEntity:
        social = doc.get("social") or {}
        return ProfileEntity(
            id=str(doc["_id"]),
            user_id=str(doc["user"]),
            status=doc.get("status"),
            skills=list(doc.get("skills") or []),
            company=doc.get("company"),
            website=doc.get("website"),
            location=doc.get("location"),
            bio=doc.get("bio"),
            githubusername=doc.get("githubusername"),
            social=[
                SocialLink(network=net, url=social[net]) for net in SOCIAL_NETWORKS if social.get(net)
            ],
            experience=[
                ExperienceEntry(
                    id=str(exp["_id"]),
                    title=exp["title"],
                    company=exp["company"],
                    location=exp.get("location"),
                    from_date=exp["from"],
                    to_date=exp.get("to"),
                    current=bool(exp.get("current", False)),
                    description=exp.get("description"),
                )
                for exp in doc.get("experience") or []
            ],
            education=[
                EducationEntry(
                    id=str(edu["_id"]),
                    school=edu["school"],
                    degree=edu["degree"],
                    fieldofstudy=edu["fieldofstudy"],
                    from_date=edu["from"],
                    to_date=edu.get("to"),
                    current=bool(edu.get("current", False)),
                    description=edu.get("description"),
                )
                for edu in doc.get("education") or []
            ],
            date=doc.get("date"),
        )

    @staticmethod
    def _entries_to_docs(profile: ProfileEntity) -> dict[str, list[dict[str, Any]]]:
        return {
            "experience": [
                {
                    "_id": ObjectId(exp.id),
                    "title": exp.title,
                    "company": exp.company,
                    "location": exp.location,
                    "from": exp.from_date,
                    "to": exp.to_date,
                    "current": exp.current,
                    "description": exp.description,
                }
                for exp in profile.experience
            ],
            "education": [
                {
                    "_id": ObjectId(edu.id),
                    "school": edu.school,
                    "degree": edu.degree,
                    "fieldofstudy": edu.fieldofstudy,
                    "from": edu.from_date,
                    "to": edu.to_date,
                    "current": edu.current,
                    "description": edu.description,
                }
                for edu in profile.education
            ],
        }

    def get_by_user(self, user_id: str) -> ProfileEntity | None:
        if not ObjectId.is_valid(user_id):
            return None
        if self.collection is not None:
            doc = self.collection.find_one({"user": ObjectId(user_id)})
            return self._doc_to_entity(doc) if doc else None
        doc = self._mem.get(memory_key(user_id))
        return self._doc_to_entity(doc) if doc else None

    def list_all(self) -> list[ProfileEntity]:
        if self.collection is not None:
            return [self._doc_to_entity(doc) for doc in self.collection.find()]
        return [self._doc_to_entity(doc) for doc in self._mem.values()]

    def upsert(self, user_id: str, fields: dict[str, Any], social: dict[str, str]) -> ProfileEntity:
        """Create the user's profile or update it in place.

        Only keys present in ``fields`` and ``social`` are written; everything
        else already stored is left untouched.
        """
        update = dict(fields)
        for network, url in social.items():
            update[f"social.{network}"] = url

        # MongoDB mode
        if self.collection is not None:
            doc = self.collection.find_one_and_update(
                {"user": ObjectId(user_id)},
                {
                    "$set": update,
                    "$setOnInsert": {"experience": [], "education": [], "date": datetime.now(UTC)},
                },
                upsert=True,
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_entity(doc)

        # In-memory mode, keyed by owning user id
        doc = self._mem.get(memory_key(user_id))
        if doc is None:
            doc = {
                "_id": ObjectId(),
                "user": ObjectId(user_id),
                "social": {},
                "experience": [],
                "education": [],
                "date": datetime.now(UTC),
            }
        doc.update(copy.deepcopy(fields))
        doc.setdefault("social", {}).update(social)
        self._mem[memory_key(user_id)] = doc
        return self._doc_to_entity(doc)

    def save_entries(self, profile: ProfileEntity) -> ProfileEntity:
        """Persist the experience and education lists of ``profile``."""
        entries = self._entries_to_docs(profile)
        if self.collection is not None:
            doc = self.collection.find_one_and_update(
                {"_id": ObjectId(profile.id)},
                {"$set": entries},
                return_document=ReturnDocument.AFTER,
            )
            return self._doc_to_entity(doc) if doc else profile
        doc = self._mem.get(memory_key(profile.user_id))
        if doc is None:
            return profile
        doc.update(entries)
        return self._doc_to_entity(doc)

    def delete_by_user(self, user_id: str) -> bool:
        if not ObjectId.is_valid(user_id):
            return False
        if self.collection is not None:
            res = self.collection.delete_one({"user": ObjectId(user_id)})
            return res.deleted_count > 0
        return self._mem.pop(memory_key(user_id), None) is not None
