from __future__ import annotations

import copy
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from src.domain.entities.user import UserEntity
from src.domain.errors import ConflictError
from src.infrastructure.database.mongo_client import memory_collection, memory_key


class UserRepository:
    def __init__(self, db: Database | None) -> None:
        self.collection = db["users"] if db is not None else None
        self._mem = memory_collection("users")

    def _doc_to_entity(self, doc: dict[str, Any]) -> UserEntity:
        return UserEntity(
            id=str(doc["_id"]),
            name=doc["name"],
            email=doc["email"],
            password=doc["password"],
            avatar=doc.get("avatar", ""),
            date=doc["date"],
        )

    def create(self, name: str, email: str, password_hash: str, avatar: str) -> UserEntity:
        doc = {
            "_id": ObjectId(),
            "name": name,
            "email": email,
            "password": password_hash,
            "avatar": avatar,
            "date": datetime.now(UTC),
        }
        # MongoDB mode
        if self.collection is not None:
            try:
                self.collection.insert_one(doc)
            except DuplicateKeyError as exc:
                raise ConflictError("User already exists") from exc
            return self._doc_to_entity(doc)

        # In-memory mode
        if any(existing["email"] == email for existing in self._mem.values()):
            raise ConflictError("User already exists")
        self._mem[str(doc["_id"])] = copy.deepcopy(doc)
        return self._doc_to_entity(doc)

    def get(self, user_id: str) -> UserEntity | None:
        if not ObjectId.is_valid(user_id):
            return None
        if self.collection is not None:
            doc = self.collection.find_one({"_id": ObjectId(user_id)})
            return self._doc_to_entity(doc) if doc else None
        doc = self._mem.get(memory_key(user_id))
        return self._doc_to_entity(doc) if doc else None

    def get_by_email(self, email: str) -> UserEntity | None:
        if self.collection is not None:
            doc = self.collection.find_one({"email": email})
            return self._doc_to_entity(doc) if doc else None
        for doc in self._mem.values():
            if doc["email"] == email:
                return self._doc_to_entity(doc)
        return None

    def get_many(self, user_ids: list[str]) -> dict[str, UserEntity]:
        """Batch lookup used to join user name/avatar into profiles."""
        ids = [ObjectId(uid) for uid in set(user_ids) if ObjectId.is_valid(uid)]
        if self.collection is not None:
            docs = self.collection.find({"_id": {"$in": ids}})
        else:
            docs = [self._mem[str(oid)] for oid in ids if str(oid) in self._mem]
        return {str(doc["_id"]): self._doc_to_entity(doc) for doc in docs}

    def count_by_email(self, email: str) -> int:
        if self.collection is not None:
            return self.collection.count_documents({"email": email})
        return sum(1 for doc in self._mem.values() if doc["email"] == email)

    def delete(self, user_id: str) -> bool:
        if not ObjectId.is_valid(user_id):
            return False
        if self.collection is not None:
            res = self.collection.delete_one({"_id": ObjectId(user_id)})
            return res.deleted_count > 0
        return self._mem.pop(memory_key(user_id), None) is not None
