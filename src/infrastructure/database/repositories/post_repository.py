from __future__ import annotations

import copy
from datetime import UTC, datetime
from typing import Any

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from src.domain.entities.post import CommentEntity, LikeEntity, PostEntity
from src.infrastructure.database.mongo_client import memory_collection, memory_key


class PostRepository:
    def __init__(self, db: Database | None) -> None:
        self.collection = db["posts"] if db is not None else None
        self._mem = memory_collection("posts")

    def _doc_to_entity(self, doc: dict[str, Any]) -> PostEntity:
        return PostEntity(
            id=str(doc["_id"]),
            user_id=str(doc["user"]),
            text=doc["text"],
            name=doc.get("name"),
            avatar=doc.get("avatar"),
            date=doc["date"],
            likes=[LikeEntity(id=str(like["_id"]), user_id=str(like["user"])) for like in doc.get("likes") or []],
            comments=[
                CommentEntity(
                    id=str(c["_id"]),
                    user_id=str(c["user"]),
                    text=c["text"],
                    name=c.get("name"),
                    avatar=c.get("avatar"),
                    date=c["date"],
                )
                for c in doc.get("comments") or []
            ],
        )

    def create(self, user_id: str, text: str, name: str | None, avatar: str | None) -> PostEntity:
        doc = {
            "_id": ObjectId(),
            "user": ObjectId(user_id),
            "text": text,
            "name": name,
            "avatar": avatar,
            "likes": [],
            "comments": [],
            "date": datetime.now(UTC),
        }
        if self.collection is not None:
            self.collection.insert_one(doc)
        else:
            self._mem[str(doc["_id"])] = copy.deepcopy(doc)
        return self._doc_to_entity(doc)

    def list_all(self) -> list[PostEntity]:
        """All posts, newest first."""
        if self.collection is not None:
            cursor = self.collection.find().sort([("date", DESCENDING), ("_id", DESCENDING)])
            return [self._doc_to_entity(doc) for doc in cursor]
        docs = sorted(self._mem.values(), key=lambda d: (d["date"], d["_id"]), reverse=True)
        return [self._doc_to_entity(doc) for doc in docs]

    def get(self, post_id: ObjectId) -> PostEntity | None:
        if self.collection is not None:
            doc = self.collection.find_one({"_id": post_id})
            return self._doc_to_entity(doc) if doc else None
        doc = self._mem.get(memory_key(post_id))
        return self._doc_to_entity(doc) if doc else None

    def save_reactions(self, post: PostEntity) -> PostEntity:
        """Write back the like and comment lists of ``post``.

        Read-modify-write: two concurrent writers on one post may race.
        """
        reactions = {
            "likes": [{"_id": ObjectId(like.id), "user": ObjectId(like.user_id)} for like in post.likes],
            "comments": [
                {
                    "_id": ObjectId(c.id),
                    "user": ObjectId(c.user_id),
                    "text": c.text,
                    "name": c.name,
                    "avatar": c.avatar,
                    "date": c.date,
                }
                for c in post.comments
            ],
        }
        if self.collection is not None:
            self.collection.update_one({"_id": ObjectId(post.id)}, {"$set": reactions})
        elif post.id in self._mem:
            self._mem[post.id].update(reactions)
        return post

    def delete(self, post_id: str) -> bool:
        if self.collection is not None:
            res = self.collection.delete_one({"_id": ObjectId(post_id)})
            return res.deleted_count > 0
        return self._mem.pop(memory_key(post_id), None) is not None

    def delete_by_user(self, user_id: str) -> int:
        if not ObjectId.is_valid(user_id):
            return 0
        if self.collection is not None:
            res = self.collection.delete_many({"user": ObjectId(user_id)})
            return res.deleted_count
        owner = memory_key(user_id)
        ids = [k for k, v in self._mem.items() if str(v["user"]) == owner]
        for k in ids:
            self._mem.pop(k, None)
        return len(ids)
