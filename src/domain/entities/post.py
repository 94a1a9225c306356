from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class LikeEntity:
    id: str
    user_id: str


@dataclass(frozen=True)
class CommentEntity:
    id: str
    user_id: str
    text: str
    # Snapshot of the author at comment time, not kept in sync afterwards
    name: str | None
    avatar: str | None
    date: datetime


@dataclass
class PostEntity:
    id: str
    user_id: str
    text: str
    # Snapshot of the author at post time so the post survives account deletion
    name: str | None
    avatar: str | None
    date: datetime
    likes: list[LikeEntity] = field(default_factory=list)
    comments: list[CommentEntity] = field(default_factory=list)

    def liked_by(self, user_id: str) -> bool:
        return any(like.user_id == user_id for like in self.likes)

    def find_comment(self, comment_id: str) -> CommentEntity | None:
        for comment in self.comments:
            if comment.id == comment_id:
                return comment
        return None
