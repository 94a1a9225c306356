from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from src.application.dtos.common_dto import required
from src.domain.entities.post import CommentEntity, LikeEntity, PostEntity
from src.domain.errors import ErrorItem


class TextRequest(BaseModel):
    """Request body for posts and comments."""
    text: str | None = Field(None, description="Free-text body", examples=["Hello devs"])

    def violations(self) -> list[ErrorItem]:
        return required(self.text, "text", "Text is required")


class LikeItem(BaseModel):
    id: str
    user: str = Field(..., description="ID of the user who liked the post")

    @classmethod
    def from_entity(cls, like: LikeEntity) -> LikeItem:
        return cls(id=like.id, user=like.user_id)


class CommentItem(BaseModel):
    id: str
    user: str = Field(..., description="ID of the comment author")
    text: str
    name: str | None = Field(None, description="Author name when the comment was written")
    avatar: str | None = None
    date: datetime

    @classmethod
    def from_entity(cls, comment: CommentEntity) -> CommentItem:
        return cls(
            id=comment.id,
            user=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            date=comment.date,
        )


class PostResponse(BaseModel):
    id: str = Field(..., description="Unique identifier of the post")
    user: str = Field(..., description="ID of the author")
    text: str
    name: str | None = Field(None, description="Author name when the post was created")
    avatar: str | None = None
    likes: list[LikeItem] = Field(default_factory=list, description="Newest like first")
    comments: list[CommentItem] = Field(default_factory=list, description="Newest comment first")
    date: datetime

    @classmethod
    def from_entity(cls, post: PostEntity) -> PostResponse:
        return cls(
            id=post.id,
            user=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            likes=[LikeItem.from_entity(like) for like in post.likes],
            comments=[CommentItem.from_entity(c) for c in post.comments],
            date=post.date,
        )
