"""Ownership guards composed in front of mutating handlers.

A guard is a plain function ``(identity, resource) -> bool``. ``enforce`` runs
one and raises ``ForbiddenError`` on deny.
"""
from __future__ import annotations

from typing import Any, Callable

from src.domain.entities.post import CommentEntity, PostEntity
from src.domain.errors import ForbiddenError

Guard = Callable[[str, Any], bool]


def is_post_author(identity: str, post: PostEntity) -> bool:
    return post.user_id == identity


def is_comment_author(identity: str, comment: CommentEntity) -> bool:
    return comment.user_id == identity


def enforce(guard: Guard, identity: str, resource: Any, message: str = "User not authorized") -> None:
    if not guard(identity, resource):
        raise ForbiddenError(message)
