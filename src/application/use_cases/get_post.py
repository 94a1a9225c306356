from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities.post import PostEntity
from src.domain.errors import NotFoundError
from src.infrastructure.database.mongo_client import to_object_id
from src.infrastructure.database.repositories.post_repository import PostRepository

POST_NOT_FOUND = "Post not found"


def load_post(posts: PostRepository, post_id: str) -> PostEntity:
    """Fetch a post or raise a 404 that records why it was not found."""
    oid = to_object_id(post_id, "Post")
    post = posts.get(oid)
    if post is None:
        raise NotFoundError(POST_NOT_FOUND, reason=NotFoundError.ABSENT)
    return post


@dataclass
class GetPostUseCase:
    posts: PostRepository

    def execute(self, post_id: str) -> PostEntity:
        return load_post(self.posts, post_id)

    def list_all(self) -> list[PostEntity]:
        return self.posts.list_all()
