from __future__ import annotations

from dataclasses import dataclass

from src.application.use_cases.get_post import load_post
from src.domain.services.guards import enforce, is_post_author
from src.infrastructure.database.repositories.post_repository import PostRepository


@dataclass
class DeletePostUseCase:
    posts: PostRepository

    def execute(self, user_id: str, post_id: str) -> None:
        post = load_post(self.posts, post_id)
        enforce(is_post_author, user_id, post)
        self.posts.delete(post.id)
