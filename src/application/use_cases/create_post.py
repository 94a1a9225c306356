from __future__ import annotations

from dataclasses import dataclass

from src.application.dtos.post_dto import TextRequest
from src.domain.entities.post import PostEntity
from src.domain.errors import AuthError, ValidationError
from src.infrastructure.database.repositories.post_repository import PostRepository
from src.infrastructure.database.repositories.user_repository import UserRepository


@dataclass
class CreatePostUseCase:
    posts: PostRepository
    users: UserRepository

    def execute(self, user_id: str, request: TextRequest) -> PostEntity:
        """
        Publish a post.

        The author's current name and avatar are copied onto the post and are
        not updated if the author later changes them or deletes the account.
        """
        errors = request.violations()
        if errors:
            raise ValidationError(errors)
        author = self.users.get(user_id)
        if author is None:
            raise AuthError("Token is not valid")
        return self.posts.create(
            user_id=user_id,
            text=(request.text or "").strip(),
            name=author.name,
            avatar=author.avatar,
        )
