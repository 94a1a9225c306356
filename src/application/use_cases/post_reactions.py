from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from src.application.dtos.post_dto import TextRequest
from src.application.use_cases.get_post import load_post
from src.domain.entities.post import CommentEntity, LikeEntity
from src.domain.errors import AuthError, ConflictError, NotFoundError, ValidationError
from src.domain.services.guards import enforce, is_comment_author
from src.infrastructure.database.mongo_client import new_id
from src.infrastructure.database.repositories.post_repository import PostRepository
from src.infrastructure.database.repositories.user_repository import UserRepository


@dataclass
class PostReactionsUseCase:
    """Likes and comments embedded in a post. New items go to the head."""

    posts: PostRepository
    users: UserRepository

    def like(self, user_id: str, post_id: str) -> list[LikeEntity]:
        post = load_post(self.posts, post_id)
        if post.liked_by(user_id):
            raise ConflictError("Post already liked")
        post.likes.insert(0, LikeEntity(id=new_id(), user_id=user_id))
        self.posts.save_reactions(post)
        return post.likes

    def unlike(self, user_id: str, post_id: str) -> list[LikeEntity]:
        post = load_post(self.posts, post_id)
        if not post.liked_by(user_id):
            raise ConflictError("Post has not yet been liked")
        post.likes = [like for like in post.likes if like.user_id != user_id]
        self.posts.save_reactions(post)
        return post.likes

    def add_comment(self, user_id: str, post_id: str, request: TextRequest) -> list[CommentEntity]:
        errors = request.violations()
        if errors:
            raise ValidationError(errors)
        author = self.users.get(user_id)
        if author is None:
            raise AuthError("Token is not valid")
        post = load_post(self.posts, post_id)
        comment = CommentEntity(
            id=new_id(),
            user_id=user_id,
            text=(request.text or "").strip(),
            name=author.name,
            avatar=author.avatar,
            date=datetime.now(UTC),
        )
        post.comments.insert(0, comment)
        self.posts.save_reactions(post)
        return post.comments

    def remove_comment(self, user_id: str, post_id: str, comment_id: str) -> list[CommentEntity]:
        post = load_post(self.posts, post_id)
        comment = post.find_comment(comment_id)
        if comment is None:
            raise NotFoundError("Comment does not exist")
        enforce(is_comment_author, user_id, comment)
        post.comments = [c for c in post.comments if c.id != comment_id]
        self.posts.save_reactions(post)
        return post.comments
