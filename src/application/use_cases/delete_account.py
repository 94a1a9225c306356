from __future__ import annotations

import logging
from dataclasses import dataclass

from src.infrastructure.database.repositories.post_repository import PostRepository
from src.infrastructure.database.repositories.profile_repository import ProfileRepository
from src.infrastructure.database.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteAccountUseCase:
    """
    Remove a user together with everything they own.

    Order is posts, then profile, then user. The three deletes are not one
    transaction: a failure part-way leaves the remaining documents in place.
    Comments and likes the user left on other people's posts are kept.
    """

    posts: PostRepository
    profiles: ProfileRepository
    users: UserRepository

    def execute(self, user_id: str) -> None:
        removed_posts = self.posts.delete_by_user(user_id)
        removed_profile = self.profiles.delete_by_user(user_id)
        removed_user = self.users.delete(user_id)
        logger.info(
            "Deleted account %s (posts=%d, profile=%s, user=%s)",
            user_id,
            removed_posts,
            removed_profile,
            removed_user,
        )
