"""
Tests for likes, comments and post deletion use cases.
"""
from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import Mock

import pytest
from bson import ObjectId

from src.application.dtos.post_dto import TextRequest
from src.application.use_cases.delete_post import DeletePostUseCase
from src.application.use_cases.get_post import load_post
from src.application.use_cases.post_reactions import PostReactionsUseCase
from src.domain.entities.post import LikeEntity, PostEntity
from src.domain.entities.user import UserEntity
from src.domain.errors import ConflictError, ForbiddenError, NotFoundError, ValidationError

POST_ID = str(ObjectId())


@pytest.fixture
def post():
    return PostEntity(
        id=POST_ID, user_id="author", text="hello", name="Author", avatar="a.png", date=datetime.now(UTC)
    )


@pytest.fixture
def repos(post):
    posts = Mock()
    posts.get.return_value = post
    users = Mock()
    users.get.side_effect = lambda uid: UserEntity(
        id=uid, name=f"name-{uid}", email=f"{uid}@mail.com", password="x", avatar=f"{uid}.png",
        date=datetime.now(UTC),
    )
    return posts, users


class TestLikes:
    def test_like_inserts_at_head(self, repos):
        posts, users = repos
        uc = PostReactionsUseCase(posts, users)
        uc.like("u1", POST_ID)
        likes = uc.like("u2", POST_ID)
        assert [like.user_id for like in likes] == ["u2", "u1"]
        assert posts.save_reactions.call_count == 2

    def test_second_like_conflicts_and_keeps_length(self, repos, post):
        posts, users = repos
        uc = PostReactionsUseCase(posts, users)
        uc.like("u1", POST_ID)
        with pytest.raises(ConflictError, match="already liked"):
            uc.like("u1", POST_ID)
        assert len(post.likes) == 1
        assert posts.save_reactions.call_count == 1

    def test_unlike_without_like_conflicts(self, repos):
        posts, users = repos
        with pytest.raises(ConflictError, match="not yet been liked"):
            PostReactionsUseCase(posts, users).unlike("u1", POST_ID)

    def test_unlike_removes_only_callers_like(self, repos, post):
        posts, users = repos
        post.likes = [LikeEntity(id="l2", user_id="u2"), LikeEntity(id="l1", user_id="u1")]
        likes = PostReactionsUseCase(posts, users).unlike("u1", POST_ID)
        assert [like.user_id for like in likes] == ["u2"]


class TestComments:
    def test_comments_inserted_at_head_with_snapshot(self, repos):
        posts, users = repos
        uc = PostReactionsUseCase(posts, users)
        uc.add_comment("u1", POST_ID, TextRequest(text="A"))
        comments = uc.add_comment("u2", POST_ID, TextRequest(text="B"))
        assert [c.text for c in comments] == ["B", "A"]
        assert comments[0].name == "name-u2"
        assert comments[0].avatar == "u2.png"

    def test_empty_text_rejected(self, repos):
        posts, users = repos
        with pytest.raises(ValidationError):
            PostReactionsUseCase(posts, users).add_comment("u1", POST_ID, TextRequest(text="   "))
        posts.get.assert_not_called()

    def test_only_author_can_remove(self, repos):
        posts, users = repos
        uc = PostReactionsUseCase(posts, users)
        comment = uc.add_comment("u1", POST_ID, TextRequest(text="A"))[0]
        with pytest.raises(ForbiddenError):
            uc.remove_comment("u2", POST_ID, comment.id)
        assert uc.remove_comment("u1", POST_ID, comment.id) == []

    def test_unknown_comment(self, repos):
        posts, users = repos
        with pytest.raises(NotFoundError, match="Comment does not exist"):
            PostReactionsUseCase(posts, users).remove_comment("u1", POST_ID, "nope")


class TestLoadPost:
    def test_malformed_id(self):
        posts = Mock()
        with pytest.raises(NotFoundError) as excinfo:
            load_post(posts, "not-an-id")
        assert excinfo.value.reason == NotFoundError.MALFORMED_ID
        assert excinfo.value.status_code == 404
        posts.get.assert_not_called()

    def test_absent_id(self):
        posts = Mock()
        posts.get.return_value = None
        with pytest.raises(NotFoundError) as excinfo:
            load_post(posts, str(ObjectId()))
        assert excinfo.value.reason == NotFoundError.ABSENT


def test_delete_post_by_non_owner_leaves_it(repos):
    posts, _ = repos
    with pytest.raises(ForbiddenError):
        DeletePostUseCase(posts).execute("intruder", POST_ID)
    posts.delete.assert_not_called()

    DeletePostUseCase(posts).execute("author", POST_ID)
    posts.delete.assert_called_once_with(POST_ID)
