from __future__ import annotations

from fastapi import APIRouter, Depends

from src.application.dtos.common_dto import ErrorResponse, MessageResponse
from src.application.dtos.post_dto import CommentItem, LikeItem, PostResponse, TextRequest
from src.application.use_cases.create_post import CreatePostUseCase
from src.application.use_cases.delete_post import DeletePostUseCase
from src.application.use_cases.get_post import GetPostUseCase
from src.application.use_cases.post_reactions import PostReactionsUseCase
from src.infrastructure.api.dependencies import get_current_user_id, get_post_repo, get_user_repo
from src.infrastructure.database.repositories.post_repository import PostRepository
from src.infrastructure.database.repositories.user_repository import UserRepository

router = APIRouter(
    prefix="/api/posts",
    tags=["Posts"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid fields or conflicting like"},
        401: {"model": ErrorResponse, "description": "Unauthorized - Missing token or not the author"},
        404: {"model": ErrorResponse, "description": "Not Found - Post or comment does not exist"},
    },
)


@router.post(
    "",
    response_model=PostResponse,
    summary="Create Post",
    description="""
    Publish a post. The author's current name and avatar are copied onto it.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def create_post(
    body: TextRequest,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
    users: UserRepository = Depends(get_user_repo),
):
    post = CreatePostUseCase(posts=posts, users=users).execute(user_id, body)
    return PostResponse.from_entity(post)


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List Posts",
    description="""
    Return every post, newest first.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def list_posts(
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
):
    return [PostResponse.from_entity(p) for p in GetPostUseCase(posts=posts).list_all()]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get Post",
    description="""
    Return a single post.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def get_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
):
    return PostResponse.from_entity(GetPostUseCase(posts=posts).execute(post_id))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete Post",
    description="""
    Delete a post. Only its author may do so.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
):
    DeletePostUseCase(posts=posts).execute(user_id, post_id)
    return {"msg": "Post removed"}


@router.put(
    "/like/{post_id}",
    response_model=list[LikeItem],
    summary="Like Post",
    description="""
    Like a post once. A second like by the same user answers 400.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def like_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
    users: UserRepository = Depends(get_user_repo),
):
    likes = PostReactionsUseCase(posts=posts, users=users).like(user_id, post_id)
    return [LikeItem.from_entity(like) for like in likes]


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeItem],
    summary="Unlike Post",
    description="""
    Remove the caller's like. Answers 400 when there is none.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def unlike_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
    users: UserRepository = Depends(get_user_repo),
):
    likes = PostReactionsUseCase(posts=posts, users=users).unlike(user_id, post_id)
    return [LikeItem.from_entity(like) for like in likes]


@router.post(
    "/comment/{post_id}",
    response_model=list[CommentItem],
    summary="Add Comment",
    description="""
    Add a comment at the head of the post's comment list.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def add_comment(
    post_id: str,
    body: TextRequest,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
    users: UserRepository = Depends(get_user_repo),
):
    comments = PostReactionsUseCase(posts=posts, users=users).add_comment(user_id, post_id, body)
    return [CommentItem.from_entity(c) for c in comments]


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentItem],
    summary="Delete Comment",
    description="""
    Delete a comment. Only its author may do so.

    **Authentication required**: Yes (x-auth-token header)
    """,
)
def delete_comment(
    post_id: str,
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostRepository = Depends(get_post_repo),
    users: UserRepository = Depends(get_user_repo),
):
    comments = PostReactionsUseCase(posts=posts, users=users).remove_comment(user_id, post_id, comment_id)
    return [CommentItem.from_entity(c) for c in comments]
