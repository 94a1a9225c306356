from __future__ import annotations

import httpx

from src.client.action_types import Action, ActionType
from src.client.alerts import alert_errors, set_alert
from src.client.api_client import ApiClient, error_payload
from src.client.store import Store


def _post_error(store: Store, exc: httpx.HTTPError, *, with_alerts: bool = False) -> None:
    if with_alerts:
        alert_errors(store, exc)
    store.dispatch(Action(ActionType.POST_ERROR, error_payload(exc)))


async def get_posts(store: Store, api: ApiClient) -> None:
    try:
        posts = await api.get("/api/posts")
    except httpx.HTTPError as exc:
        _post_error(store, exc)
        return
    store.dispatch(Action(ActionType.GET_POSTS, posts))


async def get_post(store: Store, api: ApiClient, post_id: str) -> None:
    try:
        post = await api.get(f"/api/posts/{post_id}")
    except httpx.HTTPError as exc:
        _post_error(store, exc)
        return
    store.dispatch(Action(ActionType.GET_POST, post))


async def add_post(store: Store, api: ApiClient, text: str) -> None:
    try:
        post = await api.post("/api/posts", {"text": text})
    except httpx.HTTPError as exc:
        _post_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.ADD_POST, post))
    set_alert(store, "Post Created", "success")


async def delete_post(store: Store, api: ApiClient, post_id: str) -> None:
    try:
        await api.delete(f"/api/posts/{post_id}")
    except httpx.HTTPError as exc:
        _post_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.DELETE_POST, post_id))
    set_alert(store, "Post Removed", "success")


async def add_like(store: Store, api: ApiClient, post_id: str) -> None:
    try:
        likes = await api.put(f"/api/posts/like/{post_id}")
    except httpx.HTTPError as exc:
        _post_error(store, exc)
        return
    store.dispatch(Action(ActionType.UPDATE_LIKES, {"post_id": post_id, "likes": likes}))


async def remove_like(store: Store, api: ApiClient, post_id: str) -> None:
    try:
        likes = await api.put(f"/api/posts/unlike/{post_id}")
    except httpx.HTTPError as exc:
        _post_error(store, exc)
        return
    store.dispatch(Action(ActionType.UPDATE_LIKES, {"post_id": post_id, "likes": likes}))


async def add_comment(store: Store, api: ApiClient, post_id: str, text: str) -> None:
    try:
        comments = await api.post(f"/api/posts/comment/{post_id}", {"text": text})
    except httpx.HTTPError as exc:
        _post_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.ADD_COMMENT, comments))
    set_alert(store, "Comment Added", "success")


async def delete_comment(store: Store, api: ApiClient, post_id: str, comment_id: str) -> None:
    try:
        await api.delete(f"/api/posts/comment/{post_id}/{comment_id}")
    except httpx.HTTPError as exc:
        _post_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.DELETE_COMMENT, comment_id))
    set_alert(store, "Comment Removed", "success")
