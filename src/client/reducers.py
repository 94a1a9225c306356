"""Pure reducers: ``(slice | None, action) -> new slice``.

None means "not initialised yet" and yields the slice's initial state. The
input slice is never mutated.
"""
from __future__ import annotations

from typing import Any, Callable

from src.client.action_types import Action, ActionType

Reducer = Callable[[Any, Action], Any]


def initial_auth() -> dict[str, Any]:
    return {"token": None, "is_authenticated": False, "loading": True, "user": None}


def initial_profile() -> dict[str, Any]:
    return {"profile": None, "profiles": [], "repos": [], "loading": True, "error": {}}


def initial_post() -> dict[str, Any]:
    return {"post": None, "posts": [], "loading": True, "error": {}}


def alert_reducer(state: list[dict] | None, action: Action) -> list[dict]:
    state = [] if state is None else state
    if action.type is ActionType.SET_ALERT:
        return [*state, action.payload]
    if action.type is ActionType.REMOVE_ALERT:
        return [alert for alert in state if alert["id"] != action.payload]
    return state


def auth_reducer(state: dict | None, action: Action) -> dict:
    state = initial_auth() if state is None else state
    kind, payload = action.type, action.payload

    if kind is ActionType.USER_LOADED:
        return {**state, "is_authenticated": True, "loading": False, "user": payload}
    if kind in (ActionType.REGISTER_SUCCESS, ActionType.LOGIN_SUCCESS):
        return {**state, "token": payload["token"], "is_authenticated": True, "loading": False}
    if kind in (
        ActionType.REGISTER_FAIL,
        ActionType.AUTH_ERROR,
        ActionType.LOGIN_FAIL,
        ActionType.LOGOUT,
        ActionType.ACCOUNT_DELETED,
    ):
        return {**state, "token": None, "is_authenticated": False, "loading": False, "user": None}
    return state


def profile_reducer(state: dict | None, action: Action) -> dict:
    state = initial_profile() if state is None else state
    kind, payload = action.type, action.payload

    # create/update answer with the whole profile, same as a fetch
    if kind in (ActionType.GET_PROFILE, ActionType.UPDATE_PROFILE):
        return {**state, "profile": payload, "loading": False}
    if kind is ActionType.GET_PROFILES:
        return {**state, "profiles": payload, "loading": False}
    if kind is ActionType.PROFILE_ERROR:
        return {**state, "error": payload, "loading": False, "profile": None}
    if kind is ActionType.CLEAR_PROFILE:
        return {**state, "profile": None, "repos": [], "loading": False}
    if kind is ActionType.GET_REPOS:
        return {**state, "repos": payload, "loading": False}
    return state


def post_reducer(state: dict | None, action: Action) -> dict:
    state = initial_post() if state is None else state
    kind, payload = action.type, action.payload

    if kind is ActionType.GET_POSTS:
        return {**state, "posts": payload, "loading": False}
    if kind is ActionType.GET_POST:
        return {**state, "post": payload, "loading": False}
    if kind is ActionType.ADD_POST:
        return {**state, "posts": [payload, *state["posts"]], "loading": False}
    if kind is ActionType.POST_ERROR:
        return {**state, "error": payload, "loading": False}
    if kind is ActionType.UPDATE_LIKES:
        post_id, likes = payload["post_id"], payload["likes"]
        current = state["post"]
        return {
            **state,
            "posts": [{**p, "likes": likes} if p["id"] == post_id else p for p in state["posts"]],
            "post": {**current, "likes": likes} if current and current["id"] == post_id else current,
            "loading": False,
        }
    if kind is ActionType.DELETE_POST:
        return {**state, "posts": [p for p in state["posts"] if p["id"] != payload], "loading": False}
    if kind is ActionType.ADD_COMMENT:
        return {**state, "post": {**(state["post"] or {}), "comments": payload}, "loading": False}
    if kind is ActionType.DELETE_COMMENT:
        current = state["post"] or {}
        comments = [c for c in current.get("comments", []) if c["id"] != payload]
        return {**state, "post": {**current, "comments": comments}, "loading": False}
    return state


ROOT_REDUCERS: dict[str, Reducer] = {
    "alert": alert_reducer,
    "auth": auth_reducer,
    "profile": profile_reducer,
    "post": post_reducer,
}
