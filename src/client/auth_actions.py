from __future__ import annotations

import httpx

from src.client.action_types import Action, ActionType
from src.client.alerts import alert_errors
from src.client.api_client import ApiClient
from src.client.store import Store


async def load_user(store: Store, api: ApiClient) -> None:
    try:
        user = await api.get("/api/auth")
    except httpx.HTTPError:
        store.dispatch(Action(ActionType.AUTH_ERROR))
        return
    store.dispatch(Action(ActionType.USER_LOADED, user))


async def register(store: Store, api: ApiClient, name: str, email: str, password: str) -> None:
    try:
        data = await api.post("/api/users", {"name": name, "email": email, "password": password})
    except httpx.HTTPError as exc:
        alert_errors(store, exc)
        store.dispatch(Action(ActionType.REGISTER_FAIL))
        return
    api.set_token(data["token"])
    store.dispatch(Action(ActionType.REGISTER_SUCCESS, data))
    await load_user(store, api)


async def login(store: Store, api: ApiClient, email: str, password: str) -> None:
    try:
        data = await api.post("/api/auth", {"email": email, "password": password})
    except httpx.HTTPError as exc:
        alert_errors(store, exc)
        store.dispatch(Action(ActionType.LOGIN_FAIL))
        return
    api.set_token(data["token"])
    store.dispatch(Action(ActionType.LOGIN_SUCCESS, data))
    await load_user(store, api)


def logout(store: Store, api: ApiClient) -> None:
    api.set_token(None)
    store.dispatch(Action(ActionType.CLEAR_PROFILE))
    store.dispatch(Action(ActionType.LOGOUT))
