"""Profile action creators.

Each one performs a single API call and dispatches either the success action
or PROFILE_ERROR with ``{"msg", "status"}``. Form submissions also raise one
danger alert per violated rule returned by the server.
"""
from __future__ import annotations

from typing import Any

import httpx

from src.client.action_types import Action, ActionType
from src.client.alerts import alert_errors, set_alert
from src.client.api_client import ApiClient, error_payload
from src.client.store import Store


def _profile_error(store: Store, exc: httpx.HTTPError, *, with_alerts: bool = False) -> None:
    if with_alerts:
        alert_errors(store, exc)
    store.dispatch(Action(ActionType.PROFILE_ERROR, error_payload(exc)))


async def get_current_profile(store: Store, api: ApiClient) -> None:
    try:
        profile = await api.get("/api/profile/me")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    store.dispatch(Action(ActionType.GET_PROFILE, profile))


async def get_profiles(store: Store, api: ApiClient) -> None:
    # keep the caller's own profile out of the list view
    store.dispatch(Action(ActionType.CLEAR_PROFILE))
    try:
        profiles = await api.get("/api/profile")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    store.dispatch(Action(ActionType.GET_PROFILES, profiles))


async def get_profile_by_id(store: Store, api: ApiClient, user_id: str) -> None:
    try:
        profile = await api.get(f"/api/profile/user/{user_id}")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    store.dispatch(Action(ActionType.GET_PROFILE, profile))


async def get_github_repos(store: Store, api: ApiClient, username: str) -> None:
    try:
        repos = await api.get(f"/api/profile/github/{username}")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    store.dispatch(Action(ActionType.GET_REPOS, repos))


async def create_profile(store: Store, api: ApiClient, form: dict[str, Any], edit: bool = False) -> None:
    try:
        profile = await api.post("/api/profile", form)
    except httpx.HTTPError as exc:
        _profile_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.GET_PROFILE, profile))
    set_alert(store, "Profile Updated" if edit else "Profile Created", "success")


async def add_experience(store: Store, api: ApiClient, form: dict[str, Any]) -> None:
    try:
        profile = await api.put("/api/profile/experience", form)
    except httpx.HTTPError as exc:
        _profile_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.UPDATE_PROFILE, profile))
    set_alert(store, "Experience Added", "success")


async def add_education(store: Store, api: ApiClient, form: dict[str, Any]) -> None:
    try:
        profile = await api.put("/api/profile/education", form)
    except httpx.HTTPError as exc:
        _profile_error(store, exc, with_alerts=True)
        return
    store.dispatch(Action(ActionType.UPDATE_PROFILE, profile))
    set_alert(store, "Education Added", "success")


async def delete_experience(store: Store, api: ApiClient, exp_id: str) -> None:
    try:
        profile = await api.delete(f"/api/profile/experience/{exp_id}")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    store.dispatch(Action(ActionType.UPDATE_PROFILE, profile))
    set_alert(store, "Experience Removed", "success")


async def delete_education(store: Store, api: ApiClient, edu_id: str) -> None:
    try:
        profile = await api.delete(f"/api/profile/education/{edu_id}")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    store.dispatch(Action(ActionType.UPDATE_PROFILE, profile))
    set_alert(store, "Education Removed", "success")


async def delete_account(store: Store, api: ApiClient) -> None:
    """Permanently delete the account. Confirmation is the caller's job."""
    try:
        await api.delete("/api/profile")
    except httpx.HTTPError as exc:
        _profile_error(store, exc)
        return
    api.set_token(None)
    store.dispatch(Action(ActionType.CLEAR_PROFILE))
    store.dispatch(Action(ActionType.ACCOUNT_DELETED))
    set_alert(store, "Your account has been permanently deleted", "success")
