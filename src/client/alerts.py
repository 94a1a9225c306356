from __future__ import annotations

import asyncio
import uuid

import httpx

from src.client.action_types import Action, ActionType
from src.client.api_client import error_messages
from src.client.store import Store

DEFAULT_TIMEOUT = 5.0


def set_alert(store: Store, msg: str, alert_type: str = "success", timeout: float = DEFAULT_TIMEOUT) -> str:
    """Show an alert and schedule its removal after ``timeout`` seconds.

    Must be called with a running event loop.
    """
    alert_id = str(uuid.uuid4())
    store.dispatch(Action(ActionType.SET_ALERT, {"id": alert_id, "msg": msg, "alert_type": alert_type}))
    loop = asyncio.get_running_loop()
    store.alert_timers[alert_id] = loop.call_later(timeout, _expire, store, alert_id)
    return alert_id


def _expire(store: Store, alert_id: str) -> None:
    store.alert_timers.pop(alert_id, None)
    store.dispatch(Action(ActionType.REMOVE_ALERT, alert_id))


def remove_alert(store: Store, alert_id: str) -> None:
    """Dismiss an alert early and cancel its pending timer."""
    handle = store.alert_timers.pop(alert_id, None)
    if handle is not None:
        handle.cancel()
    store.dispatch(Action(ActionType.REMOVE_ALERT, alert_id))


def alert_errors(store: Store, exc: httpx.HTTPError) -> None:
    for msg in error_messages(exc):
        set_alert(store, msg, "danger")
