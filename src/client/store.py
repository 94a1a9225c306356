from __future__ import annotations

import asyncio
from typing import Any, Callable, Mapping

from src.client.action_types import Action, ActionType
from src.client.reducers import ROOT_REDUCERS, Reducer

Listener = Callable[[dict[str, Any]], None]


class Store:
    """Single state tree made of named slices, one reducer per slice."""

    def __init__(self, reducers: Mapping[str, Reducer] | None = None) -> None:
        self._reducers = dict(reducers or ROOT_REDUCERS)
        self._listeners: list[Listener] = []
        # pending auto-removal timers, keyed by alert id
        self.alert_timers: dict[str, asyncio.TimerHandle] = {}
        init = Action(ActionType.INIT)
        self.state: dict[str, Any] = {name: reducer(None, init) for name, reducer in self._reducers.items()}

    def dispatch(self, action: Action) -> None:
        self.state = {name: reducer(self.state.get(name), action) for name, reducer in self._reducers.items()}
        for listener in list(self._listeners):
            listener(self.state)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __getitem__(self, name: str) -> Any:
        return self.state[name]
