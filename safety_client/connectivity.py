"""Online/offline tracking for presentation code.

Nothing in the request path reads the flag; it only lets a UI skip a live
call it already expects to time out.
"""
from __future__ import annotations

import logging
from typing import Callable, Protocol

from safety_client.models import ConnectivityState
from safety_client.state import ReadOnlyCell, StateCell

logger = logging.getLogger(__name__)

ONLINE_EVENT = "online"
OFFLINE_EVENT = "offline"
PLATFORM_EVENTS = (ONLINE_EVENT, OFFLINE_EVENT)

EventHandler = Callable[[], None]


class PlatformEvents(Protocol):
    def is_online(self) -> bool: ...

    def add_listener(self, event: str, handler: EventHandler) -> None: ...

    def remove_listener(self, event: str, handler: EventHandler) -> None: ...


class PlatformEventBus:
    """In-process ``PlatformEvents`` that hosts drive with ``emit``."""

    def __init__(self, online: bool = True):
        self._online = online
        self._handlers: dict[str, list[EventHandler]] = {event: [] for event in PLATFORM_EVENTS}

    def is_online(self) -> bool:
        return self._online

    def add_listener(self, event: str, handler: EventHandler) -> None:
        self._handlers_for(event).append(handler)

    def remove_listener(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers_for(event)
        if handler in handlers:
            handlers.remove(handler)

    def emit(self, event: str) -> None:
        handlers = self._handlers_for(event)
        self._online = event == ONLINE_EVENT
        for handler in list(handlers):
            handler()

    def _handlers_for(self, event: str) -> list[EventHandler]:
        if event not in self._handlers:
            raise ValueError(f"Unknown platform event: {event!r}")
        return self._handlers[event]


class ConnectivityMonitor:
    def __init__(self, platform: PlatformEvents):
        self._platform = platform
        self._state = self._read_platform()
        self._flag = StateCell(self._state.is_online)
        self._started = False

    @property
    def state(self) -> ConnectivityState:
        return self._state

    @property
    def flag(self) -> ReadOnlyCell[bool]:
        return self._flag.read_only()

    def start(self) -> None:
        if self._started:
            return
        self._transition(self._read_platform())
        self._platform.add_listener(ONLINE_EVENT, self._handle_online)
        self._platform.add_listener(OFFLINE_EVENT, self._handle_offline)
        self._started = True

    def stop(self) -> None:
        if not self._started:
            return
        self._platform.remove_listener(ONLINE_EVENT, self._handle_online)
        self._platform.remove_listener(OFFLINE_EVENT, self._handle_offline)
        self._started = False

    def _read_platform(self) -> ConnectivityState:
        return ConnectivityState.ONLINE if self._platform.is_online() else ConnectivityState.OFFLINE

    def _handle_online(self) -> None:
        self._transition(ConnectivityState.ONLINE)

    def _handle_offline(self) -> None:
        self._transition(ConnectivityState.OFFLINE)

    def _transition(self, state: ConnectivityState) -> None:
        if state is not self._state:
            logger.info("Connectivity changed: %s -> %s", self._state.value, state.value)
        self._state = state
        self._flag.set(state.is_online)
