from __future__ import annotations

import asyncio
import logging

from safety_client.state import ReadOnlyCell, StateCell

logger = logging.getLogger(__name__)


class Navigator:
    """Publishes the route the presentation layer should show.

    A navigation here is a hard one: the route is replaced, not pushed.
    Once bound to an event loop, navigations requested from other threads
    are applied on that loop, so route subscribers always run there.
    """

    def __init__(self, initial_route: str = "/"):
        self._route = StateCell(initial_route)
        self._navigation_count = 0
        self._loop: asyncio.AbstractEventLoop | None = None

    @property
    def current_route(self) -> ReadOnlyCell[str]:
        return self._route.read_only()

    @property
    def navigation_count(self) -> int:
        return self._navigation_count

    def bind_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop

    def navigate(self, route: str) -> None:
        loop = self._loop
        if loop is not None and not loop.is_closed() and not _is_running_on(loop):
            loop.call_soon_threadsafe(self._apply, route)
            return
        self._apply(route)

    def _apply(self, route: str) -> None:
        logger.info("Navigating to %s", route)
        self._navigation_count += 1
        self._route.set(route)


def _is_running_on(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False
