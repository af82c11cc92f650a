from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class StateCell(Generic[T]):
    """A process-scoped value with one writer and any number of readers.

    Readers poll with ``get()`` or register with ``subscribe()``. Only the
    owner holding the cell writes to it, through ``set()``; components hand
    out ``ReadOnlyCell`` views to everyone else.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._listeners: list[Listener[T]] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> bool:
        """Store ``value``; returns False and notifies nobody if unchanged."""
        if value == self._value:
            return False
        self._value = value
        for listener in list(self._listeners):
            listener(value)
        return True

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def read_only(self) -> "ReadOnlyCell[T]":
        return ReadOnlyCell(self)


class ReadOnlyCell(Generic[T]):
    def __init__(self, cell: StateCell[T]):
        self._cell = cell

    def get(self) -> T:
        return self._cell.get()

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        return self._cell.subscribe(listener)
