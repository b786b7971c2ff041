"""Reactive references.

A `Ref` is a single observable cell: consumers read `.value`, producers
assign it, and subscribers are told about every change.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[Any, Any], None]


class Ref(Generic[T]):
    """Observable value holder."""

    __slots__ = ("_value", "_subscribers")

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new: T) -> None:
        old = self._value
        if new is old:
            return
        self._value = new
        for callback in list(self._subscribers):
            callback(new, old)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register `callback(new, old)`; returns a function that removes it."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Ref({self._value!r})"


def to_ref(value: T | Ref[T]) -> Ref[T]:
    if isinstance(value, Ref):
        return value
    return Ref(value)


def unref(value: T | Ref[T]) -> T:
    if isinstance(value, Ref):
        return value.value
    return value
