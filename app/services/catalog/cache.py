"""Replay cache - one shared async computation, its result kept forever."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from loguru import logger

T = TypeVar("T")


class ReplayCache(Generic[T]):
    """Single-assignment memoized future.

    The first ``get()`` or ``subscribe()`` starts ``factory``; every other
    caller, concurrent or later, shares that one run. The result is never
    invalidated. Factory errors are not caught here and are re-raised to every
    ``get()`` caller, so factories that must degrade should catch themselves.
    """

    def __init__(self, factory: Callable[[], Awaitable[T]], initial: T, name: str = "cache"):
        self._factory = factory
        self._value = initial
        self._has_value = False
        self._task: asyncio.Task | None = None
        self._subscribers: list[Callable[[T], None]] = []
        self._name = name

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> T:
        """Last produced value, or the initial one until the factory finishes."""
        return self._value

    def start(self) -> asyncio.Task:
        """Start the shared run unless it already started. Needs a running loop."""
        # no await between the check and the assignment
        if self._task is None:
            logger.debug("{}: starting shared fetch", self._name)
            self._task = asyncio.get_running_loop().create_task(self._run())
        return self._task

    async def get(self) -> T:
        if self._has_value:
            return self._value
        # shield: a cancelled waiter must not cancel the fetch others wait on
        return await asyncio.shield(self.start())

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Call ``callback`` with the current value now and once more on resolution.

        Returns a function that stops further notifications.
        """
        if self._has_value:
            callback(self._value)
            return lambda: None

        # raises before any state changes when there is no running loop
        self.start()
        callback(self._value)
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def _run(self) -> T:
        value = await self._factory()
        self._value = value
        self._has_value = True
        logger.debug("{}: resolved, notifying {} subscribers", self._name, len(self._subscribers))

        subscribers, self._subscribers = self._subscribers, []
        for callback in subscribers:
            try:
                callback(value)
            except Exception:
                logger.exception("{}: subscriber {!r} failed", self._name, callback)
        return value
