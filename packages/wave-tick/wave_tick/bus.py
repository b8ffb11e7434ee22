"""Queued pub/sub bus. Published signals are delivered on flush()."""
from __future__ import annotations

from typing import Any, Callable

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        """Register `handler` and return a callable that removes it again."""
        self._subscribers.setdefault(signal_name, []).append(handler)

        def unsubscribe() -> None:
            self.unsubscribe(signal_name, handler)

        return unsubscribe

    def unsubscribe(self, signal_name: str, handler: Handler) -> bool:
        handlers = self._subscribers.get(signal_name)
        if not handlers or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def has_subscribers(self, signal_name: str) -> bool:
        return bool(self._subscribers.get(signal_name))

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver queued signals in publish order.

        Signals published by handlers during a flush wait for the next one.
        Returns the number of signals delivered.
        """
        batch = self._queue
        self._queue = []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
