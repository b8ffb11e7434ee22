"""Tests for SignalBus queued delivery."""
from __future__ import annotations

from typing import Any

from wave_tick import SignalBus


class TestDelivery:
    def test_publish_is_deferred_until_flush(self) -> None:
        bus = SignalBus()
        got: list[tuple[str, dict[str, Any]]] = []
        bus.subscribe("hit", lambda name, data: got.append((name, data)))
        bus.publish("hit", points=100)
        assert got == []
        assert bus.pending == 1
        assert bus.flush() == 1
        assert got == [("hit", {"points": 100})]

    def test_publish_order_preserved(self) -> None:
        bus = SignalBus()
        got: list[str] = []
        bus.subscribe("a", lambda name, data: got.append(name))
        bus.subscribe("b", lambda name, data: got.append(name))
        bus.publish("b")
        bus.publish("a")
        bus.publish("b")
        bus.flush()
        assert got == ["b", "a", "b"]

    def test_signal_without_subscribers_is_dropped(self) -> None:
        bus = SignalBus()
        bus.publish("nobody")
        assert bus.flush() == 1
        assert bus.pending == 0

    def test_publish_during_flush_waits(self) -> None:
        bus = SignalBus()
        got: list[str] = []

        def chain(name: str, data: dict[str, Any]) -> None:
            got.append(name)
            bus.publish("second")

        bus.subscribe("first", chain)
        bus.subscribe("second", lambda name, data: got.append(name))
        bus.publish("first")
        bus.flush()
        assert got == ["first"]
        bus.flush()
        assert got == ["first", "second"]


class TestSubscriptions:
    def test_unsubscribe_callable(self) -> None:
        bus = SignalBus()
        got: list[int] = []
        off = bus.subscribe("frame", lambda name, data: got.append(1))
        off()
        bus.publish("frame")
        bus.flush()
        assert got == []
        assert not bus.has_subscribers("frame")

    def test_unsubscribe_unknown_handler(self) -> None:
        bus = SignalBus()
        assert bus.unsubscribe("frame", lambda name, data: None) is False

    def test_clear_drops_queue(self) -> None:
        bus = SignalBus()
        got: list[int] = []
        bus.subscribe("x", lambda name, data: got.append(1))
        bus.publish("x")
        bus.clear()
        bus.flush()
        assert got == []
