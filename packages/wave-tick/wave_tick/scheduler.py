"""Named periodic and one-shot activities over a virtual millisecond clock."""
from __future__ import annotations

from dataclasses import dataclass

from wave_tick.clock import Clock
from wave_tick.types import Callback, FireContext


@dataclass
class Periodic:
    """Recurring activity. Fires every `interval_ms` until cancelled."""

    name: str
    interval_ms: float
    due_ms: float
    callback: Callback
    seq: int
    fire_count: int = 0


@dataclass
class Timer:
    """One-shot activity. Fires once at `due_ms`, then is dropped."""

    name: str
    due_ms: float
    callback: Callback
    seq: int
    fire_count: int = 0


_Entry = Periodic | Timer


class Handle:
    """Cancellation token for one arming of a named activity.

    Re-arming the same name invalidates older handles, so cancelling a
    stale handle never touches the newer registration.
    """

    __slots__ = ("_scheduler", "_name", "_seq")

    def __init__(self, scheduler: Scheduler, name: str, seq: int) -> None:
        self._scheduler = scheduler
        self._name = name
        self._seq = seq

    @property
    def name(self) -> str:
        return self._name

    @property
    def active(self) -> bool:
        entry = self._scheduler._entries.get(self._name)
        return entry is not None and entry.seq == self._seq

    def cancel(self) -> bool:
        if not self.active:
            return False
        return self._scheduler.cancel(self._name)

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return f"Handle({self._name!r}, {state})"


class Scheduler:
    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock if clock is not None else Clock()
        self._entries: dict[str, _Entry] = {}
        self._seq = 0

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def now_ms(self) -> float:
        return self._clock.now_ms

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    # --- Arming ---

    def every(self, name: str, interval_ms: float, callback: Callback) -> Handle:
        """Arm a periodic activity, replacing any activity with the same name.

        The first fire happens one full interval from now.
        """
        if interval_ms <= 0:
            raise ValueError(f"interval for {name!r} must be positive, got {interval_ms}")
        seq = self._next_seq()
        self._entries[name] = Periodic(
            name=name,
            interval_ms=float(interval_ms),
            due_ms=self._clock.now_ms + interval_ms,
            callback=callback,
            seq=seq,
        )
        return Handle(self, name, seq)

    def after(self, name: str, delay_ms: float, callback: Callback) -> Handle:
        """Arm a one-shot activity, replacing any activity with the same name."""
        if delay_ms < 0:
            raise ValueError(f"delay for {name!r} must not be negative, got {delay_ms}")
        seq = self._next_seq()
        self._entries[name] = Timer(
            name=name,
            due_ms=self._clock.now_ms + delay_ms,
            callback=callback,
            seq=seq,
        )
        return Handle(self, name, seq)

    def cancel(self, name: str) -> bool:
        return self._entries.pop(name, None) is not None

    def cancel_all(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    # --- Queries ---

    def is_armed(self, name: str) -> bool:
        return name in self._entries

    def remaining(self, name: str) -> float | None:
        """Milliseconds until `name` next fires, or None when not armed."""
        entry = self._entries.get(name)
        if entry is None:
            return None
        return max(0.0, entry.due_ms - self._clock.now_ms)

    def interval(self, name: str) -> float | None:
        entry = self._entries.get(name)
        if isinstance(entry, Periodic):
            return entry.interval_ms
        return None

    def names(self) -> list[str]:
        return sorted(self._entries)

    # --- Driving ---

    def _next_due(self, limit_ms: float) -> _Entry | None:
        best: _Entry | None = None
        for entry in self._entries.values():
            if entry.due_ms > limit_ms:
                continue
            if best is None or (entry.due_ms, entry.seq) < (best.due_ms, best.seq):
                best = entry
        return best

    def advance(self, ms: float) -> int:
        """Move time forward by `ms`, firing due activities in deadline order.

        Each callback runs to completion before the next due activity is
        chosen, so arming and cancelling from inside a callback takes
        effect for the rest of the window. Returns the number of fires.
        """
        if ms < 0:
            raise ValueError("cannot advance by a negative amount")
        limit = self._clock.now_ms + ms
        fired = 0
        while True:
            entry = self._next_due(limit)
            if entry is None:
                break
            self._clock.jump_to(entry.due_ms)
            entry.fire_count += 1
            ctx = FireContext(
                name=entry.name,
                now_ms=self._clock.now_ms,
                due_ms=entry.due_ms,
                fire_count=entry.fire_count,
            )
            if isinstance(entry, Periodic):
                entry.due_ms += entry.interval_ms
            else:
                del self._entries[entry.name]
            entry.callback(ctx)
            fired += 1
        self._clock.advance(limit - self._clock.now_ms)
        return fired
