"""Virtual millisecond clock driven by explicit advances."""


class Clock:
    def __init__(self, start_ms: float = 0.0) -> None:
        if start_ms < 0:
            raise ValueError("start_ms must not be negative")
        self._now_ms = float(start_ms)
        self._advances = 0

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def advances(self) -> int:
        return self._advances

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError("cannot advance the clock by a negative amount")
        self._now_ms += ms
        self._advances += 1
        return self._now_ms

    def jump_to(self, when_ms: float) -> None:
        """Move to an absolute time inside the current advance window."""
        if when_ms < self._now_ms:
            raise ValueError(f"cannot move clock back from {self._now_ms} to {when_ms}")
        self._now_ms = when_ms

    def reset(self, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)
        self._advances = 0
