"""Shared types for the wave scheduler."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class FireContext:
    """Passed to every scheduler callback."""

    name: str
    now_ms: float
    due_ms: float
    fire_count: int


Callback = Callable[[FireContext], None]
