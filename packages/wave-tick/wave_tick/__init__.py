"""wave-tick - Virtual-time scheduling and signalling for Wave Runner."""
from __future__ import annotations

from wave_tick.bus import SignalBus
from wave_tick.clock import Clock
from wave_tick.scheduler import Handle, Periodic, Scheduler, Timer
from wave_tick.types import FireContext

__all__ = [
    "Clock",
    "Scheduler",
    "Handle",
    "Periodic",
    "Timer",
    "FireContext",
    "SignalBus",
]
