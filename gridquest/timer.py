"""Frame timer measuring the time between ticks."""

from __future__ import annotations


class Timer:
    """Tracks milliseconds between successive ticks."""

    def __init__(self) -> None:
        self.current_time = 0
        self.last_time = 0
        self.delta_seconds = 0.0

    def tick(self, now_ms: int) -> float:
        """Record a tick at ``now_ms`` and return the seconds since the previous one."""
        self.current_time = now_ms
        self.delta_seconds = (self.current_time - self.last_time) / 1000.0
        self.last_time = self.current_time
        return self.delta_seconds