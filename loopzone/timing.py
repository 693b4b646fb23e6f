"""Frame timing: delta time and frames per second."""

from __future__ import annotations

import time
from typing import Callable


class TimeManager:
    """Measures the time between frames and the frame rate over each second."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._prev = 0.0
        self.delta_time = 0.0
        self.fps = 0
        self._frame_count = 0
        self._frame_time = 0.0

    def start(self) -> None:
        """Take the reference time that the first frame is measured from."""
        self._prev = self._clock()

    def update(self) -> None:
        """Advance one frame, updating the delta time and, each second, the FPS."""
        now = self._clock()
        self.delta_time = now - self._prev
        self._prev = now

        self._frame_count += 1
        self._frame_time += self.delta_time

        if self._frame_time >= 1.0:
            self.fps = int(self._frame_count / self._frame_time)
            self._frame_time = 0.0
            self._frame_count = 0