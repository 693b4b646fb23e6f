"""A queue of named callbacks that is rebuilt whenever the scene changes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable

from .actor import Actor
from .enums import SceneType


@dataclass
class Event:
    """A named callback waiting to run."""

    name: str
    func: Callable[[], None]


class EventManager:
    """Holds queued callbacks and runs them in registration order."""

    def __init__(self, event_actor: Actor | None = None) -> None:
        self.scene_type = SceneType.NONE
        self.event_actor = event_actor
        self._queue: deque[Event] = deque()
        self.set_callbacks(SceneType.DEV)

    @property
    def pending(self) -> list[Event]:
        """The queued events, oldest first."""
        return list(self._queue)

    def update(self, scene_type: SceneType) -> None:
        """Rebuild the callbacks for ``scene_type`` and run whatever is queued."""
        self.scene_type = scene_type
        self.set_callbacks(scene_type)
        self.execute()

    def clear(self) -> None:
        """Drop every queued event and forget the event actor."""
        self.remove_events()
        self.event_actor = None

    def register_key_callback(self, key: str, callback: Callable[[], None]) -> None:
        self._queue.append(Event(key, callback))

    def execute(self) -> None:
        """Run and dequeue events in order; an event whose callback raises stays queued."""
        while self._queue:
            event = self._queue[0]
            event.func()
            self._queue.popleft()

    def set_callbacks(self, scene_type: SceneType) -> None:
        """Reset the queue for ``scene_type``; no scene registers callbacks of its own."""
        self.remove_events()

    def remove_events(self) -> None:
        self._queue.clear()