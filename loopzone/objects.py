"""Simple game objects that are not component-based actors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

from .geometry import Stat, Vector


class ObjectType(Enum):
    NONE = 0
    PLAYER = 1
    MONSTER = 2
    PROJECTILE = 3


class GameObject(ABC):
    """An object with a type, a position and statistics."""

    def __init__(self, object_type: ObjectType = ObjectType.NONE) -> None:
        self.object_type = object_type
        self.pos = Vector(0.0, 0.0)
        self.stat = Stat()

    @abstractmethod
    def init(self) -> None:
        """Set up the object's starting state."""

    @abstractmethod
    def update(self, mouse_pos: Vector) -> None:
        """Advance the object by one frame."""


class Monster(GameObject):
    """A monster that follows the mouse's projection onto its rail segment."""

    def __init__(
        self,
        start: Vector | None = None,
        end: Vector | None = None,
    ) -> None:
        super().__init__(ObjectType.MONSTER)
        self.start = start if start is not None else Vector(300.0, 100.0)
        self.end = end if end is not None else Vector(600.0, 250.0)

    def init(self) -> None:
        self.stat.hp = 1
        self.stat.max_hp = 1
        self.stat.speed = 1000

    def update(self, mouse_pos: Vector) -> None:
        """Move to the mouse's projection on the rail; stay put if it falls outside."""
        rail = self.end - self.start
        max_length = rail.length()
        direction = rail.normalized()
        along = direction.dot(mouse_pos - self.start)
        if along < 0 or along > max_length:
            return
        self.pos = self.start + direction * along