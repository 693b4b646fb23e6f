"""The camera position and the component that makes it follow an actor."""

from __future__ import annotations

from dataclasses import dataclass, field

from .actor import Actor, Component
from .enums import ComponentType
from .geometry import Vector

WORLD_WIDTH = 5000.0
WORLD_HEIGHT = 4000.0
HALF_VIEW_WIDTH = 640.0
HALF_VIEW_HEIGHT = 360.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass
class Camera:
    """The world position at the centre of the view."""

    pos: Vector = field(default_factory=Vector)


class CameraComponent(Component):
    """Keeps the camera centred on its owner, without showing past the world's edges."""

    def __init__(self, owner: Actor, camera: Camera) -> None:
        super().__init__(ComponentType.CAMERA)
        self.camera = camera
        owner.add_component(self)

    def tick(self) -> None:
        if self.owner is None:
            return
        pos = self.owner.pos
        self.camera.pos = Vector(
            _clamp(pos.x, HALF_VIEW_WIDTH, WORLD_WIDTH - HALF_VIEW_WIDTH),
            _clamp(pos.y, HALF_VIEW_HEIGHT, WORLD_HEIGHT - HALF_VIEW_HEIGHT),
        )