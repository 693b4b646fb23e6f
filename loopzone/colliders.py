"""Collision shapes attached to actors and the pairwise overlap tests between them."""

from __future__ import annotations

from typing import Protocol

from .actor import Actor, Component
from .enums import (
    ColliderType,
    CollisionLayer,
    ComponentType,
    PixelColliderType,
    PixelDirection,
)
from .geometry import Rect, Vector

_DIRECTION_VECTORS = (
    (PixelDirection.LEFT, Vector(-1.0, 0.0)),
    (PixelDirection.RIGHT, Vector(1.0, 0.0)),
    (PixelDirection.BOTTOM, Vector(0.0, 1.0)),
    (PixelDirection.TOP, Vector(0.0, -1.0)),
)


class _ColliderRegistry(Protocol):
    def add_collider(self, collider: Collider) -> None: ...


def _owner_pos(collider: Collider) -> Vector:
    if collider.owner is None:
        raise RuntimeError(f"{type(collider).__name__} has no owner")
    return collider.owner.pos


class Collider(Component):
    """Base collider: a collision layer, a mask of accepted layers and current contacts."""

    def __init__(
        self,
        collider_type: ColliderType,
        component_type: ComponentType = ComponentType.NONE,
        owner: Actor | None = None,
    ) -> None:
        super().__init__(component_type, owner)
        self.collider_type = collider_type
        self.show_debug = True
        self.collision_layer = CollisionLayer.OBJECT
        self.collision_flag = 0
        self.collision_map: set[Collider] = set()

    def check_collision(self, other: Collider) -> bool:
        """True when ``other``'s layer is among the layers this collider accepts."""
        return bool(self.collision_flag & (1 << int(other.collision_layer)))

    def add_collision_layer(self, layer: CollisionLayer) -> None:
        self.collision_flag |= 1 << int(layer)

    def remove_collision_layer(self, layer: CollisionLayer) -> None:
        self.collision_flag &= ~(1 << int(layer))

    def reset_collision_flag(self) -> None:
        self.collision_flag = 0


class BoxCollider(Collider):
    """An axis-aligned box centred on its owner."""

    def __init__(self, size: Vector | None = None, owner: Actor | None = None) -> None:
        super().__init__(ColliderType.BOX, ComponentType.BOX_COLLIDER, owner)
        self.size = size if size is not None else Vector(0.0, 0.0)

    def rect(self) -> Rect:
        """The integer rectangle the box covers around its owner's position."""
        return Rect.from_center(_owner_pos(self), self.size.x / 2, self.size.y / 2)

    def check_collision(self, other: Collider) -> bool:
        if other.collider_type is ColliderType.SPHERE:
            return sphere_to_box(other, self)
        if other.collider_type is ColliderType.BOX:
            return box_to_box(self, other)
        return False


class SphereCollider(Collider):
    """A circle centred on its owner."""

    def __init__(self, radius: float = 0.0, owner: Actor | None = None) -> None:
        super().__init__(ColliderType.SPHERE, ComponentType.SPHERE_COLLIDER, owner)
        self.radius = radius

    def check_collision(self, other: Collider) -> bool:
        if other.collider_type is ColliderType.BOX:
            return sphere_to_box(self, other)
        if other.collider_type is ColliderType.SPHERE:
            return sphere_to_sphere(self, other)
        return False


class PixelCollider(Collider):
    """A single probe point offset from its owner in one or more directions.

    ``direction`` is a combination of :class:`PixelDirection` bits; the offsets
    of all set bits are summed and scaled component-wise by ``dist``.
    """

    def __init__(
        self,
        owner: Actor,
        pixel_type: PixelColliderType,
        direction: int,
        dist: Vector,
        manager: _ColliderRegistry | None = None,
    ) -> None:
        super().__init__(ColliderType.PIXEL, ComponentType.PIXEL_COLLIDER, owner)
        self.pixel_type = pixel_type
        self.direction = int(direction)
        self.dist = dist
        self.is_collided = False
        self.pos = Vector(0.0, 0.0)
        owner.add_component(self)
        if manager is not None:
            manager.add_collider(self)

        self.dir_vector = Vector(0.0, 0.0)
        for bit, offset in _DIRECTION_VECTORS:
            if self.direction & bit:
                self.dir_vector = self.dir_vector + offset

    def tick(self) -> None:
        super().tick()
        self.update_position()

    def update_position(self) -> None:
        """Place the probe at the owner's position plus the scaled direction offset."""
        base = _owner_pos(self)
        self.pos = Vector(
            base.x + self.dir_vector.x * self.dist.x,
            base.y + self.dir_vector.y * self.dist.y,
        )

    def check_collision(self, other: Collider) -> bool:
        return False


class AccelObj(BoxCollider):
    """A box that pushes whatever touches it along ``direction``."""

    def __init__(
        self,
        direction: Vector,
        size: Vector | None = None,
        owner: Actor | None = None,
    ) -> None:
        super().__init__(size, owner)
        self.direction = direction


def box_to_box(first: BoxCollider, second: BoxCollider) -> bool:
    return first.rect().intersects(second.rect())


def sphere_to_sphere(first: SphereCollider, second: SphereCollider) -> bool:
    """True when the circles touch or overlap."""
    distance = (_owner_pos(second) - _owner_pos(first)).length()
    return distance <= first.radius + second.radius


def sphere_to_box(sphere: SphereCollider, box: BoxCollider) -> bool:
    """True when the circle touches or overlaps the box's rectangle."""
    center = _owner_pos(sphere)
    half_x = box.size.x / 2
    half_y = box.size.y / 2
    box_center = _owner_pos(box)
    left, right = box_center.x - half_x, box_center.x + half_x
    top, bottom = box_center.y - half_y, box_center.y + half_y
    closest = Vector(min(max(center.x, left), right), min(max(center.y, top), bottom))
    return (center - closest).length_squared() <= sphere.radius * sphere.radius