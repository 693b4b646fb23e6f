"""Pairwise collision detection with begin and end overlap notifications."""

from __future__ import annotations

from itertools import combinations

from .colliders import Collider


class CollisionManager:
    """Checks every pair of registered colliders each frame.

    While two colliders of different owners overlap, both owners receive a
    begin-overlap call every update; when a recorded contact ends, both
    receive an end-overlap call and the contact is forgotten.
    """

    def __init__(self) -> None:
        self.colliders: list[Collider] = []

    def add_collider(self, collider: Collider) -> None:
        self.colliders.append(collider)

    def remove_collider(self, collider: Collider) -> None:
        """Unregister ``collider``; raises ValueError if it was never added."""
        if collider not in self.colliders:
            raise ValueError("collider is not registered")
        self.colliders = [c for c in self.colliders if c is not collider]

    def update(self) -> None:
        for src, dst in combinations(self.colliders, 2):
            if self.same_owner(src, dst):
                continue
            if src.check_collision(dst):
                src.collision_map.add(dst)
                dst.collision_map.add(src)
                src.owner.on_component_begin_overlap(src, dst)
                dst.owner.on_component_begin_overlap(dst, src)
            elif dst in src.collision_map:
                src.owner.on_component_end_overlap(src, dst)
                dst.owner.on_component_end_overlap(dst, src)
                src.collision_map.discard(dst)
                dst.collision_map.discard(src)

    def same_owner(self, first: Collider, second: Collider) -> bool:
        return first.owner is second.owner