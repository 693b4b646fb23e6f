"""Actors and the components attached to them."""

from __future__ import annotations

from .enums import ComponentType
from .geometry import Vector


class Component:
    """A piece of behaviour owned by an :class:`Actor`."""

    def __init__(
        self,
        component_type: ComponentType = ComponentType.NONE,
        owner: Actor | None = None,
    ) -> None:
        self.component_type = component_type
        self.owner = owner
        self.playing = False
        self.tick_count = 0

    def begin_play(self) -> None:
        """Mark the component as started; called once when the owning actor starts."""
        self.playing = True

    def tick(self) -> None:
        """Count one frame; called every frame by the owning actor."""
        self.tick_count += 1


class Actor:
    """A positioned game entity that drives its components."""

    def __init__(self, pos: Vector | None = None) -> None:
        self.pos = pos if pos is not None else Vector(0.0, 0.0)
        self.components: list[Component] = []
        self.overlaps: set[tuple[object, object]] = set()

    def begin_play(self) -> None:
        for component in self.components:
            component.begin_play()

    def tick(self) -> None:
        for component in self.components:
            component.tick()

    def add_component(self, component: Component | None) -> None:
        """Attach ``component`` and make this actor its owner; ``None`` is ignored."""
        if component is None:
            return
        component.owner = self
        self.components.append(component)

    def remove_component(self, component: Component) -> None:
        """Detach the first occurrence of ``component``; unknown components are ignored."""
        try:
            self.components.remove(component)
        except ValueError:
            pass

    def find_component(self, component_type: ComponentType) -> Component | None:
        """The first attached component of the given type, or ``None``."""
        return next(
            (c for c in self.components if c.component_type == component_type),
            None,
        )

    def on_component_begin_overlap(self, collider, other) -> None:
        """Record that one of this actor's colliders overlaps ``other``."""
        self.overlaps.add((collider, other))

    def on_component_end_overlap(self, collider, other) -> None:
        """Forget the overlap between one of this actor's colliders and ``other``."""
        self.overlaps.discard((collider, other))