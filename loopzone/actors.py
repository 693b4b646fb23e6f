"""Actors drawn from a flipbook animation or from a single sprite."""

from __future__ import annotations

from .actor import Actor
from .geometry import Rect, Vector
from .resources import Flipbook, Sprite
from .timing import TimeManager


def _screen_corner(
    pos: Vector, size: Vector, camera_pos: Vector, window_size: Vector
) -> tuple[int, int]:
    """Top-left corner on screen of an image of ``size`` centred on ``pos``."""
    x = int(pos.x) - size.x / 2 - int(camera_pos.x) + int(window_size.x) // 2
    y = int(pos.y) - size.y / 2 - int(camera_pos.y) + int(window_size.y) // 2
    return int(x), int(y)


class FlipbookActor(Actor):
    """An actor that plays a :class:`Flipbook` frame by frame."""

    def __init__(
        self,
        pos: Vector | None = None,
        time_manager: TimeManager | None = None,
    ) -> None:
        super().__init__(pos)
        self.time_manager = time_manager if time_manager is not None else TimeManager()
        self.flipbook: Flipbook | None = None
        self.sum_time = 0.0
        self.idx = 0

    def tick(self) -> None:
        """Advance the animation by the frame's delta time.

        A non-looping flipbook stays on its last frame once reached.
        """
        super().tick()
        if self.flipbook is None:
            return

        info = self.flipbook.info
        if not info.loop and self.idx == info.end:
            return

        self.sum_time += self.time_manager.delta_time

        frame_count = info.end - info.start + 1
        frame_time = info.duration / frame_count

        if self.sum_time >= frame_time:
            self.sum_time = 0.0
            self.idx = (self.idx + 1) % frame_count

    def set_flipbook(self, flipbook: Flipbook | None) -> None:
        """Switch to ``flipbook`` and restart it; setting the current one again does nothing."""
        if flipbook is not None and self.flipbook is flipbook:
            return
        self.flipbook = flipbook
        self.reset()

    def reset(self) -> None:
        """Restart the animation at its first frame."""
        self.sum_time = 0.0
        self.idx = self.flipbook.info.start if self.flipbook is not None else 0

    def source_rect(self) -> Rect | None:
        """The area of the texture holding the current frame, or ``None`` without a flipbook."""
        if self.flipbook is None:
            return None
        info = self.flipbook.info
        width = int(info.size.x)
        height = int(info.size.y)
        left = (info.start + self.idx) * width
        top = info.line * height
        return Rect(left, top, left + width, top + height)

    def screen_position(
        self, camera_pos: Vector, window_size: Vector
    ) -> tuple[int, int] | None:
        """Where the current frame's top-left corner lands on screen, or ``None``."""
        if self.flipbook is None:
            return None
        return _screen_corner(self.pos, self.flipbook.info.size, camera_pos, window_size)


class SpriteActor(Actor):
    """An actor that shows a single :class:`Sprite` centred on its position."""

    def __init__(self, pos: Vector | None = None, sprite: Sprite | None = None) -> None:
        super().__init__(pos)
        self.sprite = sprite

    def screen_position(
        self, camera_pos: Vector, window_size: Vector
    ) -> tuple[int, int] | None:
        """Where the sprite's top-left corner lands on screen, or ``None`` without a sprite."""
        if self.sprite is None:
            return None
        return _screen_corner(self.pos, self.sprite.size, camera_pos, window_size)