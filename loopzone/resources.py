"""Textures, sprites and flipbooks, and the manager that caches them by key."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

from PIL import Image

from .enums import MAGENTA, rgb
from .geometry import Vector

StrPath = Union[str, PathLike]

_ROTATION_PI = 3.14159265359


class Texture:
    """An RGB bitmap with a colour that is treated as transparent when drawn."""

    def __init__(self, image: Image.Image, transparent: int = MAGENTA) -> None:
        self.image = image if image.mode == "RGB" else image.convert("RGB")
        width, height = self.image.size
        self.size = Vector(float(width), float(height))
        self.transparent = transparent

    @classmethod
    def load(cls, path: StrPath) -> Texture:
        """Load a bitmap from ``path``."""
        with Image.open(path) as source:
            return cls(source.convert("RGB"))

    @classmethod
    def load_rotated(cls, path: StrPath, angle: float) -> Texture:
        """Load a bitmap from ``path`` turned clockwise by ``angle`` degrees.

        The result is sized to the bounding box of the turned image, with the
        image centred on it and uncovered areas left black.
        """
        with Image.open(path) as source:
            image = source.convert("RGB")

        width, height = image.size
        radians = angle * (_ROTATION_PI / 180.0)
        cos_angle = math.cos(radians)
        sin_angle = math.sin(radians)
        new_width = int(abs(width * cos_angle) + abs(height * sin_angle))
        new_height = int(abs(width * sin_angle) + abs(height * cos_angle))

        rotated = image.rotate(-angle, expand=True)
        canvas = Image.new("RGB", (new_width, new_height))
        canvas.paste(
            rotated,
            ((new_width - rotated.width) // 2, (new_height - rotated.height) // 2),
        )
        return cls(canvas)

    def pixel(self, x: int, y: int) -> int:
        """The colour at ``(x, y)`` packed as 0x00BBGGRR."""
        width, height = self.image.size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"pixel ({x}, {y}) outside texture of size {width}x{height}")
        red, green, blue = self.image.getpixel((x, y))
        return rgb(red, green, blue)


@dataclass
class Sprite:
    """A rectangular region of a texture."""

    texture: Texture
    x: int
    y: int
    cx: int
    cy: int

    @property
    def pos(self) -> Vector:
        return Vector(float(self.x), float(self.y))

    @property
    def size(self) -> Vector:
        return Vector(float(self.cx), float(self.cy))

    @property
    def transparent(self) -> int:
        return self.texture.transparent


@dataclass
class FlipbookInfo:
    """Frames laid out left to right on one row of a texture."""

    texture: Texture | None = None
    name: str = ""
    size: Vector = field(default_factory=Vector)
    start: int = 0
    end: int = 0
    line: int = 0
    duration: float = 1.0
    loop: bool = True


@dataclass
class Flipbook:
    """A frame animation described by its :class:`FlipbookInfo`."""

    info: FlipbookInfo = field(default_factory=FlipbookInfo)


class ResourceManager:
    """Loads resources once and hands out the cached object for each key."""

    def __init__(self, resource_path: StrPath = ".") -> None:
        self.resource_path = Path(resource_path)
        self._textures: dict[str, Texture] = {}
        self._sprites: dict[str, Sprite] = {}
        self._flipbooks: dict[str, Flipbook] = {}

    def clear(self) -> None:
        """Forget every loaded texture."""
        self._textures.clear()

    def load_texture(
        self,
        key: str,
        path: StrPath,
        transparent: int = MAGENTA,
        angle: float = 0.0,
    ) -> Texture:
        """Load and cache a texture; a key already loaded returns its texture unchanged.

        Relative paths are resolved against :attr:`resource_path`.
        """
        cached = self._textures.get(key)
        if cached is not None:
            return cached

        full_path = Path(path)
        if not full_path.is_absolute():
            full_path = self.resource_path / full_path

        if angle == 0:
            texture = Texture.load(full_path)
        else:
            texture = Texture.load_rotated(full_path, angle)
        texture.transparent = transparent

        self._textures[key] = texture
        return texture

    def texture(self, key: str) -> Texture | None:
        return self._textures.get(key)

    def create_sprite(
        self,
        key: str,
        texture: Texture,
        x: int = 0,
        y: int = 0,
        cx: int = 0,
        cy: int = 0,
    ) -> Sprite:
        """Create and cache a sprite; a zero width or height spans the whole texture."""
        cached = self._sprites.get(key)
        if cached is not None:
            return cached

        if cx == 0:
            cx = int(texture.size.x)
        if cy == 0:
            cy = int(texture.size.y)

        sprite = Sprite(texture, x, y, cx, cy)
        self._sprites[key] = sprite
        return sprite

    def sprite(self, key: str) -> Sprite | None:
        return self._sprites.get(key)

    def create_flipbook(self, key: str) -> Flipbook:
        """Create and cache an empty flipbook; a known key returns the existing one."""
        cached = self._flipbooks.get(key)
        if cached is not None:
            return cached
        flipbook = Flipbook()
        self._flipbooks[key] = flipbook
        return flipbook

    def flipbook(self, key: str) -> Flipbook | None:
        return self._flipbooks.get(key)

    def load_texture_sprite(self, path: StrPath) -> bool:
        """Load ``path`` as a texture with no transparent colour and a full-size sprite.

        Both are cached under the path itself.
        """
        key = str(path)
        texture = self.load_texture(key, path, 0, 0)
        sprite = self.create_sprite(key, texture)
        return sprite is not None