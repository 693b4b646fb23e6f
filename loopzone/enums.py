"""Enumerations and colour constants shared by the game."""

from enum import Enum, IntEnum, IntFlag

KEY_TYPE_COUNT = 256
"""Number of virtual key codes tracked by the input manager."""

PIXEL_LEN = 15
"""Half extent of the runner's box used by course sensors."""

PIXEL_SIZE = 3
"""Radius of the debug marker drawn for pixel colliders."""


class KeyState(IntEnum):
    NONE = 0
    PRESS = 1
    DOWN = 2
    UP = 3


class KeyType(IntEnum):
    """Virtual key codes the game reacts to."""

    MOUSE_LEFT = 0x01
    MOUSE_RIGHT = 0x02
    UP = 0x26
    DOWN = 0x28
    LEFT = 0x25
    RIGHT = 0x27
    SPACE = 0x20
    W = ord("W")
    A = ord("A")
    S = ord("S")
    D = ord("D")
    Q = ord("Q")
    E = ord("E")


class SceneType(Enum):
    NONE = 0
    DEV = 1
    GAME = 2
    EDIT = 3


class ColliderType(IntEnum):
    BOX = 0
    SPHERE = 1
    PIXEL = 2
    LOOP = 3
    BACKGROUND = 4


class ComponentType(IntEnum):
    NONE = 0
    CAMERA = 1
    RIGIDBODY = 2
    BOX_COLLIDER = 3
    SPHERE_COLLIDER = 4
    PIXEL_COLLIDER = 5
    LOOP = 6
    BACKGROUND_COLLIDER = 7


class PixelColliderType(IntEnum):
    CEILING = 0
    GROUND = 1
    PUSH = 2
    WALL = 3
    CLIFF = 4


class CollisionLayer(IntEnum):
    OBJECT = 0
    GROUND = 1
    WALL = 2


class PixelDirection(IntFlag):
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


class CourseKind(Enum):
    NONE = 0
    LOOP = 1
    PIPE = 2


def rgb(red: int, green: int, blue: int) -> int:
    """Pack three 0-255 channels into a 0x00BBGGRR colour value."""
    for name, channel in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= channel <= 255:
            raise ValueError(f"{name} channel out of range 0-255: {channel}")
    return red | (green << 8) | (blue << 16)


WHITE = rgb(255, 255, 255)
RED = rgb(255, 0, 0)
GREEN = rgb(0, 255, 0)
BLUE = rgb(0, 0, 255)
MAGENTA = rgb(255, 0, 255)
CYAN = rgb(0, 255, 255)
BLACK = rgb(0, 0, 0)