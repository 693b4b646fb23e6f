"""Keyboard and mouse state tracking."""

from __future__ import annotations

from collections.abc import Iterable

from .enums import KEY_TYPE_COUNT, KeyState
from .geometry import Vector


def _next_state(state: KeyState, held: bool) -> KeyState:
    was_held = state in (KeyState.PRESS, KeyState.DOWN)
    if held:
        return KeyState.PRESS if was_held else KeyState.DOWN
    return KeyState.UP if was_held else KeyState.NONE


def _check_key(key: int) -> int:
    code = int(key)
    if not 0 <= code < KEY_TYPE_COUNT:
        raise ValueError(f"key code out of range 0-{KEY_TYPE_COUNT - 1}: {code}")
    return code


class InputManager:
    """Tracks each key's state from frame to frame, and the mouse position.

    A key goes DOWN on the first frame it is held, PRESS while it stays held,
    UP on the frame it is released and NONE afterwards.
    """

    def __init__(self) -> None:
        self._states = [KeyState.NONE] * KEY_TYPE_COUNT
        self.mouse_pos = Vector(0.0, 0.0)

    def update(self, pressed_keys: Iterable[int], mouse_pos: Vector) -> None:
        """Advance one frame given the keys currently held and the mouse position."""
        held = {_check_key(key) for key in pressed_keys}
        self._states = [
            _next_state(state, code in held) for code, state in enumerate(self._states)
        ]
        self.mouse_pos = mouse_pos

    def state(self, key: int) -> KeyState:
        return self._states[_check_key(key)]

    def button_press(self, key: int) -> bool:
        """True while the key is held after its first frame."""
        return self.state(key) is KeyState.PRESS

    def button_down(self, key: int) -> bool:
        """True on the first frame the key is held."""
        return self.state(key) is KeyState.DOWN

    def button_up(self, key: int) -> bool:
        """True on the frame the key is released."""
        return self.state(key) is KeyState.UP

    def button_none(self, key: int) -> bool:
        return self.state(key) is KeyState.NONE