"""Keyboard state tracked frame by frame."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto


class Key(Enum):
    """Keys the game reacts to."""

    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    KEY_A = auto()
    KEY_D = auto()
    KEY_W = auto()
    KEY_S = auto()
    SHIFT_LEFT = auto()
    CONTROL_LEFT = auto()
    SPACE = auto()
    ESCAPE = auto()


class KeyboardInput:
    """Which keys are held, and which went down during the current frame."""

    def __init__(self) -> None:
        self._held: set[Key] = set()
        self._just_pressed: set[Key] = set()

    def press(self, key: Key) -> None:
        """Record a key going down; a key already held is not pressed again."""
        if key not in self._held:
            self._held.add(key)
            self._just_pressed.add(key)

    def release(self, key: Key) -> None:
        """Record a key going up."""
        self._held.discard(key)

    def pressed(self, key: Key) -> bool:
        """True while the key is held."""
        return key in self._held

    def any_pressed(self, keys: Iterable[Key]) -> bool:
        """True if any of the keys is held."""
        return any(key in self._held for key in keys)

    def just_pressed(self, key: Key) -> bool:
        """True if the key went down during the current frame."""
        return key in self._just_pressed

    def end_frame(self) -> None:
        """Forget this frame's presses; held keys stay held."""
        self._just_pressed.clear()