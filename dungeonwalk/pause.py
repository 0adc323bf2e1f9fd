"""Pausing and resuming the game, and the overlay shown while paused."""

from __future__ import annotations

from dataclasses import dataclass

from dungeonwalk.keyboard import Key, KeyboardInput
from dungeonwalk.states import PauseState


@dataclass
class PauseMenu:
    """The full-screen overlay shown while the game is paused."""

    text: str = "PAUSED"
    font_size: float = 60.0
    background: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.5)
    text_color: tuple[float, float, float] = (1.0, 1.0, 1.0)


def toggle_pause(current: PauseState, keys: KeyboardInput) -> PauseState:
    """Return the pause state for the next frame: Escape flips it."""
    if keys.just_pressed(Key.ESCAPE):
        return PauseState.PAUSE if current is PauseState.RUNNING else PauseState.RUNNING
    return current