"""World set-up: the scattered floor squares and the conversation trigger."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from dungeonwalk.components import ConversationTrigger, Vec2

NUM_SQUARES = 1000
SQUARE_SIZE = 50.0
SQUARE_COLOR = (134.0 / 255.0, 74.0 / 255.0, 43.0 / 255.0)

TRIGGER_POSITION = Vec2(150.0, 0.0)
TRIGGER_SIZE = Vec2(50.0, 50.0)
TRIGGER_COLOR = (0.0, 1.0, 0.0)


@dataclass
class Square:
    """A coloured square in the world, optionally acting as a conversation trigger."""

    position: Vec2 = field(default_factory=lambda: Vec2.ZERO)
    size: Vec2 = field(default_factory=lambda: Vec2(SQUARE_SIZE, SQUARE_SIZE))
    color: tuple[float, float, float] = SQUARE_COLOR
    trigger: ConversationTrigger | None = None


def _sample_range(rng: random.Random, low: float, high: float) -> float:
    if not low < high:
        raise ValueError(f"empty range {low}..{high}")
    return low + rng.random() * (high - low)


def spawn_random_squares(
    window_width: float, window_height: float, rng: random.Random | None = None
) -> list[Square]:
    """Scatter brown squares over an area ten times the window's size.

    Raises ValueError if the window is too small to leave a valid range.
    """
    rng = rng if rng is not None else random.Random()
    half = SQUARE_SIZE / 2.0
    x_low, x_high = -window_width / 2.0 + half, (window_width * 10.0) / 2.0 - half
    y_low, y_high = -window_height / 2.0 + half, (window_height * 10.0) / 2.0 - half
    squares = []
    for _ in range(NUM_SQUARES):
        x = _sample_range(rng, x_low, x_high)
        y = _sample_range(rng, y_low, y_high)
        squares.append(Square(position=Vec2(x, y)))
    return squares


def spawn_conversation_trigger() -> Square:
    """Create the green trigger square to the right of the player's start."""
    return Square(
        position=TRIGGER_POSITION,
        size=TRIGGER_SIZE,
        color=TRIGGER_COLOR,
        trigger=ConversationTrigger(size=TRIGGER_SIZE),
    )