"""The player entity and the systems that move it."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonwalk.components import MovementSpeed, Vec2
from dungeonwalk.keyboard import Key, KeyboardInput

PLAYER_MOVE_SPEED = 8.0
PLAYER_SPRINT_MOVE_SPEED = 15.0
PLAYER_SLOW_MOVE_SPEED = 4.0
MAX_FRAME_PER_SECONDS = 60.0

PLAYER_SIZE = Vec2(50.0, 50.0)
PLAYER_COLOR = (1.0, 0.0, 0.0)

_DIRECTION_KEYS = (
    ((Key.ARROW_LEFT, Key.KEY_A), Vec2(-1.0, 0.0)),
    ((Key.ARROW_RIGHT, Key.KEY_D), Vec2(1.0, 0.0)),
    ((Key.ARROW_UP, Key.KEY_W), Vec2(0.0, 1.0)),
    ((Key.ARROW_DOWN, Key.KEY_S), Vec2(0.0, -1.0)),
)


@dataclass
class Player:
    """The player's square: where it is, how big, its colour and its speed."""

    position: Vec2 = field(default_factory=lambda: Vec2.ZERO)
    size: Vec2 = PLAYER_SIZE
    color: tuple[float, float, float] = PLAYER_COLOR
    movement_speed: MovementSpeed = field(default_factory=MovementSpeed)


def spawn_player() -> Player:
    """Create the player as a red 50x50 square at the origin, not yet moving."""
    return Player()


def movement_direction(keys: KeyboardInput) -> Vec2:
    """Sum of the directions whose arrow or WASD key is held (not normalized)."""
    direction = Vec2.ZERO
    for bound_keys, step in _DIRECTION_KEYS:
        if keys.any_pressed(bound_keys):
            direction = direction + step
    return direction


def player_movement(player: Player, keys: KeyboardInput) -> None:
    """Move the player one frame along the held direction at its current speed."""
    direction = movement_direction(keys)
    if direction != Vec2.ZERO:
        player.position = player.position + direction.normalize() * player.movement_speed.speed


def update_movement_speed(player: Player, keys: KeyboardInput, delta_seconds: float) -> None:
    """Set the per-frame speed: left Shift sprints, left Control walks slowly."""
    if keys.pressed(Key.SHIFT_LEFT):
        movement_speed = PLAYER_SPRINT_MOVE_SPEED
    elif keys.pressed(Key.CONTROL_LEFT):
        movement_speed = PLAYER_SLOW_MOVE_SPEED
    else:
        movement_speed = PLAYER_MOVE_SPEED
    player.movement_speed.speed = delta_seconds * movement_speed * MAX_FRAME_PER_SECONDS