"""A camera that keeps the player within a fixed distance of the view centre."""

from __future__ import annotations

from dataclasses import dataclass, field

from dungeonwalk.components import Vec2

CAMERA_PLAYER_MAX_DISTANCE = 100.0


@dataclass
class Camera:
    """The 2D camera's position in world space."""

    position: Vec2 = field(default_factory=lambda: Vec2.ZERO)


def follow_player(camera: Camera, player_position: Vec2) -> None:
    """Pull the camera towards the player until it is at most the maximum distance away."""
    distance = player_position.distance(camera.position)
    if distance > CAMERA_PLAYER_MAX_DISTANCE:
        direction = (player_position - camera.position).normalize()
        overshoot = distance - CAMERA_PLAYER_MAX_DISTANCE
        camera.position = camera.position + direction * overshoot