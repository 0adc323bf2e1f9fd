"""The state machines that drive the game."""

from __future__ import annotations

from enum import Enum, auto


class AppState(Enum):
    """Top-level screen of the application; ``TITLE`` is the initial state."""

    TITLE = auto()
    EDIT_PLAYER_NAME = auto()
    IN_GAME = auto()
    SAVE = auto()


class GameState(Enum):
    """What is happening inside the game; ``IDLE`` is the initial state."""

    IDLE = auto()
    MOVING = auto()
    BATTLE = auto()
    MOVIE = auto()
    CONVERSATION = auto()


class PauseState(Enum):
    """Whether the game is running or paused; ``RUNNING`` is the initial state."""

    RUNNING = auto()
    PAUSE = auto()