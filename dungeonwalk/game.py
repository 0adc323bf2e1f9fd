"""The game as a whole: its state machines, entities and the order systems run in."""

from __future__ import annotations

import random

from dungeonwalk.camera import Camera, follow_player
from dungeonwalk.collision import check_conversation_triggers
from dungeonwalk.components import Vec2
from dungeonwalk.conversation import ConversationUi, StartConversationEvent
from dungeonwalk.keyboard import KeyboardInput
from dungeonwalk.pause import PauseMenu, toggle_pause
from dungeonwalk.player import Player, player_movement, spawn_player, update_movement_speed
from dungeonwalk.states import AppState, GameState, PauseState
from dungeonwalk.world import Square, spawn_conversation_trigger, spawn_random_squares

DEFAULT_WINDOW_WIDTH = 1280.0
DEFAULT_WINDOW_HEIGHT = 720.0


class Game:
    """All game entities plus the states that decide which systems run each frame.

    With ``dev_tools`` the game skips the title screen and starts in ``IN_GAME``.
    """

    def __init__(
        self,
        window_width: float = DEFAULT_WINDOW_WIDTH,
        window_height: float = DEFAULT_WINDOW_HEIGHT,
        rng: random.Random | None = None,
        dev_tools: bool = False,
    ) -> None:
        self.app_state = AppState.TITLE
        self.game_state = GameState.IDLE
        self.pause_state = PauseState.RUNNING
        self._next_pause_state: PauseState | None = None

        self.player: Player = spawn_player()
        self.squares: list[Square] = spawn_random_squares(window_width, window_height, rng)
        self.camera = Camera()
        self.triggers: list[Square] = [spawn_conversation_trigger()]
        self.conversation_ui = ConversationUi()
        self.pause_menu: PauseMenu | None = None

        # The camera reads the player's position as of the end of the previous frame.
        self._player_global_position: Vec2 = self.player.position

        if dev_tools:
            self.app_state = AppState.IN_GAME

    @property
    def paused(self) -> bool:
        """True while the pause state is ``PAUSE``."""
        return self.pause_state is PauseState.PAUSE

    def _apply_pause_transition(self) -> None:
        next_state = self._next_pause_state
        self._next_pause_state = None
        if next_state is None or next_state is self.pause_state:
            return
        self.pause_state = next_state
        if next_state is PauseState.PAUSE:
            self.pause_menu = PauseMenu()
        else:
            self.pause_menu = None

    def update(self, keys: KeyboardInput, delta_seconds: float) -> list[StartConversationEvent]:
        """Run one frame and return the conversation events it produced.

        A pause requested this frame takes effect at the start of the next one.
        The keyboard's per-frame presses are cleared when the frame ends.
        """
        self._apply_pause_transition()

        in_game = self.app_state is AppState.IN_GAME
        if in_game:
            next_state = toggle_pause(self.pause_state, keys)
            if next_state is not self.pause_state:
                self._next_pause_state = next_state

        events: list[StartConversationEvent] = []
        if in_game and self.pause_state is PauseState.RUNNING:
            update_movement_speed(self.player, keys, delta_seconds)
            player_movement(self.player, keys)
            follow_player(self.camera, self._player_global_position)
            events = check_conversation_triggers(self.player, self.triggers)

        self.conversation_ui.close_on_key(keys)
        self.conversation_ui.handle_start_events(events)

        self._player_global_position = self.player.position
        keys.end_frame()
        return events