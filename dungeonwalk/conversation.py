"""The conversation box at the bottom of the screen and the event that opens it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dungeonwalk.keyboard import Key, KeyboardInput

CONVERSATION_TEXT = "Hello, adventurer! Welcome to the dungeon."


@dataclass(frozen=True)
class StartConversationEvent:
    """Sent when the player first touches a conversation trigger."""


@dataclass
class ConversationUi:
    """The conversation panel; hidden until a conversation starts."""

    visible: bool = False
    text: str = CONVERSATION_TEXT
    height: float = 150.0
    padding: float = 20.0
    font_size: float = 30.0
    background: tuple[float, float, float, float] = (0.1, 0.1, 0.1, 0.8)
    text_color: tuple[float, float, float] = (1.0, 1.0, 1.0)

    def close_on_key(self, keys: KeyboardInput) -> None:
        """Hide the panel when Space goes down while it is shown."""
        if keys.just_pressed(Key.SPACE) and self.visible:
            self.visible = False

    def handle_start_events(self, events: Iterable[StartConversationEvent]) -> None:
        """Show the panel for any start event received."""
        for _event in events:
            self.visible = True