"""Detecting when the player walks into a conversation trigger."""

from __future__ import annotations

from collections.abc import Iterable

from dungeonwalk.components import Aabb2d
from dungeonwalk.conversation import StartConversationEvent
from dungeonwalk.player import Player
from dungeonwalk.world import Square


def check_conversation_triggers(
    player: Player, triggers: Iterable[Square]
) -> list[StartConversationEvent]:
    """Return one start event per trigger the player has just come into contact with.

    Each trigger remembers contact so that staying inside it sends nothing more;
    leaving clears the contact. Squares without a trigger are ignored.
    """
    player_box = Aabb2d.from_center(player.position, player.size / 2.0)
    events = []
    for square in triggers:
        trigger = square.trigger
        if trigger is None:
            continue
        trigger_box = Aabb2d.from_center(square.position, trigger.size / 2.0)
        if player_box.intersects(trigger_box):
            if not trigger.is_contact:
                events.append(StartConversationEvent())
                trigger.is_contact = True
        else:
            trigger.is_contact = False
    return events