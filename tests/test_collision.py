from dungeonwalk.collision import check_conversation_triggers
from dungeonwalk.components import Vec2
from dungeonwalk.conversation import StartConversationEvent
from dungeonwalk.player import spawn_player
from dungeonwalk.world import Square, spawn_conversation_trigger


def test_no_event_when_player_is_away():
    player = spawn_player()
    trigger = spawn_conversation_trigger()
    assert check_conversation_triggers(player, [trigger]) == []
    assert trigger.trigger.is_contact is False


def test_event_on_first_contact_only():
    player = spawn_player()
    trigger = spawn_conversation_trigger()
    player.position = trigger.position
    assert check_conversation_triggers(player, [trigger]) == [StartConversationEvent()]
    assert trigger.trigger.is_contact is True
    assert check_conversation_triggers(player, [trigger]) == []


def test_leaving_and_returning_fires_again():
    player = spawn_player()
    trigger = spawn_conversation_trigger()
    player.position = trigger.position
    check_conversation_triggers(player, [trigger])
    player.position = Vec2.ZERO
    assert check_conversation_triggers(player, [trigger]) == []
    assert trigger.trigger.is_contact is False
    player.position = trigger.position
    assert len(check_conversation_triggers(player, [trigger])) == 1


def test_touching_edges_count_as_contact():
    player = spawn_player()
    trigger = spawn_conversation_trigger()
    player.position = trigger.position - Vec2(player.size.x, 0.0)
    assert len(check_conversation_triggers(player, [trigger])) == 1


def test_squares_without_trigger_are_ignored():
    player = spawn_player()
    plain = Square(position=Vec2.ZERO)
    assert check_conversation_triggers(player, [plain]) == []
    assert plain.trigger is None


def test_one_event_per_touched_trigger():
    player = spawn_player()
    first = spawn_conversation_trigger()
    second = spawn_conversation_trigger()
    far = spawn_conversation_trigger()
    far.position = Vec2(-1000.0, -1000.0)
    player.position = first.position
    events = check_conversation_triggers(player, [first, second, far])
    assert len(events) == 2
    assert far.trigger.is_contact is False