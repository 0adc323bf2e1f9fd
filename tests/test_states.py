import pytest

from dungeonwalk.states import AppState, GameState, PauseState


def _round_trip_names(state_cls):
    return [state_cls(member.value).name for member in state_cls]


def test_app_state_members_in_order():
    assert _round_trip_names(AppState) == ["TITLE", "EDIT_PLAYER_NAME", "IN_GAME", "SAVE"]


def test_game_state_members_in_order():
    assert _round_trip_names(GameState) == [
        "IDLE",
        "MOVING",
        "BATTLE",
        "MOVIE",
        "CONVERSATION",
    ]


def test_pause_state_members_in_order():
    assert _round_trip_names(PauseState) == ["RUNNING", "PAUSE"]


@pytest.mark.parametrize(
    "member",
    [AppState.IN_GAME, GameState.CONVERSATION, PauseState.PAUSE],
)
def test_lookup_by_value_returns_same_member(member):
    assert type(member)(member.value) is member


@pytest.mark.parametrize("state_cls", [AppState, GameState, PauseState])
def test_unknown_value_is_rejected(state_cls):
    with pytest.raises(ValueError):
        state_cls(object())


def test_states_are_distinct_and_hashable():
    seen = {
        AppState(AppState.IN_GAME.value): 1,
        PauseState(PauseState.RUNNING.value): 2,
        GameState(GameState.IDLE.value): 3,
    }
    assert len(seen) == 3
    assert seen[AppState.IN_GAME] == 1
    assert AppState["IN_GAME"] is AppState.IN_GAME