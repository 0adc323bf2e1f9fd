import pytest

from dungeonwalk.keyboard import Key, KeyboardInput
from dungeonwalk.pause import PauseMenu, toggle_pause
from dungeonwalk.states import PauseState


def _escape_pressed() -> KeyboardInput:
    keys = KeyboardInput()
    keys.press(Key.ESCAPE)
    return keys


def test_escape_pauses_running_game():
    assert toggle_pause(PauseState.RUNNING, _escape_pressed()) is PauseState.PAUSE


def test_escape_resumes_paused_game():
    assert toggle_pause(PauseState.PAUSE, _escape_pressed()) is PauseState.RUNNING


@pytest.mark.parametrize("state", list(PauseState))
def test_no_key_keeps_state(state):
    assert toggle_pause(state, KeyboardInput()) is state


@pytest.mark.parametrize("state", list(PauseState))
def test_held_escape_does_not_toggle_again(state):
    keys = _escape_pressed()
    keys.end_frame()
    assert toggle_pause(state, keys) is state


@pytest.mark.parametrize("state", list(PauseState))
def test_two_toggles_return_to_start(state):
    once = toggle_pause(state, _escape_pressed())
    assert toggle_pause(once, _escape_pressed()) is state


def test_pause_menu_text():
    assert PauseMenu().text == "PAUSED"