import pygame
import pytest

from dungeonwalk.app import main


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")


def test_runs_a_few_frames_and_exits_cleanly():
    assert main(["--frames", "3", "--seed", "1", "--width", "320", "--height", "240"]) == 0
    assert pygame.display.get_init() is False


def test_runs_without_dev_tools():
    result = main(["--frames", "2", "--no-dev-tools", "--width", "320", "--height", "240"])
    assert result == 0
    assert pygame.display.get_init() is False


def test_runs_with_dev_tools():
    assert main(["--frames", "2", "--dev-tools", "--width", "320", "--height", "240"]) == 0


@pytest.mark.parametrize("bad", [["--frames", "0"], ["--width", "-3"], ["--height", "tall"]])
def test_rejects_bad_arguments(bad):
    with pytest.raises(SystemExit) as excinfo:
        main(bad)
    assert excinfo.value.code == 2


def test_too_small_window_raises_before_opening_display():
    with pytest.raises(ValueError):
        main(["--frames", "1", "--width", "5"])
    assert pygame.display.get_init() is False