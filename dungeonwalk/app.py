"""The windowed game loop."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

import pygame

from dungeonwalk.camera import Camera
from dungeonwalk.components import Vec2
from dungeonwalk.game import DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, Game
from dungeonwalk.keyboard import Key, KeyboardInput

FRAMES_PER_SECOND = 60
CLEAR_COLOR = (43, 44, 47)
WINDOW_TITLE = "dungeonwalk"

_KEY_MAP = {
    pygame.K_LEFT: Key.ARROW_LEFT,
    pygame.K_RIGHT: Key.ARROW_RIGHT,
    pygame.K_UP: Key.ARROW_UP,
    pygame.K_DOWN: Key.ARROW_DOWN,
    pygame.K_a: Key.KEY_A,
    pygame.K_d: Key.KEY_D,
    pygame.K_w: Key.KEY_W,
    pygame.K_s: Key.KEY_S,
    pygame.K_LSHIFT: Key.SHIFT_LEFT,
    pygame.K_LCTRL: Key.CONTROL_LEFT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dungeonwalk", description="Walk around the dungeon.")
    parser.add_argument("--width", type=_positive_int, default=int(DEFAULT_WINDOW_WIDTH))
    parser.add_argument("--height", type=_positive_int, default=int(DEFAULT_WINDOW_HEIGHT))
    parser.add_argument("--seed", type=int, default=None, help="seed for the world layout")
    parser.add_argument(
        "--frames", type=_positive_int, default=None, help="stop after this many frames"
    )
    parser.add_argument(
        "--dev-tools",
        action=argparse.BooleanOptionalAction,
        default=__debug__,
        help="skip the title screen and start in the game",
    )
    return parser.parse_args(argv)


def _rgb(color: Sequence[float]) -> tuple[int, ...]:
    return tuple(round(channel * 255) for channel in color)


def _screen_rect(position: Vec2, size: Vec2, camera: Camera, width: int, height: int) -> pygame.Rect:
    centre_x = position.x - camera.position.x + width / 2.0
    centre_y = height / 2.0 - (position.y - camera.position.y)
    return pygame.Rect(
        round(centre_x - size.x / 2.0),
        round(centre_y - size.y / 2.0),
        round(size.x),
        round(size.y),
    )


def _draw_centred_text(
    target: pygame.Surface, font: pygame.font.Font, text: str, color, area: pygame.Rect
) -> None:
    rendered = font.render(text, True, _rgb(color))
    target.blit(rendered, rendered.get_rect(center=area.center))


def _draw(screen: pygame.Surface, game: Game, fonts: dict[float, pygame.font.Font]) -> None:
    width, height = screen.get_size()
    screen.fill(CLEAR_COLOR)

    for square in (*game.squares, *game.triggers):
        rect = _screen_rect(square.position, square.size, game.camera, width, height)
        pygame.draw.rect(screen, _rgb(square.color), rect)
    player = game.player
    pygame.draw.rect(
        screen, _rgb(player.color), _screen_rect(player.position, player.size, game.camera, width, height)
    )

    ui = game.conversation_ui
    if ui.visible:
        panel_height = round(ui.height)
        panel = pygame.Surface((width, panel_height), pygame.SRCALPHA)
        panel.fill(_rgb(ui.background))
        inner = pygame.Rect(0, 0, width, panel_height).inflate(-2 * ui.padding, -2 * ui.padding)
        _draw_centred_text(panel, fonts[ui.font_size], ui.text, ui.text_color, inner)
        screen.blit(panel, (0, height - panel_height))

    menu = game.pause_menu
    if menu is not None:
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(_rgb(menu.background))
        _draw_centred_text(overlay, fonts[menu.font_size], menu.text, menu.text_color, overlay.get_rect())
        screen.blit(overlay, (0, 0))


def _handle_events(keys: KeyboardInput) -> bool:
    """Feed window events into the keyboard; False once the window is closed."""
    keep_running = True
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            keep_running = False
        elif event.type == pygame.KEYDOWN:
            key = _KEY_MAP.get(event.key)
            if key is not None:
                keys.press(key)
        elif event.type == pygame.KEYUP:
            key = _KEY_MAP.get(event.key)
            if key is not None:
                keys.release(key)
    return keep_running


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the game until it is closed or the frame limit is reached."""
    args = _parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = Game(float(args.width), float(args.height), rng, dev_tools=args.dev_tools)

    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(WINDOW_TITLE)
        sizes = {game.conversation_ui.font_size}
        sizes.add(30.0)
        sizes.add(60.0)
        fonts = {size: pygame.font.Font(None, round(size)) for size in sizes}

        clock = pygame.time.Clock()
        keys = KeyboardInput()
        delta_seconds = 0.0
        frame = 0
        while args.frames is None or frame < args.frames:
            if not _handle_events(keys):
                break
            game.update(keys, delta_seconds)
            _draw(screen, game, fonts)
            pygame.display.flip()
            delta_seconds = clock.tick(FRAMES_PER_SECOND) / 1000.0
            frame += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())