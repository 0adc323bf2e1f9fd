# dungeonwalk

A small top-down walking game. You are a red square on a field of a thousand
brown squares scattered at random. A green square stands to your right at
(150, 0). Touching it opens a conversation box at the bottom of the screen.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Play

```
dungeonwalk
```

Options:

| Option                          | Meaning                                                   |
|---------------------------------|-----------------------------------------------------------|
| `--width N`, `--height N`       | Window size in pixels (default 1280 x 720)                |
| `--seed N`                      | Seed for the layout of the field                          |
| `--frames N`                    | Stop after this many frames                               |
| `--dev-tools` / `--no-dev-tools` | Start straight in the game, or stay at the title state   |

`--dev-tools` is on by default, and off by default when Python runs with `-O`.

Controls:

| Key                  | Action                                |
|----------------------|---------------------------------------|
| Arrow keys / W A S D | Move                                  |
| Left Shift (hold)    | Sprint                                |
| Left Ctrl (hold)     | Walk slowly                           |
| Escape               | Pause / resume                        |
| Space                | Close the conversation box            |

Movement speed is scaled by frame time, so it feels the same at any frame
rate. The camera stays put while you are within 100 units of its centre and
is pulled along once you get further away. A pause pressed in one frame takes
effect at the start of the next, and while paused the "PAUSED" overlay is
shown and nothing moves.

## Using the pieces

The game logic runs without a window, so it can be driven from code or tests:

```python
import random

from dungeonwalk.game import Game
from dungeonwalk.keyboard import Key, KeyboardInput

game = Game(800, 600, random.Random(1), dev_tools=True)
keys = KeyboardInput()
keys.press(Key.KEY_D)
events = game.update(keys, 1 / 60)   # clears the frame's key presses itself
print(game.player.position, events)
```

`Game.update` returns the `StartConversationEvent`s produced that frame.
`Game.paused` tells whether the game is paused; `Game.pause_menu` is a
`PauseMenu` while paused and `None` otherwise.

Modules:

- `dungeonwalk.components`: `Vec2`, `Aabb2d`, `MovementSpeed`, `ConversationTrigger`.
- `dungeonwalk.states`: `AppState`, `GameState`, `PauseState`.
- `dungeonwalk.keyboard`: `Key` and `KeyboardInput` (`press`, `release`,
  `pressed`, `any_pressed`, `just_pressed`, `end_frame`).
- `dungeonwalk.player`: `Player`, `spawn_player`, `movement_direction`,
  `player_movement`, `update_movement_speed`.
- `dungeonwalk.camera`: `Camera` and `follow_player`.
- `dungeonwalk.world`: `Square`, `spawn_random_squares`,
  `spawn_conversation_trigger`.
- `dungeonwalk.collision`: `check_conversation_triggers`, which reports a
  trigger only when the player first comes into contact with it.
- `dungeonwalk.conversation`: `StartConversationEvent` and `ConversationUi`.
- `dungeonwalk.pause`: `PauseMenu` and `toggle_pause`.
- `dungeonwalk.game`: `Game`.
- `dungeonwalk.app`: `main`, the windowed loop behind the `dungeonwalk` command.

## What it does not do

There is no title screen, no player-name entry, no saving, no enemies and no
battles. `AppState` and `GameState` name those states, but nothing switches
to them. With `--no-dev-tools` the game stays in the title state, where
nothing moves and only the field is drawn. The conversation box always shows
the same single line of text.