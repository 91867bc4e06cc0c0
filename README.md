# pong

A classic Pong game in a resizable window. Two paddles, one or more balls and,
if you like, obstacles that stand still or drift around the board. Either side
can be played by a human or by the computer at one of three difficulties.

## Installing

```
pip install .
```

## Playing

```
pong
```

The settings are read from `game_data.json` in the working directory and written
back there when the window closes. To use another file:

```
pong --settings my_settings.json
```

A title screen is shown for two seconds (press Enter to skip it), then the main
menu appears. Closing the window or pressing Escape ends the program.

### Controls

| Key              | Action                       |
|------------------|------------------------------|
| W / S            | Left paddle up / down        |
| Arrow Up / Down  | Right paddle up / down       |
| Space            | Pause and resume             |
| Arrow keys       | Move through menus           |
| Enter            | Select                       |
| Escape           | Quit                         |

### Menu

- **Continue Game**: return to a game in progress (shown only when one exists).
- **New Game**: start a new game with the current settings.
- **Settings**: change the game settings.
- **Exit**: quit.

The pause menu offers **Continue** and **Back to Menu**; going back to the menu
keeps the game so that it can be continued later.

### Settings

| Setting           | Values                                                     | Default |
|-------------------|------------------------------------------------------------|---------|
| Left Player       | Human, Computer (Easy), Computer (Normal), Computer (Hard) | Human   |
| Right Player      | as above                                                   | Human   |
| Rounds            | 1 – 9                                                      | 3       |
| Ball Count        | 1 – 10                                                     | 1       |
| Static Obstacles  | 0 – 5                                                      | 0       |
| Moving Obstacles  | 0 – 5                                                      | 0       |

Press Enter on a setting to move it to its next value. If the settings file is
missing or malformed, the defaults above are used.

### Rules

A ball that leaves the board on the left scores a point for the right player,
and one that leaves on the right scores for the left player; balls bounce off
the top and bottom edges, the paddles, the obstacles and each other. A round
ends when every ball is gone; after the chosen number of rounds the game is over
and the higher score wins. Press Enter on the result screen to return to the menu.

## Using it from Python

The game's parts can be driven without a window, for example in tests:

```python
from pong.controls import InputState, Key
from pong.game import Pong
from pong.settings import Difficulty, PongSettings

settings = PongSettings(left_computer=True, left_difficulty=Difficulty.HARD)
game = Pong(settings)
game.update(1 / 60, InputState(down=frozenset({Key.UP})))
print(game.left_player.score, game.right_player.score, game.game_over)
```

- `pong.settings`: `PongSettings` (with `to_dict` / `from_dict`), `Difficulty`,
  `load_settings`, `save_settings`, `player_type_label`, `cycle_player_type`.
- `pong.game`: `Pong`, one match with `update`, `render` and `reset`.
- `pong.app`: `Application`, the screens and menus, stepped with
  `update(dt, keys, elapsed)` and drawn with `render(surface)`; `run()` opens the
  window.
- `pong.ball`, `pong.paddle`, `pong.obstacle`, `pong.player`: the pieces on the board.
- `pong.geometry`: `Vec2`, `Rect`, `check_collision_circle_rect` and random helpers.
- `pong.controls`: `Key` and `InputState`, the keys held and pressed in one frame.
- `pong.drawing`: text measuring and centred text drawing on pygame surfaces.

All positions and sizes are fractions of the board (0 to 1) and are scaled to
the window when drawn.