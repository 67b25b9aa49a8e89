# controlroom

`controlroom` is the control-room side of a two-player cooperative puzzle
game. One player is in the game. The other player sits at the control room.
The control room connects to the game host over TCP and gives that player:

- a grid of 5 × 4 toggle buttons. Each press flips the button and sends its
  index (0–19) to the host as one byte.
- a keypad for entering a code of up to four digits. Every key press sends
  the key's index plus 100 to the host. Key 10 deletes the last digit. Key 11
  clears the code once all four digits have been entered.
- a three-digit health readout that the host keeps up to date.

The host controls the session by sending single bytes:

| byte      | meaning                                                          |
|-----------|------------------------------------------------------------------|
| 0–100     | the player's current health                                      |
| 253       | the puzzle is solved: close the connection, show the win screen  |
| 254       | restart the control room on the same connection                  |
| 255       | the player is gone: play goodbye, wait 120 frames, close, return to IP entry |

All other bytes are ignored.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
controlroom [--scale N]
```

The command opens a pygame window with two 256 × 192 screens stacked one
above the other. `--scale` sets the window's size multiplier. The default is
2, and the value must be at least 1. A left mouse click on the lower screen
counts as a touch.

| key        | button  |
|------------|---------|
| Z / X      | A / B   |
| S / A      | X / Y   |
| Q / W      | L / R   |
| Enter      | Start   |
| Backspace  | Select  |
| arrow keys | D-pad   |

The first screen is a keypad for typing the host's IPv4 address. It has the
digits, a delete key and a dot key, and takes at most 15 characters. Press
Start to connect to port 8080 on that address. A failed connection is not
caught, so the error ends the program. Once you are connected, the control
room takes over the lower screen and the health readout appears on the upper
one. The win screen stays up for 120 frames (two seconds at 60 fps) and then
returns to IP entry.

To quit, close the window or hold Select, L and R together (Backspace, Q
and W).

## What it does not do

The window draws placeholders. Backgrounds appear as labelled panels, and
sprites appear as outlined boxes that show their current frame number. No
images are loaded and no sound is played. `Display` only records which
sounds were loaded and played. The game host is not part of this package.

## Using the pieces

The building blocks can be used on their own:

- `controlroom.vector`: `Vector2f` and `Vector2i`, immutable 2D vectors.
- `controlroom.collision`: `CollisionBox` and `CollisionCircle`, point tests
  that include the edges.
- `controlroom.input`: `Key` flags, and `InputHandler`. `InputHandler.pressed()`
  returns the keys that are newly pressed this frame.
- `controlroom.graphics`: `Display`, an in-memory record of the sprites,
  backgrounds, text and sounds on both screens.
- `controlroom.animation`: `Animation`, which cycles through a run of sprite
  frames.
- `controlroom.camera`: `Camera`, which follows a `GameObject`.
- `controlroom.digits`: `CodeDisplay` and `HealthDisplay`.
- `controlroom.keypads`: `IPKeypad` and `ControlRoomKeypad`.
- `controlroom.button_grid`: `ButtonGrid`.
- `controlroom.levels`: `LevelHandler`, `IPSelectLevel`, `ControlRoomLevel`
  and `WinScreenLevel`.
- `controlroom.app`: `Game`, which runs one frame per `step`, and `main`.

```python
from controlroom.app import Game
from controlroom.collision import CollisionBox
from controlroom.input import Key
from controlroom.vector import Vector2f

box = CollisionBox(Vector2f(0, 0), Vector2f(32, 32))
box.check_collision(Vector2f(16, 16))     # True

game = Game()
game.step(Key.TOUCH, Vector2f(90, 40))    # touch the "1" key; returns True
game.handler.current.keypad.ip            # '1'
```

`Game` accepts a `connector` in place of `socket.create_connection`. It also
accepts a `wait_frames` callable for the goodbye pause. Both make it easy to
drive the game without a network or a window.