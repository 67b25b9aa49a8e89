"""Game levels and the handler that swaps between them."""

from __future__ import annotations

import socket
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from controlroom.button_grid import ButtonGrid
from controlroom.digits import CodeDisplay, HealthDisplay
from controlroom.graphics import MAX_VOLUME, Display
from controlroom.input import InputHandler, Key
from controlroom.keypads import ControlRoomKeypad, IPKeypad
from controlroom.vector import Vector2f, Vector2i

SERVER_PORT = 8080
LEVEL_SIZE = Vector2i(256, 256)

IP_TEXT_SCREEN = 0
IP_TEXT_LAYER = 0
IP_TEXT_ROW = 12
IP_TEXT_WIDTH = 20

GOODBYE_SOUND = 31
GOODBYE_FRAMES = 120
MSG_GOODBYE = 255
MSG_RESTART = 254
MSG_WIN = 253
MAX_HEALTH = 100

WIN_SOUND = 0
WIN_FRAMES = 120

Connector = Callable[[tuple[str, int]], socket.socket]


def _no_wait(frames: int) -> None:
    """Default frame delay: return at once."""


class Level:
    """A screen of the game; every hook does nothing unless overridden."""

    def __init__(self, handler: LevelHandler, display: Display) -> None:
        self.handler = handler
        self.display = display
        self.connection: socket.socket | None = None
        self.level_size = LEVEL_SIZE

    def load(self) -> None:
        """Set up what the level shows."""

    def unload(self) -> None:
        """Tear down what the level set up."""

    def handle_input(self, input: InputHandler) -> None:
        """React to the buttons and touch of this frame."""

    def update(self) -> None:
        """Advance the level by one frame."""

    def render(self) -> None:
        """Bring the display up to date."""

    def post_render(self) -> None:
        """Work done after the frame has been shown."""

    def handle_network(self) -> None:
        """Process whatever has arrived on the connection."""

    def pass_connection(self, sock: socket.socket | None) -> None:
        """Hand an open server connection to this level."""
        self.connection = sock


@dataclass
class LevelHandler:
    """Holds the current level and swaps in a queued one between frames."""

    current: Level | None = None
    pending: Level | None = None
    swap: bool = False
    connector: Connector = field(default=socket.create_connection, repr=False)
    wait_frames: Callable[[int], None] = field(default=_no_wait, repr=False)

    def load_level(self, level: Level) -> None:
        """Queue a level to replace the current one at the next swap."""
        self.pending = level
        self.swap = True

    def handle_level_swaps(self) -> None:
        """Unload the current level and load the queued one, if any."""
        if not self.swap:
            return
        if self.current is not None:
            self.current.unload()
        self.current = self.pending
        self.pending = None
        if self.current is not None:
            self.current.load()
        self.swap = False


class IPSelectLevel(Level):
    """Asks for the server address on a keypad and connects on START."""

    def __init__(self, handler: LevelHandler, display: Display) -> None:
        super().__init__(handler, display)
        self.keypad = IPKeypad(
            self.display,
            screen=1,
            start_sprite=0,
            start_sound=0,
            position=Vector2f(80, 32),
        )

    def load(self) -> None:
        self.display.text_layers.setdefault((IP_TEXT_SCREEN, IP_TEXT_LAYER), {})
        self.keypad.load()

    def handle_input(self, input: InputHandler) -> None:
        self.keypad.handle_input(input)
        if Key.START in input.pressed() and self.connection is None:
            self.open_connection()
            control_room = ControlRoomLevel(self.handler, self.display)
            control_room.pass_connection(self.connection)
            self.handler.load_level(control_room)

    def render(self) -> None:
        text = f"IP: {self.keypad.ip}".ljust(IP_TEXT_WIDTH)
        self.display.write_text(IP_TEXT_SCREEN, IP_TEXT_LAYER, 0, IP_TEXT_ROW, text)

    def unload(self) -> None:
        self.display.text_layers.pop((IP_TEXT_SCREEN, IP_TEXT_LAYER), None)
        self.keypad.unload()

    def open_connection(self) -> socket.socket:
        """Connect to the typed address on the server port."""
        self.connection = self.handler.connector((self.keypad.ip, SERVER_PORT))
        return self.connection


def _drain(connection: socket.socket) -> Iterator[int]:
    """Yield each byte already waiting on the connection without blocking."""
    connection.setblocking(False)
    try:
        while True:
            try:
                data = connection.recv(1)
            except OSError:
                return
            if not data:
                return
            yield data[0]
    finally:
        if connection.fileno() != -1:
            connection.setblocking(True)


class ControlRoomLevel(Level):
    """Buttons, a code keypad and the health readout, driven by the server."""

    def __init__(self, handler: LevelHandler, display: Display) -> None:
        super().__init__(handler, display)
        self.health = MAX_HEALTH
        self.button_grid: ButtonGrid | None = None
        self.keypad: ControlRoomKeypad | None = None
        self.code_display: CodeDisplay | None = None
        self.health_display: HealthDisplay | None = None

    def load(self) -> None:
        self.display.set_background(0, 3, "TopScreenBG")
        self.button_grid = ButtonGrid(
            self.display,
            screen=1,
            start_sprite=0,
            start_sound=0,
            position=Vector2f(0, 32),
            grid_size=Vector2i(5, 4),
            connection=self.connection,
        )
        self.keypad = ControlRoomKeypad(
            self.display,
            screen=1,
            start_sprite=20,
            start_sound=1,
            position=Vector2f(160, 32),
            connection=self.connection,
        )
        self.code_display = CodeDisplay(
            self.display, screen=1, start_sprite=32, position=Vector2f(160, 8)
        )
        self.health_display = HealthDisplay(
            self.display, screen=0, start_sprite=36, position=Vector2f(128, 160)
        )
        self.button_grid.load()
        self.keypad.load()
        self.code_display.load()
        self.health_display.load()
        self.display.load_sound("sound/Goodbye", GOODBYE_SOUND)

    def handle_input(self, input: InputHandler) -> None:
        if self.button_grid is not None:
            self.button_grid.handle_input(input)
        if self.keypad is not None:
            self.keypad.handle_input(input)

    def render(self) -> None:
        if self.code_display is not None and self.keypad is not None:
            self.code_display.render(self.keypad.code)
        if self.health_display is not None:
            self.health_display.render(self.health)

    def handle_network(self) -> None:
        if self.connection is None:
            return
        for byte in _drain(self.connection):
            self.handle_message(byte)

    def handle_message(self, byte: int) -> None:
        """Act on one byte sent by the server."""
        if byte == MSG_GOODBYE:
            self.display.play_sound(GOODBYE_SOUND, MAX_VOLUME)
            self.handler.wait_frames(GOODBYE_FRAMES)
            if self.connection is not None:
                self.connection.close()
            self.handler.load_level(IPSelectLevel(self.handler, self.display))
        elif byte == MSG_RESTART:
            control_room = ControlRoomLevel(self.handler, self.display)
            control_room.pass_connection(self.connection)
            self.handler.load_level(control_room)
        elif byte == MSG_WIN:
            if self.connection is not None:
                self.connection.close()
            self.handler.load_level(WinScreenLevel(self.handler, self.display))
        elif byte <= MAX_HEALTH:
            self.health = byte

    def unload(self) -> None:
        self.display.clear_background(0, 3)
        for part in (self.button_grid, self.keypad, self.code_display, self.health_display):
            if part is not None:
                part.unload()
        self.display.unload_sound(GOODBYE_SOUND)


class WinScreenLevel(Level):
    """Shows the win screen for a while, then returns to address entry."""

    def __init__(self, handler: LevelHandler, display: Display) -> None:
        super().__init__(handler, display)
        self.timer = 0

    def load(self) -> None:
        self.display.set_background(0, 3, "YouWinBG")
        self.display.load_sound("sound/youWinGoodJob", WIN_SOUND)
        self.display.play_sound(WIN_SOUND, MAX_VOLUME)

    def unload(self) -> None:
        self.display.clear_background(0, 3)
        self.display.unload_sound(WIN_SOUND)

    def update(self) -> None:
        if self.timer < WIN_FRAMES:
            self.timer += 1
        else:
            self.handler.load_level(IPSelectLevel(self.handler, self.display))