"""A grid of round toggle buttons whose presses are reported over a connection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from controlroom.collision import CollisionCircle
from controlroom.graphics import Display
from controlroom.input import InputHandler, Key
from controlroom.vector import Vector2f, Vector2i

BUTTON_SIZE = 32
BUTTON_RADIUS = 14
CLICK_VOLUME = 127
BUTTON_SHEET = "sprite/Buttons"
CLICK_SOUND = "sound/ButtonClick"


class _Sender(Protocol):
    def send(self, data: bytes) -> int: ...


@dataclass
class ButtonGrid:
    """Toggle buttons laid out row by row, 32 pixels apart."""

    display: Display
    screen: int
    start_sprite: int
    start_sound: int
    position: Vector2f = field(default_factory=Vector2f)
    grid_size: Vector2i = field(default_factory=lambda: Vector2i(5, 4))
    connection: _Sender | None = None
    circles: list[CollisionCircle] = field(default_factory=list, init=False)
    states: list[bool] = field(default_factory=list, init=False)

    def load(self) -> None:
        """Create the button sprites, their hit circles and the click sound."""
        for row in range(self.grid_size.y):
            for column in range(self.grid_size.x):
                index = row * self.grid_size.x + column
                x = self.position.x + column * BUTTON_SIZE
                y = self.position.y + row * BUTTON_SIZE
                sprite = self.display.create_sprite(
                    self.screen, self.start_sprite + index, x, y
                )
                sprite.sheet = BUTTON_SHEET
                half = BUTTON_SIZE / 2
                self.circles.append(
                    CollisionCircle(Vector2f(x + half, y + half), BUTTON_RADIUS)
                )
                self.states.append(False)
        self.display.load_sound(CLICK_SOUND, self.start_sound)

    def toggle(self, index: int) -> None:
        """Flip a button, show its new state, report it and click."""
        if not 0 <= index < len(self.states):
            raise IndexError(f"no button {index}")
        self.states[index] = not self.states[index]
        self.display.set_frame(
            self.screen, self.start_sprite + index, 1 if self.states[index] else 0
        )
        if self.connection is not None:
            self.connection.send(bytes([index]))
        self.display.play_sound(self.start_sound, CLICK_VOLUME)

    def handle_input(self, input: InputHandler) -> None:
        """Toggle every button under a fresh touch."""
        if Key.TOUCH not in input.pressed() or input.touch is None:
            return
        for index, circle in enumerate(self.circles):
            if circle.check_collision(input.touch):
                self.toggle(index)

    def unload(self) -> None:
        """Remove the button sprites and free the click sound."""
        for offset in range(len(self.circles)):
            self.display.delete_sprite(self.screen, self.start_sprite + offset)
        self.circles.clear()
        self.states.clear()
        self.display.unload_sound(self.start_sound)