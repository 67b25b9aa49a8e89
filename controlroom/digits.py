"""Rows of digit sprites showing the keypad code and the health value."""

from __future__ import annotations

from dataclasses import dataclass, field

from controlroom.graphics import Display
from controlroom.vector import Vector2f

BLANK_FRAME = 12
CODE_LENGTH = 4
HEALTH_DIGITS = 3


def _digit_frame(char: str) -> int:
    """Frame index for a character: its digit value, or 0 if it is not a digit."""
    return int(char) if char.isdigit() else 0


@dataclass
class CodeDisplay:
    """Four digit sprites, 24 pixels apart, showing the entered code."""

    display: Display
    screen: int
    start_sprite: int
    position: Vector2f = field(default_factory=Vector2f)
    sheet: str = "sprite/numbers"

    @property
    def sprite_ids(self) -> range:
        return range(self.start_sprite, self.start_sprite + CODE_LENGTH)

    def load(self) -> None:
        """Create the digit sprites, all blank."""
        for offset, sprite_id in enumerate(self.sprite_ids):
            sprite = self.display.create_sprite(
                self.screen, sprite_id, self.position.x + offset * 24, self.position.y
            )
            sprite.sheet = self.sheet
            self.display.set_frame(self.screen, sprite_id, BLANK_FRAME)

    def render(self, code: str) -> None:
        """Show a code of one to four digits; anything else leaves all blank."""
        for sprite_id in self.sprite_ids:
            self.display.set_frame(self.screen, sprite_id, BLANK_FRAME)
        if 0 < len(code) <= CODE_LENGTH:
            for sprite_id, char in zip(self.sprite_ids, code):
                self.display.set_frame(self.screen, sprite_id, _digit_frame(char))

    def unload(self) -> None:
        """Remove the digit sprites."""
        for sprite_id in self.sprite_ids:
            self.display.delete_sprite(self.screen, sprite_id)


@dataclass
class HealthDisplay:
    """A label sprite followed by three zero-padded digit sprites."""

    display: Display
    screen: int
    start_sprite: int
    position: Vector2f = field(default_factory=Vector2f)
    sheet: str = "sprite/hpNums"

    @property
    def digit_ids(self) -> range:
        return range(self.start_sprite, self.start_sprite + HEALTH_DIGITS)

    @property
    def label_id(self) -> int:
        return self.start_sprite + HEALTH_DIGITS

    def load(self) -> None:
        """Create the digit sprites and the label sprite, all blank."""
        for offset, sprite_id in enumerate(self.digit_ids):
            sprite = self.display.create_sprite(
                self.screen,
                sprite_id,
                self.position.x + 32 + offset * 32,
                self.position.y,
            )
            sprite.sheet = self.sheet
            self.display.set_frame(self.screen, sprite_id, BLANK_FRAME)
        label = self.display.create_sprite(
            self.screen, self.label_id, self.position.x, self.position.y
        )
        label.sheet = self.sheet
        self.display.set_frame(self.screen, self.label_id, BLANK_FRAME)

    def render(self, health: int | str) -> None:
        """Show the health padded to three digits; longer values are ignored."""
        text = str(health).rjust(HEALTH_DIGITS, "0")
        if len(text) <= HEALTH_DIGITS:
            for sprite_id, char in zip(self.digit_ids, text):
                self.display.set_frame(self.screen, sprite_id, _digit_frame(char))

    def unload(self) -> None:
        """Remove the digit and label sprites."""
        for sprite_id in (*self.digit_ids, self.label_id):
            self.display.delete_sprite(self.screen, sprite_id)