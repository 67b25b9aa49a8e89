"""Touch keypads for entering a server address and a door code."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Protocol

from controlroom.collision import CollisionBox
from controlroom.graphics import Display
from controlroom.input import InputHandler, Key
from controlroom.vector import Vector2f

KEY_SIZE = 32
KEY_COUNT = 12
BACKSPACE = 10
BEEP_COUNT = 7
BEEP_VOLUME = 64
KEYPAD_SHEET = "sprite/keypad"


class _Sender(Protocol):
    def send(self, data: bytes) -> int: ...


def _key_layout(position: Vector2f) -> list[Vector2f]:
    """Top-left corners of the twelve keys, in key index order.

    Key 0 sits in the middle of the bottom row, keys 1-9 fill a 3x3 grid,
    key 10 is bottom left and key 11 bottom right.
    """
    bottom = position.y + 3 * KEY_SIZE
    corners = [Vector2f(position.x + KEY_SIZE, bottom)]
    corners.extend(
        Vector2f(
            position.x + (digit - 1) % 3 * KEY_SIZE,
            position.y + (digit - 1) // 3 * KEY_SIZE,
        )
        for digit in range(1, 10)
    )
    corners.append(Vector2f(position.x, bottom))
    corners.append(Vector2f(position.x + 2 * KEY_SIZE, bottom))
    return corners


def _drop_last(text: str) -> str:
    return text[:-1]


@dataclass
class _Keypad:
    display: Display
    screen: int
    start_sprite: int
    start_sound: int
    position: Vector2f = field(default_factory=Vector2f)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    boxes: list[CollisionBox] = field(default_factory=list, init=False)

    _right_key_frame = 11

    def _load_keys(self) -> None:
        frames = [0, *range(1, 10), BACKSPACE, self._right_key_frame]
        for index, (corner, frame) in enumerate(zip(_key_layout(self.position), frames)):
            sprite_id = self.start_sprite + index
            sprite = self.display.create_sprite(self.screen, sprite_id, corner.x, corner.y)
            sprite.sheet = KEYPAD_SHEET
            self.display.set_frame(self.screen, sprite_id, frame)
            self.boxes.append(CollisionBox(corner, Vector2f(KEY_SIZE, KEY_SIZE)))
        for beep in range(BEEP_COUNT):
            self.display.load_sound(f"sound/KeypadBeep{beep + 1}", self.start_sound + beep)

    def _touched_keys(self, input: InputHandler) -> list[int]:
        if Key.TOUCH not in input.pressed() or input.touch is None:
            return []
        return [
            index for index, box in enumerate(self.boxes) if box.check_collision(input.touch)
        ]

    def _unload_keys(self) -> None:
        for offset in range(len(self.boxes)):
            self.display.delete_sprite(self.screen, self.start_sprite + offset)
        self.boxes.clear()
        for beep in range(BEEP_COUNT):
            self.display.unload_sound(self.start_sound + beep)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < KEY_COUNT:
            raise IndexError(f"no key {index}")

    def _beep(self) -> None:
        beep = self.rng.randrange(BEEP_COUNT)
        self.display.play_sound(self.start_sound + beep, BEEP_VOLUME)


@dataclass
class IPKeypad(_Keypad):
    """Keypad for typing an IPv4 address: digits, backspace and a dot key."""

    ip: str = field(default="", init=False)

    MAX_LENGTH = 15
    _right_key_frame = 11

    def load(self) -> None:
        """Create the key sprites, their hit boxes and the beep sounds."""
        self._load_keys()

    def press(self, index: int) -> None:
        """Apply key ``index`` to the address and beep."""
        self._check_index(index)
        if len(self.ip) < self.MAX_LENGTH or index == BACKSPACE:
            if index <= 9:
                self.ip += str(index)
            elif index == BACKSPACE:
                self.ip = _drop_last(self.ip)
            else:
                self.ip += "."
        self._beep()

    def handle_input(self, input: InputHandler) -> None:
        """Press every key under a fresh touch."""
        for index in self._touched_keys(input):
            self.press(index)

    def unload(self) -> None:
        """Remove the key sprites and free the beep sounds."""
        self._unload_keys()


@dataclass
class ControlRoomKeypad(_Keypad):
    """Keypad for a four-digit code; every press is reported over the connection."""

    connection: _Sender | None = None
    code: str = field(default="", init=False)

    CODE_LENGTH = 4
    MESSAGE_OFFSET = 100
    _right_key_frame = 13

    def load(self) -> None:
        """Create the key sprites, their hit boxes and the beep sounds."""
        self._load_keys()

    def press(self, index: int) -> None:
        """Apply key ``index`` to the code, send it, and beep."""
        self._check_index(index)
        if index < BACKSPACE and len(self.code) < self.CODE_LENGTH:
            self.code += str(index)
        elif index == BACKSPACE:
            self.code = _drop_last(self.code)
        elif index == BACKSPACE + 1 and len(self.code) == self.CODE_LENGTH:
            self.code = ""
        if self.connection is not None:
            self.connection.send(bytes([index + self.MESSAGE_OFFSET]))
        self._beep()

    def handle_input(self, input: InputHandler) -> None:
        """Press every key under a fresh touch."""
        for index in self._touched_keys(input):
            self.press(index)

    def unload(self) -> None:
        """Remove the key sprites and free the beep sounds."""
        self._unload_keys()