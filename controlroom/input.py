"""Button and touch state tracked from frame to frame."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from controlroom.vector import Vector2f


class Key(enum.IntFlag):
    """Handheld buttons as a bit mask."""

    A = 1 << 0
    B = 1 << 1
    SELECT = 1 << 2
    START = 1 << 3
    RIGHT = 1 << 4
    LEFT = 1 << 5
    UP = 1 << 6
    DOWN = 1 << 7
    R = 1 << 8
    L = 1 << 9
    X = 1 << 10
    Y = 1 << 11
    TOUCH = 1 << 12
    LID = 1 << 13


@dataclass
class InputHandler:
    """Holds the keys of this frame and the last, and the latest touch point."""

    this_frame: Key = Key(0)
    last_frame: Key = Key(0)
    touch: Vector2f | None = None

    def update(self, keys: int, touch: Vector2f | None = None) -> None:
        """Advance one frame with the keys held now and the touch position."""
        self.last_frame = self.this_frame
        self.this_frame = Key(int(keys))
        self.touch = touch

    def pressed(self) -> Key:
        """Keys held this frame that were not held the frame before."""
        return Key(int(self.this_frame) & ~int(self.last_frame))