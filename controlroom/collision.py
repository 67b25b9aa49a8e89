"""Point-in-shape tests for touch handling."""

from __future__ import annotations

from dataclasses import dataclass

from controlroom.vector import Vector2f


@dataclass
class CollisionBox:
    """An axis-aligned rectangle given by its top-left corner and size."""

    top_left: Vector2f
    size: Vector2f

    def check_collision(self, point: Vector2f) -> bool:
        """Return True if the point lies inside the box, edges included."""
        return (
            self.top_left.x <= point.x <= self.top_left.x + self.size.x
            and self.top_left.y <= point.y <= self.top_left.y + self.size.y
        )


@dataclass
class CollisionCircle:
    """A circle given by its centre and radius."""

    centre: Vector2f
    radius: float

    def check_collision(self, point: Vector2f) -> bool:
        """Return True if the point lies inside the circle, edge included."""
        return (point - self.centre).magnitude() <= self.radius