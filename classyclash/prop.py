"""Static scenery that blocks the hero."""

from __future__ import annotations

from typing import Any, Protocol

from pygame.math import Vector2

from classyclash.base_character import _Rect


class _ScaledCanvas(Protocol):
    def draw_scaled(self, texture: Any, position: Vector2, scale: float) -> None: ...


class Prop:
    """A textured object placed at a fixed world position."""

    def __init__(self, position: Vector2, texture: Any) -> None:
        self.world_position = Vector2(position)
        self.texture = texture
        self.scale = 4.0

    def render(self, canvas: _ScaledCanvas, hero_position: Vector2) -> None:
        """Draw the prop relative to the hero's world position."""
        canvas.draw_scaled(self.texture, self.world_position - hero_position, self.scale)

    def collision_rectangle(self, hero_position: Vector2) -> _Rect:
        """The on-screen rectangle the prop occupies."""
        position = self.world_position - hero_position
        return (
            position.x,
            position.y,
            self.texture.get_width() * self.scale,
            self.texture.get_height() * self.scale,
        )