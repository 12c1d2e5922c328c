"""The player-controlled hero and the input that drives it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pygame.math import Vector2

from classyclash.base_character import BaseCharacter, _Canvas, _Rect


@dataclass(frozen=True)
class Controls:
    """Input state for one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    attack: bool = False
    attack_pressed: bool = False


class Character(BaseCharacter):
    """The hero, drawn at the centre of the window and carrying a sword."""

    def __init__(self, window_width: int, window_height: int, idle: Any, run: Any, weapon: Any) -> None:
        super().__init__(idle, run)
        self.window_width = window_width
        self.window_height = window_height
        self.weapon = weapon
        self.weapon_collision_rectangle: _Rect = (0.0, 0.0, 0.0, 0.0)
        self.health = 100.0
        self.controls = Controls()

    def screen_position(self) -> Vector2:
        return Vector2(
            self.window_width / 2.0 - self.scale * (0.5 * self.width),
            self.window_height / 2.0 - self.scale * (0.5 * self.height),
        )

    def tick(self, delta_time: float, canvas: _Canvas) -> None:
        """Move according to the controls, animate, and draw the sword."""
        if not self.alive:
            return

        controls = self.controls
        if controls.left:
            self.velocity.x -= 1.0
        if controls.right:
            self.velocity.x += 1.0
        if controls.up:
            self.velocity.y -= 1.0
        if controls.down:
            self.velocity.y += 1.0

        super().tick(delta_time, canvas)

        weapon_width = float(self.weapon.get_width())
        weapon_height = float(self.weapon.get_height())
        scaled_width = weapon_width * self.scale
        scaled_height = weapon_height * self.scale
        position = self.screen_position()

        if self.texture_direction > 0.0:
            origin = Vector2(0.0, scaled_height)
            offset = Vector2(38.0, 55.0)
            left = position.x + offset.x
            rotation = 35.0 if controls.attack else 0.0
        else:
            origin = Vector2(scaled_width, scaled_height)
            offset = Vector2(26.0, 55.0)
            left = position.x + offset.x - scaled_width
            rotation = -35.0 if controls.attack else 0.0

        self.weapon_collision_rectangle = (
            left,
            position.y + offset.y - scaled_height,
            scaled_width,
            scaled_height,
        )

        source = (0.0, 0.0, weapon_width * self.texture_direction, weapon_height)
        dest = (position.x + offset.x, position.y + offset.y, scaled_width, scaled_height)
        canvas.draw_sprite(self.weapon, source, dest, origin, rotation)

    def take_damage(self, damage: float) -> None:
        """Lose health; the hero dies once it reaches zero."""
        self.health -= damage
        if self.health <= 0.0:
            self.alive = False