"""Enemies that chase and hurt the hero."""

from __future__ import annotations

from typing import Any

from pygame.math import Vector2

from classyclash.base_character import BaseCharacter, _Canvas, _rects_overlap
from classyclash.character import Character


class Enemy(BaseCharacter):
    """A monster that walks towards its target and damages it on contact."""

    def __init__(self, position: Vector2, idle: Any, run: Any) -> None:
        super().__init__(idle, run)
        self.world_position = Vector2(position)
        self.speed = 2.0
        self.target: Character | None = None
        self.damage_per_second = 10.0
        self.radius = 25.0

    def _require_target(self) -> Character:
        if self.target is None:
            raise RuntimeError("enemy has no target")
        return self.target

    def screen_position(self) -> Vector2:
        return self.world_position - self._require_target().world_position

    def tick(self, delta_time: float, canvas: _Canvas) -> None:
        """Chase the target, animate, and deal damage while touching it."""
        if not self.alive:
            return
        target = self._require_target()

        self.velocity = target.screen_position() - self.screen_position()
        if self.velocity.length() < self.radius:
            self.velocity = Vector2()

        super().tick(delta_time, canvas)

        if _rects_overlap(target.collision_rectangle(), self.collision_rectangle()):
            target.take_damage(self.damage_per_second * delta_time)