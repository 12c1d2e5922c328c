"""Shared behaviour of the animated characters that walk the world map."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol

from pygame.math import Vector2

_Rect = tuple[float, float, float, float]


class _Texture(Protocol):
    def get_width(self) -> int: ...

    def get_height(self) -> int: ...


class _Canvas(Protocol):
    def draw_sprite(
        self, texture: Any, source: _Rect, dest: _Rect, origin: Vector2, rotation: float
    ) -> None: ...


def _rects_overlap(first: _Rect, second: _Rect) -> bool:
    """Return True when two (x, y, width, height) rectangles intersect."""
    ax, ay, aw, ah = first
    bx, by, bw, bh = second
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class BaseCharacter(ABC):
    """An animated sprite sheet that moves through the world."""

    max_frames = 6
    update_time = 1.0 / 12.0

    def __init__(self, idle: _Texture, run: _Texture) -> None:
        self.idle_texture = idle
        self.run_texture = run
        self.texture = idle
        self.world_position = Vector2()
        self._last_world_position = Vector2()
        self.texture_direction = 1.0
        self.width = float(idle.get_width() // self.max_frames)
        self.height = float(idle.get_height())
        self.running_time = 0.0
        self.frame = 0
        self.speed = 4.0
        self.scale = 4.0
        self.velocity = Vector2()
        self.alive = True

    @abstractmethod
    def screen_position(self) -> Vector2:
        """Where the character is drawn on the screen."""

    def tick(self, delta_time: float, canvas: _Canvas) -> None:
        """Advance animation, apply the pending velocity and draw the sprite."""
        self._last_world_position = Vector2(self.world_position)

        self.running_time += delta_time
        if self.running_time >= self.update_time:
            self.running_time = 0.0
            self.frame += 1
            if self.frame > self.max_frames:
                self.frame = 0

        if self.velocity.length() != 0.0:
            self.world_position = self.world_position + self.velocity.normalize() * self.speed
            if self.velocity.x < 0.0:
                self.texture_direction = -1.0
            elif self.velocity.x > 0.0:
                self.texture_direction = 1.0
            self.texture = self.run_texture
        else:
            self.texture = self.idle_texture

        self.velocity = Vector2()

        position = self.screen_position()
        source = (self.frame * self.width, 0.0, self.width * self.texture_direction, self.height)
        dest = (position.x, position.y, self.scale * self.width, self.scale * self.height)
        canvas.draw_sprite(self.texture, source, dest, Vector2(), 0.0)

    def undo_movement(self) -> None:
        """Return to the world position held before the last tick."""
        self.world_position = Vector2(self._last_world_position)

    def collision_rectangle(self) -> _Rect:
        """The on-screen rectangle the character occupies."""
        position = self.screen_position()
        return (position.x, position.y, self.width * self.scale, self.height * self.scale)