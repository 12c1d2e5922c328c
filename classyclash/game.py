"""The game loop: world map, props, enemies and the hero."""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pygame
from pygame.math import Vector2

from classyclash.base_character import _rects_overlap
from classyclash.character import Character, Controls
from classyclash.enemy import Enemy
from classyclash.prop import Prop

WINDOW_WIDTH = 384
WINDOW_HEIGHT = 384
WHITE = (255, 255, 255)
RED = (230, 41, 55)


def health_text(health: float) -> str:
    """The health label, showing the first five characters of the value."""
    return "Health: " + f"{health:f}"[:5]


class Game:
    """One running game world."""

    map_scale = 3.5

    def __init__(
        self,
        world_map: Any,
        hero: Character,
        props: Iterable[Prop],
        enemies: Iterable[Enemy],
        window_width: int,
        window_height: int,
    ) -> None:
        self.world_map = world_map
        self.hero = hero
        self.props = list(props)
        self.enemies = list(enemies)
        self.window_width = window_width
        self.window_height = window_height
        for enemy in self.enemies:
            enemy.target = hero

    def step(self, delta_time: float, canvas: Any, controls: Controls) -> None:
        """Update and draw one frame."""
        hero = self.hero
        canvas.clear(WHITE)
        canvas.draw_scaled(self.world_map, -hero.world_position, self.map_scale)
        for prop in self.props:
            prop.render(canvas, hero.world_position)

        if not hero.alive:
            canvas.draw_text("Game Over!", 85.0, 45.0, 40, RED)
            return
        canvas.draw_text(health_text(hero.health), 65.0, 45.0, 40, RED)

        hero.controls = controls
        hero.tick(delta_time, canvas)

        position = hero.world_position
        if (
            position.x < 0.0
            or position.y < 0.0
            or position.x + self.window_width > self.world_map.get_width() * self.map_scale
            or position.y + self.window_height > self.world_map.get_height() * self.map_scale
        ):
            hero.undo_movement()

        for prop in self.props:
            if _rects_overlap(prop.collision_rectangle(hero.world_position), hero.collision_rectangle()):
                hero.undo_movement()

        if controls.attack_pressed:
            for enemy in self.enemies:
                if _rects_overlap(enemy.collision_rectangle(), hero.collision_rectangle()):
                    enemy.alive = False

        for enemy in self.enemies:
            enemy.tick(delta_time, canvas)


def load_game(asset_dir: str | Path, window_width: int, window_height: int) -> Game:
    """Build the starting world from the images in asset_dir."""
    assets = Path(asset_dir)

    def texture(relative: str) -> pygame.Surface:
        return pygame.image.load(str(assets / relative))

    hero = Character(
        window_width,
        window_height,
        texture("characters/hero_idle.png"),
        texture("characters/hero_run.png"),
        texture("characters/weapon_sword.png"),
    )
    props = [
        Prop(Vector2(600.0, 300.0), texture("map/Rock.png")),
        Prop(Vector2(400.0, 500.0), texture("map/Log.png")),
    ]
    enemies = [
        Enemy(Vector2(800.0, 300.0), texture("characters/goblin_idle.png"), texture("characters/goblin_run.png")),
        Enemy(Vector2(500.0, 700.0), texture("characters/slime_idle.png"), texture("characters/slime_run.png")),
    ]
    return Game(texture("map/WorldMap.png"), hero, props, enemies, window_width, window_height)


class _SurfaceCanvas:
    """Draws onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface
        self._scaled: dict[tuple[int, float], pygame.Surface] = {}

    def clear(self, color) -> None:
        self._surface.fill(color)

    def draw_scaled(self, texture: pygame.Surface, position: Vector2, scale: float) -> None:
        key = (id(texture), scale)
        if key not in self._scaled:
            size = (round(texture.get_width() * scale), round(texture.get_height() * scale))
            self._scaled[key] = pygame.transform.scale(texture, size)
        self._surface.blit(self._scaled[key], (round(position.x), round(position.y)))

    def draw_sprite(self, texture, source, dest, origin, rotation) -> None:
        sx, sy, sw, sh = source
        area = pygame.Rect(int(sx), int(sy), int(abs(sw)), int(abs(sh))).clip(texture.get_rect())
        if not area.width or not area.height:
            return
        image = pygame.transform.flip(texture.subsurface(area), sw < 0, False)
        dx, dy, dw, dh = dest
        image = pygame.transform.scale(image, (max(1, round(dw)), max(1, round(dh))))
        offset = Vector2(origin) - Vector2(image.get_size()) / 2
        rotated = pygame.transform.rotate(image, -rotation)
        center = Vector2(dx, dy) - offset.rotate(rotation)
        self._surface.blit(rotated, rotated.get_rect(center=(round(center.x), round(center.y))))

    def draw_text(self, text: str, x: float, y: float, size: int, color) -> None:
        self._surface.blit(pygame.font.Font(None, size).render(text, True, color), (round(x), round(y)))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="classyclash")
    parser.add_argument("--assets", default="assets", help="directory holding the game images")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Classy Clash!")
        game = load_game(args.assets, WINDOW_WIDTH, WINDOW_HEIGHT)
        canvas = _SurfaceCanvas(screen)
        clock = pygame.time.Clock()
        delta_time = 0.0
        while True:
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                break
            keys = pygame.key.get_pressed()
            controls = Controls(
                left=bool(keys[pygame.K_a]),
                right=bool(keys[pygame.K_d]),
                up=bool(keys[pygame.K_w]),
                down=bool(keys[pygame.K_s]),
                attack=bool(pygame.mouse.get_pressed()[0]),
                attack_pressed=any(
                    event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 for event in events
                ),
            )
            game.step(delta_time, canvas, controls)
            pygame.display.flip()
            delta_time = clock.tick(60) / 1000.0
    finally:
        pygame.quit()
    return 0