from dataclasses import dataclass, field

import pytest
from pygame.math import Vector2

from classyclash.character import Character, Controls


@dataclass
class FakeTexture:
    w: int
    h: int

    def get_width(self):
        return self.w

    def get_height(self):
        return self.h


@dataclass
class RecordingCanvas:
    calls: list = field(default_factory=list)

    def draw_sprite(self, texture, source, dest, origin, rotation):
        self.calls.append((texture, source, dest, origin, rotation))


@pytest.fixture
def weapon():
    return FakeTexture(12, 28)


@pytest.fixture
def hero(weapon):
    return Character(384, 384, FakeTexture(96, 16), FakeTexture(96, 16), weapon)


def test_hero_is_centred_in_window(hero):
    x, y, w, h = hero.collision_rectangle()
    assert x + w / 2 == pytest.approx(384 / 2)
    assert y + h / 2 == pytest.approx(384 / 2)


def test_hero_starts_alive_with_full_health(hero):
    assert hero.alive
    assert hero.health == 100.0


@pytest.mark.parametrize(
    ("controls", "expected"),
    [
        (Controls(right=True), Vector2(4.0, 0.0)),
        (Controls(left=True), Vector2(-4.0, 0.0)),
        (Controls(up=True), Vector2(0.0, -4.0)),
        (Controls(down=True), Vector2(0.0, 4.0)),
        (Controls(left=True, right=True), Vector2(0.0, 0.0)),
    ],
)
def test_controls_move_hero(hero, controls, expected):
    hero.controls = controls
    hero.tick(0.0, RecordingCanvas())
    assert hero.world_position == expected


def test_diagonal_move_keeps_speed(hero):
    hero.controls = Controls(right=True, down=True)
    hero.tick(0.0, RecordingCanvas())
    assert hero.world_position.length() == pytest.approx(hero.speed)


def test_take_damage_reduces_health(hero):
    hero.take_damage(30.0)
    assert hero.health == pytest.approx(70.0)
    assert hero.alive


def test_lethal_damage_kills(hero):
    hero.take_damage(100.0)
    assert not hero.alive


def test_dead_hero_neither_moves_nor_draws(hero):
    hero.take_damage(200.0)
    canvas = RecordingCanvas()
    hero.controls = Controls(right=True)
    hero.tick(1.0, canvas)
    assert hero.world_position == Vector2()
    assert canvas.calls == []


def test_sword_drawn_after_body(hero, weapon):
    canvas = RecordingCanvas()
    hero.tick(0.0, canvas)
    assert len(canvas.calls) == 2
    assert canvas.calls[-1][0] is weapon


def test_weapon_rectangle_facing_right(hero, weapon):
    hero.tick(0.0, RecordingCanvas())
    position = hero.screen_position()
    x, y, w, h = hero.weapon_collision_rectangle
    assert x == position.x + 38.0
    assert y == position.y + 55.0 - h
    assert (w, h) == (weapon.w * hero.scale, weapon.h * hero.scale)


def test_weapon_rectangle_facing_left(hero):
    hero.controls = Controls(left=True)
    hero.tick(0.0, RecordingCanvas())
    position = hero.screen_position()
    x, _, w, _ = hero.weapon_collision_rectangle
    assert x == position.x + 26.0 - w


@pytest.mark.parametrize(
    ("controls", "rotation"),
    [
        (Controls(), 0.0),
        (Controls(attack=True), 35.0),
        (Controls(left=True), 0.0),
        (Controls(left=True, attack=True), -35.0),
    ],
)
def test_sword_rotation(hero, controls, rotation):
    canvas = RecordingCanvas()
    hero.controls = controls
    hero.tick(0.0, canvas)
    assert canvas.calls[-1][4] == rotation


def test_sword_source_is_flipped_facing_left(hero, weapon):
    canvas = RecordingCanvas()
    hero.controls = Controls(left=True)
    hero.tick(0.0, canvas)
    assert canvas.calls[-1][1][2] == -weapon.w