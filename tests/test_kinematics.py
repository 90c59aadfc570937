import pytest

from sidescroller.game.entities import Entity, EntityKind, Player
from sidescroller.game.kinematics import (
    advance_entities,
    frame_scale,
    jump_offset,
    move_player,
    start_jump,
    update_jump,
)
from sidescroller.settings import GameSettings


def test_entities_scroll_by_speed(settings):
    obstacle = Entity(x=800, y=330, width=30, height=30)
    advance_entities([obstacle], 3, False, settings)
    assert obstacle.x == 797


def test_boost_adds_to_scroll_speed(settings):
    obstacle = Entity(x=800, y=330, width=30, height=30)
    power_up = Entity(x=500, y=335, width=25, height=25, kind=EntityKind.POWER_UP)
    advance_entities([obstacle, power_up], 3, True, settings)
    assert obstacle.x == 794
    assert power_up.x == 494


def test_left_clamped_at_zero(settings):
    player = Player(x=0)
    for _ in range(10):
        move_player(player, left=True, right=False, settings=settings)
    assert player.x == 0


def test_right_clamped_at_play_area_edge(settings):
    player = Player(x=735)
    move_player(player, left=False, right=True, settings=settings)
    assert player.x == settings.play_area_width - settings.player_width


def test_left_takes_precedence(settings):
    player = Player(x=100)
    move_player(player, left=True, right=True, settings=settings)
    assert player.x == 95
    assert player.is_walking


def test_no_input_leaves_player_still(settings):
    player = Player(x=100, is_walking=True)
    move_player(player, left=False, right=False, settings=settings)
    assert player.x == 100
    assert not player.is_walking


def test_boosted_player_moves_faster(settings):
    player = Player(x=100, is_boosted=True)
    move_player(player, left=False, right=True, settings=settings)
    assert player.x == pytest.approx(107.5)


def test_jump_offset_shape():
    assert jump_offset(0, 600, 100) == 0
    assert jump_offset(300, 600, 100) == 100
    assert jump_offset(600, 600, 100) == 0
    assert jump_offset(150, 600, 100) == pytest.approx(75)


def test_jump_offset_clamps_out_of_range_time():
    assert jump_offset(-50, 600, 100) == 0
    assert jump_offset(900, 600, 100) == 0


def test_jump_offset_is_continuous():
    samples = [jump_offset(ms, 600, 100) for ms in range(0, 601)]
    steps = [abs(b - a) for a, b in zip(samples, samples[1:])]
    assert max(steps) < 1.0
    assert max(samples) == 100


def test_jump_lifecycle(settings):
    player = Player()
    assert not player.is_jumping

    assert start_jump(player, 1000)
    update_jump(player, 1000, settings)
    assert player.is_jumping
    assert player.vertical_offset == 0

    update_jump(player, 1300, settings)
    assert player.vertical_offset == settings.jump_height

    update_jump(player, 1600, settings)
    assert not player.is_jumping
    assert player.vertical_offset == 0
    assert player.jump_start_time is None


def test_no_double_jump():
    player = Player()
    assert start_jump(player, 1000)
    assert not start_jump(player, 1100)
    assert player.jump_start_time == 1000


def test_frame_scale_defaults_to_one_per_tick(settings):
    assert frame_scale(50, settings) == 1.0


def test_frame_scale_follows_elapsed_time():
    settings = GameSettings(scale_by_elapsed=True)
    assert frame_scale(settings.reference_frame_ms * 2, settings) == pytest.approx(2.0)
    assert frame_scale(-10, settings) == 0.0
