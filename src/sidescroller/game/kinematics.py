"""Per-tick motion: scrolling entities, player walking and the jump arc."""

from typing import Iterable

from sidescroller.game.entities import Entity, Player
from sidescroller.settings import GameSettings


def frame_scale(dt_ms: float, settings: GameSettings) -> float:
    """Multiplier for per-tick displacements.

    1.0 in the default per-tick mode. With ``scale_by_elapsed`` the
    displacement follows real elapsed time relative to a 60 Hz frame.
    Negative dt is clamped to zero.
    """
    if not settings.scale_by_elapsed:
        return 1.0
    return max(0.0, dt_ms) / settings.reference_frame_ms


def scroll_speed(speed: float, boosted: bool, settings: GameSettings) -> float:
    return speed + (settings.boost_scroll_bonus if boosted else 0.0)


def advance_entities(
    entities: Iterable[Entity],
    speed: float,
    boosted: bool,
    settings: GameSettings,
    scale: float = 1.0,
) -> None:
    """Move every entity left by the current scroll speed."""
    step = scroll_speed(speed, boosted, settings) * scale
    for entity in entities:
        entity.x -= step


def move_player(
    player: Player,
    left: bool,
    right: bool,
    settings: GameSettings,
    scale: float = 1.0,
) -> None:
    """Walk the player horizontally, clamped to the play area.

    Left is checked before right, so holding both walks left.
    """
    step = settings.player_speed * scale
    if player.is_boosted:
        step *= settings.boost_player_multiplier

    if left:
        player.x = max(0.0, player.x - step)
        player.is_walking = True
    elif right:
        player.x = min(settings.max_player_x, player.x + step)
        player.is_walking = True
    else:
        player.is_walking = False

    player.x = clamp_player_x(player.x, settings)


def clamp_player_x(x: float, settings: GameSettings) -> float:
    return min(max(0.0, x), max(0.0, settings.max_player_x))


def jump_offset(elapsed_ms: float, duration_ms: float, height: float) -> float:
    """Height of the jump arc: a parabola through 0 at both ends.

    Peaks at exactly ``height`` halfway through ``duration_ms``.
    """
    t = elapsed_ms / duration_ms
    t = min(1.0, max(0.0, t))
    return height * 4 * t * (1 - t)


def start_jump(player: Player, now: float) -> bool:
    """Begin a jump unless one is already in flight."""
    if player.is_jumping:
        return False
    player.is_jumping = True
    player.jump_start_time = now
    player.vertical_offset = 0.0
    return True


def update_jump(player: Player, now: float, settings: GameSettings) -> None:
    if not player.is_jumping or player.jump_start_time is None:
        player.vertical_offset = 0.0
        return

    elapsed = max(0.0, now - player.jump_start_time)
    if elapsed >= settings.jump_duration:
        player.is_jumping = False
        player.jump_start_time = None
        player.vertical_offset = 0.0
        return

    player.vertical_offset = jump_offset(elapsed, settings.jump_duration, settings.jump_height)
