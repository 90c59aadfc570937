"""
Draw list for a game frame.

The engine exposes state only; this module turns it into a flat list of
draw calls that any DrawingSurface can execute.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from sidescroller.game.entities import GameState
from sidescroller.game.collision import player_hitbox
from sidescroller.graphics.primitives import Color, hex_color
from sidescroller.graphics.surface import DrawingSurface
from sidescroller.settings import GameSettings

BACKGROUND: Color = hex_color("#2e3440")
GROUND: Color = hex_color("#3b4252")
OBSTACLE: Color = hex_color("#4c566a")
POWER_UP: Color = hex_color("#ebcb8b")
PLAYER: Color = hex_color("#88c0d0")
PLAYER_BOOSTED: Color = hex_color("#a3be8c")
PLAYER_JUMPING: Color = hex_color("#8fbcbb")

POWER_UP_GLOW = 10


class DrawOp(Enum):
    CLEAR = "clear"
    FILL_RECT = "fill_rect"


@dataclass(frozen=True)
class DrawCall:
    op: DrawOp
    color: Color
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    glow: int = 0
    tag: str = ""


def build_draw_list(state: GameState, settings: GameSettings) -> List[DrawCall]:
    """Clear, ground, entities in spawn order, then the player on top."""
    calls = [DrawCall(DrawOp.CLEAR, BACKGROUND, tag="background")]

    ground_y = settings.ground_y
    calls.append(DrawCall(
        DrawOp.FILL_RECT, GROUND,
        0.0, ground_y, float(settings.play_area_width), float(settings.ground_offset),
        tag="ground",
    ))

    for entity in state.entities:
        if entity.is_power_up:
            calls.append(DrawCall(
                DrawOp.FILL_RECT, POWER_UP,
                entity.x, entity.y, entity.width, entity.height,
                glow=POWER_UP_GLOW, tag="power_up",
            ))
        else:
            calls.append(DrawCall(
                DrawOp.FILL_RECT, OBSTACLE,
                entity.x, entity.y, entity.width, entity.height,
                tag="obstacle",
            ))

    player = state.player
    if player.is_boosted:
        color, glow = PLAYER_BOOSTED, 6
    elif player.is_jumping:
        color, glow = PLAYER_JUMPING, 0
    else:
        color, glow = PLAYER, 0
    box = player_hitbox(player, settings)
    calls.append(DrawCall(DrawOp.FILL_RECT, color, box.x, box.y, box.width, box.height, glow=glow, tag="player"))
    return calls


def render_draw_list(calls: List[DrawCall], surface: DrawingSurface) -> None:
    for call in calls:
        if call.op == DrawOp.CLEAR:
            surface.clear(call.color)
        else:
            surface.fill_rect(call.x, call.y, call.width, call.height, call.color, glow=call.glow)
