"""Axis-aligned overlap tests between the player and entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List

from sidescroller.game.entities import Entity, Player, Rect
from sidescroller.settings import GameSettings


class EffectKind(Enum):
    COLLECT = "collect"
    HIT = "hit"


@dataclass
class Effect:
    kind: EffectKind
    entity: Entity


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Inclusive overlap test: rectangles that only touch still overlap."""
    return not (
        b.x > a.right
        or b.right < a.x
        or b.y > a.bottom
        or b.bottom < a.y
    )


def player_hitbox(player: Player, settings: GameSettings) -> Rect:
    """Hitbox in screen coordinates (y grows downward), raised by the jump."""
    return Rect(
        x=player.x,
        y=settings.ground_y - settings.player_height - player.vertical_offset,
        width=settings.player_width,
        height=settings.player_height,
    )


def detect(hitbox: Rect, entities: Iterable[Entity]) -> List[Effect]:
    """Collect collision effects without touching the entity list.

    Every overlapping power-up yields COLLECT. The first overlapping
    obstacle yields HIT and ends the scan.
    """
    effects: List[Effect] = []
    for entity in entities:
        if not rects_overlap(hitbox, entity.rect):
            continue
        if entity.is_power_up:
            effects.append(Effect(EffectKind.COLLECT, entity))
        else:
            effects.append(Effect(EffectKind.HIT, entity))
            break
    return effects
