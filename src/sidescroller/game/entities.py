"""Game objects: entities, the player and per-run state."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from sidescroller.core.state import Phase


class EntityKind(Enum):
    OBSTACLE = "obstacle"
    POWER_UP = "power_up"


@dataclass
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(eq=False)
class Entity:
    """Something scrolling toward the player. Compared by identity."""

    x: float
    y: float
    width: float
    height: float
    kind: EntityKind = EntityKind.OBSTACLE

    @property
    def is_power_up(self) -> bool:
        return self.kind == EntityKind.POWER_UP

    @property
    def off_screen(self) -> bool:
        return self.x + self.width < 0

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass
class Player:
    x: float = 50.0
    vertical_offset: float = 0.0
    is_jumping: bool = False
    jump_start_time: Optional[float] = None
    is_boosted: bool = False
    boost_end_time: Optional[float] = None
    is_walking: bool = False


@dataclass
class RunState:
    score: int = 0
    high_score: int = 0
    obstacle_speed: float = 3.0
    run_start_time: float = 0.0
    phase: Phase = Phase.IDLE
    last_spawn_time: Optional[float] = None
    ticks: int = 0


@dataclass
class GameState:
    """Everything one run mutates, passed through the tick pipeline."""

    player: Player = field(default_factory=Player)
    entities: List[Entity] = field(default_factory=list)
    run: RunState = field(default_factory=RunState)
