"""Periodic spawning of obstacles and power-ups at the right edge."""

import logging
import random
from typing import Optional

from sidescroller.game.entities import Entity, EntityKind
from sidescroller.settings import GameSettings

logger = logging.getLogger(__name__)


class EntitySpawner:
    """Decides when to spawn and what.

    Spawning fires once the configured interval has strictly elapsed since
    the previous spawn. A run that has not spawned anything yet spawns on
    its first tick.
    """

    def __init__(self, settings: GameSettings, rng: Optional[random.Random] = None):
        self.settings = settings
        self._rng = rng or random.Random()

    def due(self, now: float, last_spawn_time: Optional[float], interval: float) -> bool:
        if last_spawn_time is None:
            return True
        return now - last_spawn_time > interval

    def maybe_spawn(
        self,
        now: float,
        last_spawn_time: Optional[float],
        interval: Optional[float] = None,
    ) -> Optional[Entity]:
        """Return a new entity if the interval has elapsed, else None.

        The caller records ``now`` as the new last spawn time when an
        entity is returned.
        """
        if interval is None:
            interval = self.settings.spawn_interval
        if not self.due(now, last_spawn_time, interval):
            return None

        if self._rng.random() < self.settings.powerup_chance:
            entity = self.create_power_up()
        else:
            entity = self.create_obstacle()
        logger.debug(f"Spawned {entity.kind.value} size={entity.width:.1f} at t={now:.0f}")
        return entity

    def create_obstacle(self) -> Entity:
        s = self.settings
        size = s.obstacle_min_size + self._rng.random() * (s.obstacle_max_size - s.obstacle_min_size)
        return Entity(
            x=float(s.play_area_width),
            y=s.ground_y - size,
            width=size,
            height=size,
            kind=EntityKind.OBSTACLE,
        )

    def create_power_up(self) -> Entity:
        s = self.settings
        size = s.powerup_size
        return Entity(
            x=float(s.play_area_width),
            y=s.ground_y - size,
            width=size,
            height=size,
            kind=EntityKind.POWER_UP,
        )
