"""Simulation: entities, spawning, motion, collisions and the engine."""

from sidescroller.game.entities import Entity, EntityKind, GameState, Player, Rect, RunState
from sidescroller.game.engine import GameEngine, GameOverReport

__all__ = [
    "Entity",
    "EntityKind",
    "GameState",
    "Player",
    "Rect",
    "RunState",
    "GameEngine",
    "GameOverReport",
]
