"""
Phase state machine for a single run.

States:
    IDLE: Nothing running, waiting for a start command
    RUNNING: Tick loop active; spawning, motion and collision live
    GAME_OVER: Run ended by a hit, waiting for restart
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Run phases."""
    IDLE = auto()
    RUNNING = auto()
    GAME_OVER = auto()


PhaseListener = Callable[[Phase, Phase], None]


class StateMachine:
    """
    Manages the run phase and its transitions.

    Invalid transitions are rejected and logged; listeners are notified
    after every successful change.
    """

    VALID_TRANSITIONS: list[tuple[Phase, Phase]] = [
        (Phase.IDLE, Phase.RUNNING),       # start
        (Phase.RUNNING, Phase.GAME_OVER),  # hit
        (Phase.GAME_OVER, Phase.RUNNING),  # restart
    ]

    def __init__(self, initial_phase: Phase = Phase.IDLE) -> None:
        self._phase = initial_phase
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with phase: {initial_phase.name}")

    @property
    def phase(self) -> Phase:
        """Get current phase."""
        return self._phase

    def can_transition(self, to_phase: Phase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def transition(self, to_phase: Phase) -> bool:
        """
        Attempt to transition to a new phase.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_phase):
            logger.warning(
                f"Invalid transition: {self._phase.name} -> {to_phase.name}"
            )
            return False

        old_phase = self._phase
        self._phase = to_phase

        logger.info(f"Phase transition: {old_phase.name} -> {to_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, to_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: PhaseListener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
