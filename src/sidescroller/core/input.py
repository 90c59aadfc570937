"""
Input state merged from asynchronous key events.

Press/release events may arrive at any time; the tick reads the held
state and consumes jump edges at its start.
"""

from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class Action(Enum):
    """Logical actions the player can trigger."""
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    JUMP = auto()


# Lowercase key names; arrows and WASD-style letters both move.
DEFAULT_KEYMAP: dict[str, Action] = {
    "left": Action.MOVE_LEFT,
    "a": Action.MOVE_LEFT,
    "right": Action.MOVE_RIGHT,
    "d": Action.MOVE_RIGHT,
    "space": Action.JUMP,
}


class InputState:
    """Held actions plus pending jump edge."""

    def __init__(self, keymap: dict[str, Action] | None = None) -> None:
        self._keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)
        self._held_keys: set[str] = set()
        self._jump_edge = False

    def action_for(self, key: str) -> Action | None:
        return self._keymap.get(key.lower())

    def key_down(self, key: str) -> Action | None:
        """Register a key press. Returns the mapped action, if any."""
        action = self.action_for(key)
        if action is None:
            return None
        self.press(action, key=key.lower())
        return action

    def key_up(self, key: str) -> Action | None:
        action = self.action_for(key)
        if action is None:
            return None
        self.release(action, key=key.lower())
        return action

    def press(self, action: Action, key: str | None = None) -> None:
        key = key or action.name
        if action == Action.JUMP and not self._is_held(Action.JUMP):
            self._jump_edge = True
        self._held_keys.add(key)

    def release(self, action: Action, key: str | None = None) -> None:
        self._held_keys.discard(key or action.name)

    def _is_held(self, action: Action) -> bool:
        return any(
            self._keymap.get(k) == action or k == action.name
            for k in self._held_keys
        )

    def is_held(self, action: Action) -> bool:
        return self._is_held(action)

    @property
    def left(self) -> bool:
        return self._is_held(Action.MOVE_LEFT)

    @property
    def right(self) -> bool:
        return self._is_held(Action.MOVE_RIGHT)

    def consume_jump(self) -> bool:
        """Return and clear the pending jump edge."""
        edge, self._jump_edge = self._jump_edge, False
        return edge

    def clear_edges(self) -> None:
        self._jump_edge = False
