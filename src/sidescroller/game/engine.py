"""
Game engine: owns one GameState and runs the per-tick pipeline.

Each tick, in order:
    1. boost expiry
    2. difficulty (speed from elapsed run time)
    3. spawning
    4. motion (entities, player walk, jump)
    5. off-screen cleanup and scoring
    6. collision detection and effects
    7. request the next tick, unless the run just ended

The engine never sleeps or reads the system timer itself; time comes
from the injected clock and ticks from the injected scheduler.
"""

import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from sidescroller.core.clock import Clock, MonotonicClock
from sidescroller.core.events import Event, EventBus, EventType
from sidescroller.core.input import Action, InputState
from sidescroller.core.scheduler import Deadline, TickHandle, TickScheduler
from sidescroller.core.state import Phase, StateMachine
from sidescroller.game.collision import Effect, EffectKind, detect, player_hitbox
from sidescroller.game.difficulty import BASE_SPEED, speed_for
from sidescroller.game.entities import Entity, GameState, Player, RunState
from sidescroller.game.kinematics import (
    advance_entities,
    clamp_player_x,
    frame_scale,
    move_player,
    start_jump,
    update_jump,
)
from sidescroller.game.spawner import EntitySpawner
from sidescroller.settings import GameSettings
from sidescroller.storage.highscore import (
    HighScoreStore,
    MemoryHighScoreStore,
    load_high_score,
    save_high_score,
)

logger = logging.getLogger(__name__)


@dataclass
class GameOverReport:
    """Final numbers for a finished run."""

    score: int
    high_score: int
    new_high_score: bool
    duration_ms: float
    ticks: int


class GameEngine:
    """Idle -> Running -> GameOver lifecycle around the tick pipeline."""

    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        clock: Optional[Clock] = None,
        scheduler: Optional[TickScheduler] = None,
        store: Optional[HighScoreStore] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
        input_state: Optional[InputState] = None,
    ):
        self.settings = settings or GameSettings()
        self.clock = clock or MonotonicClock()
        self.scheduler = scheduler or TickScheduler()
        self.store = store or MemoryHighScoreStore()
        self.event_bus = event_bus or EventBus()
        self.input = input_state or InputState()
        self.spawner = EntitySpawner(self.settings, rng)
        self.state_machine = StateMachine()
        self.state_machine.add_listener(self._on_phase_changed)

        self.state = GameState()
        self.state.player.x = self.settings.player_start_x
        self.state.run.obstacle_speed = BASE_SPEED
        self.state.run.high_score = load_high_score(self.store)

        self._boost = Deadline()
        self._boost.on_expire(self._on_boost_expired)
        self._tick_handle: Optional[TickHandle] = None
        self._last_tick_time = 0.0
        self._start_high_score = self.state.run.high_score
        self.last_report: Optional[GameOverReport] = None
        self._unsubscribers: list = []

        logger.info(f"GameEngine ready (high score {self.state.run.high_score})")

    # Read-only views
    @property
    def phase(self) -> Phase:
        return self.state_machine.phase

    @property
    def player(self) -> Player:
        return self.state.player

    @property
    def entities(self) -> List[Entity]:
        return self.state.entities

    @property
    def run(self) -> RunState:
        return self.state.run

    @property
    def score(self) -> int:
        return self.state.run.score

    @property
    def high_score(self) -> int:
        return self.state.run.high_score

    @property
    def is_ticking(self) -> bool:
        return self._tick_handle is not None and self._tick_handle.pending

    # Wiring
    def bind(self, event_bus: Optional[EventBus] = None) -> None:
        """Listen for input and command events on the bus."""
        bus = event_bus or self.event_bus
        self._unsubscribers.extend([
            bus.subscribe(EventType.ACTION_PRESS, self._on_action_event),
            bus.subscribe(EventType.ACTION_RELEASE, self._on_action_event),
            bus.subscribe(EventType.START, lambda e: self.start()),
            bus.subscribe(EventType.RESTART, lambda e: self.restart()),
        ])

    def unbind(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def _on_action_event(self, event: Event) -> None:
        try:
            action = Action[event.data.get("action", "")]
        except KeyError:
            logger.warning(f"Unknown action in event: {event.data}")
            return
        if event.type == EventType.ACTION_PRESS:
            self.input.press(action, key=event.data.get("key"))
        else:
            self.input.release(action, key=event.data.get("key"))

    def _emit(self, event_type: EventType, **data) -> None:
        self.event_bus.emit(Event(event_type, data=data, source="engine"))

    def _on_phase_changed(self, old: Phase, new: Phase) -> None:
        self.state.run.phase = new
        self._emit(EventType.PHASE_CHANGED, old=old.name, new=new.name)

    # Input
    def press(self, action: Action) -> None:
        self.input.press(action)

    def release(self, action: Action) -> None:
        self.input.release(action)

    def key_down(self, key: str) -> Optional[Action]:
        return self.input.key_down(key)

    def key_up(self, key: str) -> Optional[Action]:
        return self.input.key_up(key)

    # Commands
    def start(self) -> bool:
        """Begin a run from IDLE or GAME_OVER."""
        return self._begin_run("start")

    def restart(self) -> bool:
        """Same reset as start(); offered for the game-over screen."""
        return self._begin_run("restart")

    def _begin_run(self, command: str) -> bool:
        if not self.state_machine.can_transition(Phase.RUNNING):
            logger.warning(f"Ignoring {command}: run already in phase {self.phase.name}")
            return False

        now = self.clock.now()
        self._reset(now)
        self.state_machine.transition(Phase.RUNNING)
        self._schedule_tick()

        logger.info(f"Run started ({command}) at t={now:.0f}")
        self._emit(EventType.RUN_STARTED, command=command, time=now)
        return True

    def _reset(self, now: float) -> None:
        high_score = self.state.run.high_score
        self.state = GameState(
            player=Player(x=self.settings.player_start_x),
            entities=[],
            run=RunState(
                score=0,
                high_score=high_score,
                obstacle_speed=BASE_SPEED,
                run_start_time=now,
                phase=self.phase,
            ),
        )
        self._boost.cancel()
        self.input.clear_edges()
        self._last_tick_time = now
        self._start_high_score = high_score
        self.last_report = None
        self.state.player.x = clamp_player_x(self.state.player.x, self.settings)

    def resize(self, width: int, height: int) -> None:
        """Change the play area; keeps the player inside it."""
        self.settings = self.settings.model_copy(
            update={"play_area_width": width, "play_area_height": height}
        )
        self.spawner.settings = self.settings
        self.state.player.x = clamp_player_x(self.state.player.x, self.settings)
        logger.info(f"Play area resized to {width}x{height}")

    # Scheduling
    def _schedule_tick(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
        self._tick_handle = self.scheduler.request(self._on_scheduled_tick)

    def _on_scheduled_tick(self, now: float) -> None:
        self.tick(now)

    def _stop_ticking(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    # Tick pipeline
    def tick(self, now: Optional[float] = None) -> None:
        """Advance the simulation by one tick.

        Does nothing unless the run is RUNNING, so late ticks after a
        game over are harmless.
        """
        if self.phase != Phase.RUNNING:
            logger.debug("Tick ignored: not running")
            return
        if now is None:
            now = self.clock.now()

        run = self.state.run
        player = self.state.player
        s = self.settings

        dt = max(0.0, now - self._last_tick_time)
        self._last_tick_time = max(self._last_tick_time, now)
        scale = frame_scale(dt, s)
        run.ticks += 1

        self._expire_boost(now)
        self._update_difficulty(now)
        self._update_spawning(now)

        advance_entities(self.state.entities, run.obstacle_speed, player.is_boosted, s, scale)
        move_player(player, self.input.left, self.input.right, s, scale)
        if self.input.consume_jump() and start_jump(player, now):
            logger.debug(f"Jump at t={now:.0f}")
            self._emit(EventType.JUMP, time=now)
        update_jump(player, now, s)

        self._remove_off_screen()

        effects = detect(player_hitbox(player, s), self.state.entities)
        if self._apply_effects(effects, now):
            return

        self._schedule_tick()

    def _update_difficulty(self, now: float) -> None:
        run = self.state.run
        speed = speed_for(now - run.run_start_time)
        if speed > run.obstacle_speed:
            logger.info(f"Speed up: {run.obstacle_speed:g} -> {speed:g}")
            run.obstacle_speed = speed

    def _update_spawning(self, now: float) -> None:
        run = self.state.run
        entity = self.spawner.maybe_spawn(now, run.last_spawn_time)
        if entity is None:
            return
        run.last_spawn_time = now
        self.state.entities.append(entity)
        self._emit(EventType.ENTITY_SPAWNED, kind=entity.kind.value, size=entity.width)

    def _remove_off_screen(self) -> None:
        kept = []
        for entity in self.state.entities:
            if not entity.off_screen:
                kept.append(entity)
            elif not entity.is_power_up:
                self._award(self.settings.obstacle_points)
        self.state.entities = kept

    def _award(self, points: int) -> None:
        run = self.state.run
        run.score += points
        self._emit(EventType.SCORE_CHANGED, score=run.score)

        if run.score > run.high_score:
            run.high_score = run.score
            save_high_score(self.store, run.high_score)
            self._emit(EventType.HIGH_SCORE, high_score=run.high_score)

    def _apply_effects(self, effects: List[Effect], now: float) -> bool:
        """Apply collision effects. Returns True if the run ended."""
        collected = set()
        hit: Optional[Effect] = None

        for effect in effects:
            if effect.kind == EffectKind.COLLECT:
                collected.add(id(effect.entity))
                self._activate_boost(now)
            elif effect.kind == EffectKind.HIT:
                hit = effect
                break

        if collected:
            self.state.entities = [e for e in self.state.entities if id(e) not in collected]

        if hit is not None:
            self._game_over(now, hit.entity)
            return True
        return False

    # Boost
    def _activate_boost(self, now: float) -> None:
        player = self.state.player
        refreshed = player.is_boosted
        self._boost.arm(now, self.settings.boost_duration)
        player.is_boosted = True
        player.boost_end_time = self._boost.due_at
        logger.debug(f"Power-up collected, boost until t={player.boost_end_time:.0f}")
        self._emit(EventType.POWERUP_COLLECTED, time=now)
        self._emit(EventType.BOOST_STARTED, until=player.boost_end_time, refreshed=refreshed)

    def _expire_boost(self, now: float) -> None:
        self._boost.poll(now)

    def _on_boost_expired(self) -> None:
        self._clear_boost(self._last_tick_time)

    def _clear_boost(self, now: float) -> None:
        self.state.player.is_boosted = False
        self.state.player.boost_end_time = None
        self._emit(EventType.BOOST_ENDED, time=now)

    # Game over
    def _game_over(self, now: float, obstacle: Entity) -> None:
        self._stop_ticking()
        if self.state.player.is_boosted:
            self._boost.cancel()
            self._clear_boost(now)
        self.state_machine.transition(Phase.GAME_OVER)

        run = self.state.run
        self.last_report = GameOverReport(
            score=run.score,
            high_score=run.high_score,
            new_high_score=run.high_score > self._start_high_score,
            duration_ms=max(0.0, now - run.run_start_time),
            ticks=run.ticks,
        )
        logger.info(
            f"Game over! Score: {run.score} (high score {run.high_score}) "
            f"hit obstacle at x={obstacle.x:.0f}"
        )
        self._emit(
            EventType.GAME_OVER,
            score=run.score,
            high_score=run.high_score,
            new_high_score=self.last_report.new_high_score,
        )
