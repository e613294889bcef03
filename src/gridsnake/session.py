# session.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import heapq
import itertools
import logging

import numpy as np  # type: ignore

from .config import Config, CFG
from .events import EventBus, GameEvent
from .grid import Direction
from .scores import HighScoreStore
from .simulation import GameView, IDLE, SessionPhase, Simulation, TickResult

logger = logging.getLogger(__name__)

# Scheduled actions
COUNTDOWN = "countdown"
RUN = "run"
GAME_OVER = "game_over"
RESTART = "restart"


@dataclass(order=True)
class ScheduledTransition:
    due: float
    seq: int
    action: str = field(compare=False)
    value: Optional[int] = field(compare=False, default=None)


class GameSession:
    """
    Lifecycle around the simulation: menu -> countdown -> running <-> paused -> game over.

    Every delayed step (countdown, start, game-over reveal, restart) is a
    ScheduledTransition fired from tick(), so one clock drives everything.
    """

    def __init__(
        self,
        config: Config = CFG,
        events: Optional[EventBus] = None,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config
        self.sim = Simulation(config, events=events, high_scores=high_scores, rng=rng)
        self.events = self.sim.events
        self.countdown: Optional[int] = None
        self.controls_locked = True
        self.won = False
        self._schedule: List[ScheduledTransition] = []
        self._seq = itertools.count()

    @property
    def phase(self) -> SessionPhase:
        return self.sim.phase

    def view(self) -> GameView:
        return self.sim.view()

    # ------------------------------------------------------------------
    # Commands from the input adapter
    # ------------------------------------------------------------------
    def start(self, now: float) -> bool:
        if self.phase is not SessionPhase.MENU:
            logger.debug("start() ignored in phase %s", self.phase.value)
            return False

        self._set_phase(SessionPhase.COUNTDOWN)
        self.events.emit(GameEvent.STARTED)
        self.countdown = self.config.countdown_seconds
        self.events.emit(GameEvent.COUNTDOWN, value=self.countdown)
        for k in range(1, self.config.countdown_seconds + 1):
            self._schedule_at(now + k * self.config.countdown_step_ms, COUNTDOWN,
                              self.config.countdown_seconds - k)
        self._schedule_at(now + self.config.start_delay_ms, RUN)
        return True

    def steer(self, candidate) -> bool:
        """Queue a direction or input token. Ignored while controls are locked."""
        if self.controls_locked or self.phase not in (SessionPhase.RUNNING, SessionPhase.PAUSED):
            return False
        return self.sim.enqueue(candidate)

    def toggle_pause(self) -> bool:
        if self.controls_locked:
            return False
        if self.phase is SessionPhase.RUNNING:
            self._set_phase(SessionPhase.PAUSED)
            self.events.emit(GameEvent.PAUSED)
            return True
        if self.phase is SessionPhase.PAUSED:
            self._set_phase(SessionPhase.RUNNING)
            self.events.emit(GameEvent.RESUMED)
            return True
        return False

    def restart(self, now: float) -> bool:
        if self.phase is not SessionPhase.GAME_OVER:
            logger.debug("restart() ignored in phase %s", self.phase.value)
            return False
        if any(t.action == RESTART for t in self._schedule):
            return False
        self._schedule_at(now + self.config.restart_delay_ms, RESTART)
        return True

    # ------------------------------------------------------------------
    # Scheduler entry point
    # ------------------------------------------------------------------
    def tick(self, now: float) -> TickResult:
        """Fire due transitions, then let the simulation move if it is running."""
        while self._schedule and self._schedule[0].due <= now:
            self._fire(heapq.heappop(self._schedule))

        if self.phase is not SessionPhase.RUNNING:
            return IDLE

        result = self.sim.tick(now)
        if result.finished:
            self.controls_locked = True
            self._schedule_at(now + self.config.game_over_delay_ms, GAME_OVER)
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _schedule_at(self, due: float, action: str, value: Optional[int] = None) -> None:
        heapq.heappush(self._schedule, ScheduledTransition(due, next(self._seq), action, value))

    def _fire(self, transition: ScheduledTransition) -> None:
        logger.debug("Firing %s at %.0f", transition.action, transition.due)
        if transition.action == COUNTDOWN:
            self.countdown = transition.value or None
            if self.countdown is not None:
                self.events.emit(GameEvent.COUNTDOWN, value=self.countdown)
        elif transition.action == RUN:
            self._begin_play()
        elif transition.action == GAME_OVER:
            self.won = self.sim.won
            self._set_phase(SessionPhase.GAME_OVER)
            self.events.emit(GameEvent.GAME_OVER, won=self.won, length=len(self.sim.body))
        elif transition.action == RESTART:
            self.sim.reset()
            self.won = False
            self._begin_play()

    def _begin_play(self) -> None:
        self.countdown = None
        self.sim.last_move_time = None
        if len(self.sim.queue) == 0:
            self.sim.queue.seed(Direction.RIGHT)
        self.controls_locked = False
        self._set_phase(SessionPhase.RUNNING)

    def _set_phase(self, phase: SessionPhase) -> None:
        if phase is self.sim.phase:
            return
        logger.info("Phase %s -> %s", self.sim.phase.value, phase.value)
        self.sim.phase = phase
        self.events.emit(GameEvent.PHASE_CHANGED, phase=phase)
