# simulation.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
import logging

import numpy as np  # type: ignore

from .body import SnakeBody
from .config import Config, CFG
from .direction_queue import DirectionQueue
from .events import EventBus, GameEvent
from .food import place_new_food
from .grid import Board, Cell, Direction
from .scores import HighScoreStore, MemoryHighScoreStore

logger = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    MENU = "menu"
    COUNTDOWN = "countdown"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class TickOutcome(str, Enum):
    IDLE = "idle"        # nothing moved this frame
    MOVED = "moved"
    ATE = "ate"
    HIT = "hit"          # wall or self collision, the game is over
    FILLED = "filled"    # no free cell left for food, the game is won


@dataclass(frozen=True)
class TickResult:
    outcome: TickOutcome
    head: Optional[Cell] = None
    reason: Optional[str] = None  # "wall" | "self" on HIT
    length: int = 0

    @property
    def finished(self) -> bool:
        return self.outcome in (TickOutcome.HIT, TickOutcome.FILLED)


IDLE = TickResult(TickOutcome.IDLE)


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot handed to renderers."""
    body: Tuple[Cell, ...]
    food: Optional[Cell]
    heading: Direction
    phase: SessionPhase
    alive: bool
    length: int
    target_score: int
    high_score: int
    win_length: int
    board: Board


class Simulation:
    """
    Owns the snake body, the direction queue, the food and the phase.

    Collaborators talk to it through enqueue()/tick() and subscribe to the
    event bus; they never get a mutable handle on its state.
    """

    def __init__(
        self,
        config: Config = CFG,
        events: Optional[EventBus] = None,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config
        self.board = Board(config.width, config.height)
        self.events = events if events is not None else EventBus()
        self.high_scores = high_scores if high_scores is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)

        self.phase = SessionPhase.MENU
        self.body = SnakeBody(config.start_cell)
        self.queue = DirectionQueue()
        self.heading = Direction.RIGHT
        self.food: Optional[Cell] = None
        self.alive = True
        self.target_score = 0
        self.high_score = self.high_scores.load() or 0
        self.last_move_time: Optional[float] = None
        self.previous_move: Optional[Direction] = None
        self.first_move_pending = True

        self.reset(announce=False)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self, announce: bool = True) -> None:
        """Fresh body, heading, queue and food. Phase is left to the session.

        With announce=False the starting length becomes the target score
        silently, without touching the high score.
        """
        self.body.reset(self.config.start_cell, self.config.starter_length)
        self.heading = Direction.RIGHT
        self.queue.seed(Direction.RIGHT)
        self.previous_move = None
        self.first_move_pending = True
        self.last_move_time = None
        self.alive = True
        self.target_score = 0

        self.food = place_new_food(self.board, self.body, self.food, self.rng)
        if announce:
            self.update_length()
        else:
            self.target_score = len(self.body)
        logger.debug("Reset: body=%s food=%s", self.body.cells(), self.food)

    def enqueue(self, candidate) -> bool:
        return self.queue.enqueue(candidate, self.heading)

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------
    def tick(self, now: float) -> TickResult:
        """
        Advance the snake by one cell if the movement interval has elapsed.
        Does nothing unless the phase is RUNNING and the snake is alive.
        """
        if self.phase is not SessionPhase.RUNNING or not self.alive:
            return IDLE
        if self.last_move_time is not None and now - self.last_move_time < self.config.move_interval_ms:
            return IDLE
        self.last_move_time = now

        cue = self._update_heading()
        new_head = self.body.compute_new_head(self.heading)

        # Wall first, then the body minus the tail cell vacated this step
        if not self.board.in_bounds(new_head):
            return self._halt(new_head, "wall")
        if self.body.contains_at(new_head, excluding_tail=True):
            return self._halt(new_head, "self")

        self.body.shift_tail()
        ate = new_head == self.food
        self.body.commit_head(new_head)

        outcome = TickOutcome.MOVED
        if ate:
            outcome = self._eat(new_head)

        self.events.emit(GameEvent.MOVED, cue=cue)
        return TickResult(outcome, head=new_head, length=len(self.body))

    def _update_heading(self) -> bool:
        """Drain one queued move. Returns whether the move cue should sound."""
        move = self.queue.dequeue()
        if move is None:
            return False

        cue = (
            move.direction is not self.previous_move
            and not self.first_move_pending
            and not move.contradicting
        )
        if move.direction is not self.heading.opposite():
            self.heading = move.direction

        self.previous_move = move.direction
        self.first_move_pending = False
        return cue

    def _eat(self, cell: Cell) -> TickOutcome:
        self.events.emit(GameEvent.ATE, cell=cell)
        self.food = place_new_food(self.board, self.body, self.food, self.rng)
        self.body.grow(self.config.growth_increment)
        self.update_length()

        if self.food is None:
            logger.info("Board filled at length %d", len(self.body))
            self.alive = False
            return TickOutcome.FILLED
        return TickOutcome.ATE

    def _halt(self, new_head: Cell, reason: str) -> TickResult:
        logger.info("Snake hit %s at %s (length %d)", reason, new_head, len(self.body))
        self.alive = False
        self.events.emit(GameEvent.HIT, reason=reason)
        return TickResult(TickOutcome.HIT, head=new_head, reason=reason, length=len(self.body))

    # ------------------------------------------------------------------
    # Score
    # ------------------------------------------------------------------
    def update_length(self) -> None:
        length = len(self.body)
        if length <= self.target_score:
            return

        self.target_score = length
        self.events.emit(GameEvent.SCORE_CHANGED, length=length)

        if length > self.high_score:
            self.high_score = length
            self.high_scores.save(length)
            self.events.emit(GameEvent.HIGH_SCORE_CHANGED, value=length)

    @property
    def won(self) -> bool:
        return self.food is None or len(self.body) >= self.config.win_length

    def view(self) -> GameView:
        return GameView(
            body=self.body.cells(),
            food=self.food,
            heading=self.heading,
            phase=self.phase,
            alive=self.alive,
            length=len(self.body),
            target_score=self.target_score,
            high_score=self.high_score,
            win_length=self.config.win_length,
            board=self.board,
        )
