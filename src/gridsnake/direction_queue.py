# direction_queue.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import Deque, Optional, Tuple
import logging

from .grid import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueuedMove:
    direction: Direction
    contradicting: bool = False   # reversed the heading in effect when it was queued


class DirectionQueue:
    """
    Buffers directional input between ticks, oldest first.

    A candidate equal to the most recent reference (queue tail, or the live
    heading when nothing is pending) is a no-op and is dropped. A candidate
    that reverses the reference is still queued, flagged as contradicting;
    the simulation refuses the actual reversal when it drains the entry.
    """

    def __init__(self) -> None:
        self._pending: Deque[QueuedMove] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def pending(self) -> Tuple[Direction, ...]:
        return tuple(move.direction for move in self._pending)

    def enqueue(self, candidate, heading: Direction) -> bool:
        """Queue a direction (or input token). Returns True if it was accepted."""
        direction = Direction.from_token(candidate)
        if direction is None:
            logger.debug("Ignoring unrecognised input %r", candidate)
            return False

        reference = self._pending[-1].direction if self._pending else heading
        if direction is reference:
            return False

        contradicting = direction is reference.opposite()
        self._pending.append(QueuedMove(direction, contradicting))
        return True

    def dequeue(self) -> Optional[QueuedMove]:
        if not self._pending:
            return None
        return self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()

    def seed(self, direction: Direction) -> None:
        """Reset to a single implicit move (the opening move after a (re)start)."""
        self._pending.clear()
        self._pending.append(QueuedMove(direction))
