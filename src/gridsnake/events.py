# events.py
from __future__ import annotations
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, DefaultDict, List
import logging

logger = logging.getLogger(__name__)


class GameEvent(str, Enum):
    STARTED = "started"
    COUNTDOWN = "countdown"                # value
    MOVED = "moved"                        # cue
    ATE = "ate"                            # cell
    HIT = "hit"                            # reason
    GAME_OVER = "game_over"                # won, length
    SCORE_CHANGED = "score_changed"        # length
    HIGH_SCORE_CHANGED = "high_score_changed"  # value
    PAUSED = "paused"
    RESUMED = "resumed"
    PHASE_CHANGED = "phase_changed"        # phase


Handler = Callable[..., Any]


class EventBus:
    """Fan-out of game events to subscribed collaborators (audio, HUD, ...)."""

    def __init__(self) -> None:
        self._handlers: DefaultDict[GameEvent, List[Handler]] = defaultdict(list)

    def subscribe(self, event: GameEvent, handler: Handler) -> None:
        self._handlers[event].append(handler)

    def unsubscribe(self, event: GameEvent, handler: Handler) -> None:
        if handler in self._handlers[event]:
            self._handlers[event].remove(handler)

    def emit(self, event: GameEvent, **payload: Any) -> None:
        logger.debug("%s %s", event.value, payload)
        for handler in list(self._handlers[event]):
            handler(**payload)
