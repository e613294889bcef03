"""Grid snake: a headless simulation core with a thin pygame front-end."""

from .config import Config, CFG
from .direction_queue import DirectionQueue, QueuedMove
from .body import SnakeBody
from .events import EventBus, GameEvent
from .food import free_cells, place_new_food
from .grid import Board, Cell, Direction
from .scores import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore
from .session import GameSession, ScheduledTransition
from .simulation import GameView, SessionPhase, Simulation, TickOutcome, TickResult

__all__ = [
    "Config", "CFG",
    "Board", "Cell", "Direction",
    "DirectionQueue", "QueuedMove",
    "SnakeBody",
    "free_cells", "place_new_food",
    "EventBus", "GameEvent",
    "HighScoreStore", "JsonHighScoreStore", "MemoryHighScoreStore",
    "Simulation", "SessionPhase", "TickOutcome", "TickResult", "GameView",
    "GameSession", "ScheduledTransition",
]
