import numpy as np

from gridsnake.config import Config
from gridsnake.events import GameEvent
from gridsnake.grid import Direction
from gridsnake.session import GameSession
from gridsnake.simulation import SessionPhase, TickOutcome

STEP = 140


def run_until_over(session, t):
    for _ in range(50):
        t += STEP
        if session.tick(t).finished:
            return t
    raise AssertionError("snake never hit anything")


def test_menu_locks_controls(session):
    assert session.phase is SessionPhase.MENU
    assert not session.steer(Direction.UP)
    assert not session.toggle_pause()
    assert session.tick(5000).outcome is TickOutcome.IDLE
    assert session.view().body == ((0, 6),) * 4


def test_countdown_then_running(session, recorder):
    assert session.start(0)
    assert not session.start(10)
    assert session.phase is SessionPhase.COUNTDOWN
    assert not session.steer(Direction.UP)

    session.tick(999)
    assert session.countdown == 3
    session.tick(1000)
    assert session.countdown == 2
    session.tick(2000)
    assert session.countdown == 1
    assert session.phase is SessionPhase.COUNTDOWN

    result = session.tick(3000)
    assert session.phase is SessionPhase.RUNNING
    assert session.countdown is None
    assert result.outcome is TickOutcome.MOVED
    assert session.view().body[0] == (1, 6)

    assert len(recorder.of(GameEvent.STARTED)) == 1
    assert [p["value"] for p in recorder.of(GameEvent.COUNTDOWN)] == [3, 2, 1]
    phases = [p["phase"] for p in recorder.of(GameEvent.PHASE_CHANGED)]
    assert phases == [SessionPhase.COUNTDOWN, SessionPhase.RUNNING]


def test_pause_keeps_state(session, recorder):
    session.start(0)
    session.tick(3000)
    assert session.toggle_pause()
    assert session.phase is SessionPhase.PAUSED

    before = session.view()
    assert session.tick(10_000).outcome is TickOutcome.IDLE
    assert session.view() == before

    assert session.steer(Direction.UP)
    assert session.sim.queue.pending() == (Direction.UP,)
    assert session.toggle_pause()
    assert session.phase is SessionPhase.RUNNING
    session.tick(10_000)
    assert session.view().body[0] == (1, 5)
    assert len(recorder.of(GameEvent.PAUSED)) == 1
    assert len(recorder.of(GameEvent.RESUMED)) == 1


def test_game_over_after_presentation_delay(session, recorder):
    session.start(0)
    session.tick(3000)
    t = run_until_over(session, 3000)
    assert session.view().body[0] == (19, 6)
    assert [p["reason"] for p in recorder.of(GameEvent.HIT)] == ["wall"]

    # halted, but the game-over screen waits for the delay
    assert session.phase is SessionPhase.RUNNING
    assert not session.steer(Direction.UP)
    assert not session.toggle_pause()
    session.tick(t + 2399)
    assert session.phase is SessionPhase.RUNNING
    session.tick(t + 2400)
    assert session.phase is SessionPhase.GAME_OVER
    assert recorder.of(GameEvent.GAME_OVER) == [{"won": False, "length": 4}]
    assert not session.won


def test_restart(session, recorder):
    assert not session.restart(0)
    session.start(0)
    session.tick(3000)
    t = run_until_over(session, 3000) + 2400
    session.tick(t)
    assert session.phase is SessionPhase.GAME_OVER

    recorder.clear()
    assert session.restart(t)
    assert not session.restart(t)
    session.tick(t + 99)
    assert session.phase is SessionPhase.GAME_OVER
    session.tick(t + 100)
    assert session.phase is SessionPhase.RUNNING
    assert session.view().body[0] == (1, 6)
    assert session.view().alive
    assert recorder.of(GameEvent.SCORE_CHANGED)[0] == {"length": 4}
    assert session.steer(Direction.UP)


def test_filling_board_reveals_a_win(bus, store, recorder):
    cfg = Config(width=2, height=1, start_cell=(0, 0), starter_length=1)
    session = GameSession(cfg, events=bus, high_scores=store, rng=np.random.default_rng(0))
    assert session.view().food == (1, 0)
    session.start(0)
    assert session.tick(3000).outcome is TickOutcome.FILLED
    session.tick(5400)
    assert session.phase is SessionPhase.GAME_OVER
    assert session.won
    assert recorder.of(GameEvent.GAME_OVER) == [{"won": True, "length": 5}]


def test_high_score_loaded_once(store):
    store.value = 12
    session = GameSession(Config(), high_scores=store)
    assert session.view().high_score == 12
