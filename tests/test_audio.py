import numpy as np
import pygame
import pytest

from gridsnake.audio import SAMPLE_RATE, TONES, AudioPlayer, synth_tone
from gridsnake.events import EventBus, GameEvent
from gridsnake.main import init_pygame


@pytest.fixture
def headless_pygame(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.mixer.quit()
    pygame.quit()


def require_mixer():
    if pygame.mixer.get_init() is None:
        pytest.skip("no audio mixer available")


def assert_tones_match_mixer(player):
    rate, _size, _channels = pygame.mixer.get_init()
    assert player.sample_rate == rate
    for name, (_freq, ms) in TONES.items():
        assert player.sounds[name].get_length() == pytest.approx(ms / 1000, abs=0.005)


def test_startup_mixer_runs_at_tone_rate(headless_pygame):
    init_pygame()
    require_mixer()
    player = AudioPlayer(EventBus())
    assert pygame.mixer.get_init()[0] == SAMPLE_RATE
    assert_tones_match_mixer(player)


def test_tones_follow_an_already_running_mixer(headless_pygame):
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2)
    except pygame.error:
        pytest.skip("no audio mixer available")
    player = AudioPlayer(EventBus())
    assert_tones_match_mixer(player)


def test_move_cue_only_when_flagged(headless_pygame):
    bus = EventBus()
    player = AudioPlayer(bus, enabled=False)
    played = []
    player.play = played.append
    bus.emit(GameEvent.MOVED, cue=False)
    bus.emit(GameEvent.MOVED, cue=True)
    bus.emit(GameEvent.ATE, cell=(1, 1))
    assert played == ["snakeMove", "eatFood"]


def test_synth_tone_shapes():
    stereo = synth_tone(440.0, 100, 8000)
    assert stereo.shape == (800, 2)
    assert stereo.dtype == np.int16
    assert synth_tone(440.0, 100, 8000, channels=1).shape == (800,)
