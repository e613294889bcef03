# audio.py
from __future__ import annotations
from typing import Dict, Optional
import logging

import numpy as np  # type: ignore
import pygame       # type: ignore

from .events import EventBus, GameEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
VOLUME = 0.5

# name -> (frequency Hz, duration ms)
TONES = {
    "startGame": (660.0, 220),
    "snakeMove": (440.0, 35),
    "eatFood": (880.0, 90),
    "snakeHit": (140.0, 320),
}


def synth_tone(freq: float, duration_ms: int, sample_rate: int = SAMPLE_RATE,
               channels: int = 2) -> np.ndarray:
    """Square-ish tone with a linear fade-out as an int16 buffer, (N,) for mono or (N, channels)."""
    n = max(int(sample_rate * duration_ms / 1000), 1)
    t = np.arange(n) / sample_rate
    wave = np.sign(np.sin(2 * np.pi * freq * t)) * np.linspace(1.0, 0.0, n)
    mono = (wave * 0.3 * np.iinfo(np.int16).max).astype(np.int16)
    if channels == 1:
        return mono
    return np.column_stack([mono] * channels)


class AudioPlayer:
    """Plays short cues in response to simulation events; F toggles mute."""

    def __init__(self, events: EventBus, enabled: bool = True) -> None:
        self.muted = False
        self.sample_rate: Optional[int] = None
        self.sounds: Dict[str, "pygame.mixer.Sound"] = {}
        if enabled:
            self._load()

        events.subscribe(GameEvent.STARTED, lambda: self.play("startGame"))
        events.subscribe(GameEvent.MOVED, self._on_moved)
        events.subscribe(GameEvent.ATE, lambda cell: self.play("eatFood"))
        events.subscribe(GameEvent.HIT, lambda reason: self.play("snakeHit"))

    def _load(self) -> None:
        # A mixer started earlier (e.g. by pygame.init) keeps its own settings,
        # so tones are built for whatever rate the mixer actually runs at.
        if pygame.mixer.get_init() is None:
            try:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
            except pygame.error as exc:
                logger.warning("Audio disabled: %s", exc)
                return
        rate, _size, channels = pygame.mixer.get_init()
        self.sample_rate = rate
        for name, (freq, ms) in TONES.items():
            sound = pygame.sndarray.make_sound(synth_tone(freq, ms, rate, channels))
            sound.set_volume(VOLUME)
            self.sounds[name] = sound

    def _on_moved(self, cue: bool) -> None:
        if cue:
            self.play("snakeMove")

    def toggle_mute(self) -> None:
        self.muted = not self.muted
        for sound in self.sounds.values():
            sound.set_volume(0.0 if self.muted else VOLUME)
        logger.info("Audio %s", "muted" if self.muted else "unmuted")

    def play(self, name: str) -> None:
        if self.muted:
            return
        sound = self.sounds.get(name)
        if sound is not None:
            sound.stop()
            sound.play()
