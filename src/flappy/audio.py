"""
audio.py: Synthesized sound effects.

Both effects are short oscillator sweeps rendered once into 16-bit PCM
buffers. Any mixer failure disables sound; nothing is raised to callers.
"""

import array
import logging
import math
from typing import Dict, Optional

import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def sweep(
    start_freq: float,
    end_freq: float,
    ramp: float,
    duration: float,
    start_gain: float,
    end_gain: float,
) -> array.array:
    """
    Sine oscillator whose frequency ramps exponentially from start_freq to
    end_freq over ``ramp`` seconds while the gain decays exponentially from
    start_gain to end_gain over ``duration`` seconds.
    """
    samples = array.array("h")
    total = int(SAMPLE_RATE * duration)
    phase = 0.0
    for i in range(total):
        t = i / SAMPLE_RATE
        freq = start_freq * (end_freq / start_freq) ** min(t / ramp, 1.0)
        gain = start_gain * (end_gain / start_gain) ** (t / duration)
        phase += 2 * math.pi * freq / SAMPLE_RATE
        samples.append(int(32767 * gain * math.sin(phase)))
    return samples


class SoundEffects:
    """Bounce and game-over sounds. Fire and forget."""

    def __init__(self, muted: bool = False):
        self.muted = muted
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

    @property
    def enabled(self) -> bool:
        return self._initialized and not self.muted

    def init_audio(self) -> bool:
        """Initializes the mixer once. Returns False when audio is unavailable."""
        if self._initialized:
            return True
        if self.muted:
            return False
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 1024)
            pygame.mixer.init()
            self._sounds = {
                "bounce": self._create_sound(sweep(220, 440, 0.1, 0.2, 0.3, 0.01)),
                "game_over": self._create_sound(sweep(330, 165, 0.5, 0.8, 0.4, 0.01)),
            }
            self._initialized = True
            logger.info("Audio initialized")
        except pygame.error as e:
            logger.warning(f"Audio unavailable, sound disabled: {e}")
            self._sounds = {}
        return self._initialized

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (duplicated to stereo)."""
        stereo = array.array("h")
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def _play(self, name: str):
        if not self.enabled:
            return
        sound: Optional[pygame.mixer.Sound] = self._sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            logger.warning(f"Failed to play {name}: {e}")

    def play_bounce_sound(self):
        self._play("bounce")

    def play_game_over_sound(self):
        self._play("game_over")
