"""Wavetable voices mixed into an interleaved stereo frame."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import MutableSequence, Sequence

CHROMATIC_RATIO = 1.059463094359295264562
TAU = 6.283185307179586476925
PRACTICALLY_SILENT = 0.001
REFERENCE_PITCH = 57
REFERENCE_FREQUENCY = 440.0


def note_frequency(pitch: float) -> float:
    """Return the frequency of a pitch counted in semitones, 57 being 440 Hz."""
    return CHROMATIC_RATIO ** (pitch - REFERENCE_PITCH) * REFERENCE_FREQUENCY


def waveform_length(pitch: float, sample_rate: int) -> int:
    """Return the number of samples in one period of ``pitch``, rounded."""
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    return int(sample_rate / note_frequency(pitch) + 0.5)


def sine_table(length: int) -> list[float]:
    """Return one period of a sine wave sampled ``length`` times."""
    if length <= 0:
        raise ValueError("table length must be positive")
    step = TAU / length
    return [math.sin(i * step) for i in range(length)]


@dataclass
class Voice:
    """A wavetable oscillator with volume, stereo pan and running phase."""

    waveform: Sequence[float]
    volume: float = 1.0
    pan: float = 0.5
    frequency: float = REFERENCE_FREQUENCY
    phase: float = 0.0

    def speak(
        self,
        buffer: MutableSequence[float],
        offset: int,
        count: int,
        sample_rate: int,
    ) -> None:
        """Add ``count`` interleaved stereo samples to ``buffer`` at ``offset``.

        A voice whose volume is practically silent zeroes the span instead.
        """
        if self.volume <= PRACTICALLY_SILENT:
            for i in range(offset, offset + count):
                buffer[i] = 0.0
            return
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if not self.waveform:
            raise ValueError("voice has an empty waveform")
        increment = self.frequency / sample_rate
        length = len(self.waveform)
        for i in range(offset, offset + count - 1, 2):
            self.phase += increment
            if self.phase > 1:
                self.phase -= 1
            index = int(self.phase * length) % length
            sample = self.waveform[index] * self.volume
            buffer[i] += sample * (1 - self.pan)
            buffer[i + 1] += sample * self.pan


def mix_frame(voices: Sequence[Voice], samples_per_frame: int, sample_rate: int) -> list[float]:
    """Render one frame of all ``voices`` and average them."""
    if samples_per_frame < 0:
        raise ValueError("frame size must not be negative")
    frame = [0.0] * samples_per_frame
    for voice in voices:
        voice.speak(frame, 0, samples_per_frame, sample_rate)
    if len(voices) > 1:
        frame = [sample / len(voices) for sample in frame]
    return frame