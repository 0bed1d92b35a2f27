"""Raw 16-bit tone tracks: sines, chords, a chirp, a saw and a canon."""

from __future__ import annotations

import argparse
import math
from enum import IntEnum
from pathlib import Path
from typing import Callable, Iterable, Sequence

PI2 = 2 * math.acos(-1.0)
MAX_AMPLITUDE = 0xFFFF
SAMPLE_RATE = 44100
SECONDS = 4

_STEPS = ("C", "CS", "D", "DS", "E", "F", "FS", "G", "GS", "A", "AS", "B")
_NOTE_NAMES = (
    ["A0", "AS0", "B0"]
    + [step[0] + str(octave) + step[1:] for octave in range(1, 8) for step in _STEPS]
    + ["C8"]
)

# Piano keys numbered 1 (A0) to 88 (C8); a trailing S marks a sharp.
Note = IntEnum("Note", _NOTE_NAMES, start=1)


def piano_frequency(key: int) -> float:
    """Return the frequency of piano key ``key``, key 49 being 440 Hz."""
    return 440.0 * 2 ** ((key - 49.0) / 12.0)


def chord_sample(max_amplitude: int, t: int, sample_rate: float, notes: Sequence[int]) -> int:
    """Return sample ``t`` of the chord of ``notes``, scaled to ``max_amplitude``."""
    if not notes:
        raise ValueError("a chord needs at least one note")
    total = sum(math.sin(PI2 * t * piano_frequency(n) / sample_rate) for n in notes)
    return int(max_amplitude * 0.5 * (len(notes) + total) / len(notes))


def encode_sample(amplitude: int) -> bytes:
    """Encode one 16-bit sample as two bytes.

    The first byte is the high byte; the second keeps only bit 3 of the low byte.
    """
    if not 0 <= amplitude <= MAX_AMPLITUDE:
        raise ValueError(f"amplitude {amplitude} out of 16-bit range")
    return bytes(((amplitude >> 8) & 0xFF, amplitude & 8))


def _sine(freq: float, scale: float = 0.5) -> Callable[[int, float, int], tuple[float, ...]]:
    def sample(t: int, rate: float, n: int) -> tuple[float, ...]:
        return (MAX_AMPLITUDE * scale * (1.0 + math.sin(PI2 * t * freq / rate)),)

    return sample


def _wave(t: int, freq: float, rate: float) -> float:
    return math.sin(PI2 * t * freq / rate)


def _max_min(t, rate, n):
    return (0 if t % 2 == 0 else MAX_AMPLITUDE,)


def _dual(t, rate, n):
    return _sine(100.0)(t, rate, n) + _sine(2000.0)(t, rate, n)


def _sum(t, rate, n):
    return (MAX_AMPLITUDE * 0.25 * (2.0 + _wave(t, 1000.0, rate) + _wave(t, 2000.0, rate)),)


def _sum_ampl(t, rate, n):
    return (
        MAX_AMPLITUDE
        * (1.0 / 12.0)
        * (6.0 + _wave(t, 1000.0, rate) * 5.0 + _wave(t, 2000.0, rate)),
    )


def _sum_phase(t, rate, n):
    shifted = math.sin(PI2 * t * 2000.0 / rate + PI2 / 4.0)
    return (MAX_AMPLITUDE * 0.25 * (2.0 + _wave(t, 500.0, rate) + shifted),)


def _chirp(t, rate, n):
    freq = 20.0 + 19980.0 * t / (n * 2.0)
    return (MAX_AMPLITUDE * 0.5 * (1.0 + _wave(t, freq, rate)),)


def _saw(t, rate, n):
    period = rate / 1000.0
    whole = int(period)
    if whole == 0:
        raise ValueError("sample rate too low for the saw track")
    return (MAX_AMPLITUDE * abs(1.0 - 2.0 * (t % whole) / period),)


def _tune(t, rate, n):
    if t < n // 4:
        key = Note.C4
    elif t < n // 2:
        key = Note.E4
    elif t < 3 * n // 4:
        key = Note.G4
    else:
        key = Note.C5
    return (MAX_AMPLITUDE * 0.5 * (1.0 + _wave(t, piano_frequency(key), rate)),)


def _chord(t, rate, n):
    return (chord_sample(MAX_AMPLITUDE, t, rate, (Note.C4, Note.E4, Note.G4, Note.B4)),)


_TRACKS: dict[str, Callable[[int, float, int], tuple[float, ...]]] = {
    "1000": _sine(1000.0),
    "20": _sine(20.0),
    "2000": _sine(2000.0),
    "10": _sine(10.0),
    "40000": _sine(40000.0),
    "half": _sine(1000.0, 0.25),
    "const": lambda t, rate, n: (MAX_AMPLITUDE,),
    "max_min": _max_min,
    "dual": _dual,
    "sum": _sum,
    "sum_ampl": _sum_ampl,
    "sum_phase": _sum_phase,
    "chirp": _chirp,
    "saw": _saw,
    "tune": _tune,
    "chord": _chord,
}

_N = Note
_CANON: tuple[tuple[int, tuple[int, ...]], ...] = (
    (4, (_N.C3, _N.E4)), (4, (_N.G3, _N.D4)), (4, (_N.A3, _N.C4)), (4, (_N.E3, _N.B3)),
    (4, (_N.F3, _N.A3)), (4, (_N.C3, _N.G3)), (4, (_N.F3, _N.A3)), (4, (_N.G3, _N.B3)),
    (4, (_N.C3, _N.G4, _N.E5)), (4, (_N.G3, _N.B4, _N.D5)),
    (4, (_N.A3, _N.C5)), (4, (_N.E3, _N.G4, _N.B4)),
    (4, (_N.F3, _N.C4, _N.A4)), (4, (_N.C3, _N.G4, _N.G4)),
    (4, (_N.F3, _N.F4, _N.A4)), (4, (_N.G3, _N.D4, _N.B4)),
    (2, (_N.C4, _N.E4, _N.C5)), (2, (_N.C4, _N.E4, _N.C5)),
    (2, (_N.G3, _N.D4, _N.D5)), (2, (_N.G3, _N.D4, _N.B4)),
    (2, (_N.A3, _N.C4, _N.C5)), (2, (_N.A3, _N.C4, _N.E5)),
    (2, (_N.E3, _N.G5)), (2, (_N.E3, _N.G4)),
    (2, (_N.F3, _N.A3, _N.A4)), (2, (_N.F3, _N.A3, _N.F4)),
    (2, (_N.C3, _N.E4)), (2, (_N.C3, _N.G4)),
    (2, (_N.F3, _N.A3, _N.F4)), (2, (_N.F3, _N.A3, _N.C5)),
    (2, (_N.G3, _N.B3, _N.B4)), (2, (_N.G3, _N.B3, _N.G4)),
    (2, (_N.C4, _N.E4, _N.C5)), (1, (_N.C4, _N.E4, _N.E5)), (1, (_N.C4, _N.E4, _N.G5)),
    (1, (_N.G3, _N.G5)), (1, (_N.G3, _N.A5)), (1, (_N.G3, _N.G5)), (1, (_N.G3, _N.F5)),
    (3, (_N.A3, _N.C4, _N.E5)), (1, (_N.A3, _N.C4, _N.E5)),
    (1, (_N.E3, _N.G3, _N.E5)), (1, (_N.E3, _N.G3, _N.F5)),
    (1, (_N.E3, _N.G3, _N.E5)), (1, (_N.E3, _N.G3, _N.D5)),
)


def track_names() -> list[str]:
    """Return the names of every track, in the order they are written."""
    return list(_TRACKS) + ["canon"]


def canon_samples(sample_rate: float = SAMPLE_RATE) -> list[int]:
    """Render the canon: chords held for multiples of 0.375 seconds."""
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    per_unit = int(sample_rate * 0.375)
    return [
        chord_sample(MAX_AMPLITUDE, t, sample_rate, notes)
        for units, notes in _CANON
        for t in range(per_unit * units)
    ]


def render_track(name: str, sample_rate: float = SAMPLE_RATE, nsamples: int | None = None) -> list[int]:
    """Render track ``name`` as a list of 16-bit amplitudes.

    ``nsamples`` defaults to four seconds; the two-channel ``dual`` track
    yields two values per sample and ``canon`` has its own fixed length.
    """
    if sample_rate <= 0:
        raise ValueError("sample rate must be positive")
    if name == "canon":
        return canon_samples(sample_rate)
    try:
        sample = _TRACKS[name]
    except KeyError:
        raise ValueError(f"unknown track {name!r}") from None
    n = int(SECONDS * sample_rate) if nsamples is None else nsamples
    if n < 0:
        raise ValueError("sample count must not be negative")
    return [int(value) for t in range(n) for value in sample(t, sample_rate, n)]


def _encode(amplitudes: Iterable[int]) -> bytes:
    return b"".join(encode_sample(a) for a in amplitudes)


def write_tracks(directory=".", sample_rate: float = SAMPLE_RATE, seconds: float = SECONDS) -> list[Path]:
    """Write every track as ``tmp.<name>.raw`` into ``directory``; return the paths."""
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    nsamples = int(seconds * sample_rate)
    paths = []
    for name in track_names():
        path = folder / f"tmp.{name}.raw"
        path.write_bytes(_encode(render_track(name, sample_rate, nsamples)))
        paths.append(path)
    return paths


def main(argv=None) -> int:
    """Write all tone tracks to a directory."""
    parser = argparse.ArgumentParser(prog="tinkerbox-tones")
    parser.add_argument("--directory", default=".")
    parser.add_argument("--sample-rate", type=float, default=SAMPLE_RATE)
    parser.add_argument("--seconds", type=float, default=SECONDS)
    args = parser.parse_args(argv)
    for path in write_tracks(args.directory, args.sample_rate, args.seconds):
        print(path)
    return 0