"""
Oscillator bank

Deterministic sine-based signals used by every preset. All functions are
pure; time is seconds on an arbitrary epoch.
"""

import math

TWO_PI = 2.0 * math.pi

# Radians between neighbouring layers' local oscillators
LOCAL_PHASE_STEP = 0.18


def cycles(t: float, frequency_hz: float) -> float:
    """
    Fractional cycles elapsed at t, in (-1, 1).

    t is wrapped to one period before scaling so huge timestamps never
    overflow into sin/cos.
    """
    if frequency_hz == 0.0:
        return 0.0
    return math.fmod(t, 1.0 / frequency_hz) * frequency_hz


def sine_wave(t: float, frequency_hz: float, phase_offset: float = 0.0) -> float:
    """sin(2π·f·t + phase) in [-1, 1]"""
    return math.sin(TWO_PI * cycles(t, frequency_hz) + phase_offset)


def normalized(value: float) -> float:
    """Map [-1, 1] to [0, 1]"""
    return (value + 1.0) / 2.0


def breathing(t: float, frequency_hz: float) -> float:
    """Fast breathing signal in [-1, 1]"""
    return sine_wave(t, frequency_hz)


def swell_norm(t: float, frequency_hz: float) -> float:
    """Slow swell envelope in [0, 1]"""
    return normalized(sine_wave(t, frequency_hz))


def swell_factor(t: float, frequency_hz: float, amplitude: float) -> float:
    """Size multiplier 1 + amplitude·swell, never below 1 for amplitude >= 0"""
    return 1.0 + amplitude * swell_norm(t, frequency_hz)


def swell_rising(t: float, frequency_hz: float) -> bool:
    """True while the swell sine has a positive slope"""
    return math.cos(TWO_PI * cycles(t, frequency_hz)) > 0.0


def local_phase(index: int) -> float:
    return index * LOCAL_PHASE_STEP


def local_oscillation(t: float, frequency_hz: float, amplitude: float, phase_offset: float) -> float:
    """
    Per-layer wobble multiplier around 1.0.

    1 + amplitude·(2·norm − 1), which is 1 + amplitude·sin(...).
    """
    norm = normalized(sine_wave(t, frequency_hz, phase_offset))
    return 1.0 + amplitude * (norm - 0.5) * 2.0
