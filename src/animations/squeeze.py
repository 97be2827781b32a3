"""
Pulse / squeeze generator

Short triangular dips in the center layer's scale. A progress value in
[0, 1] is split into `count` equal sub-intervals; each one holds a single
dip centered in the middle of the sub-interval. The gate zeroes the effect
outside the rising (swell) or growing (cycle) window.
"""

import math

from animations.cycle_phase import clamp01


def triangular_pulse(progress: float, count: int, width: float) -> float:
    """
    Pulse height in [0, 1] at `progress`.

    Args:
        progress: Active progress, 0..1
        count: Pulses per unit progress
        width: Fraction of a sub-interval covered by the dip

    Overlapping dips (width >= 1) saturate at 1, they never add up.
    """
    if count <= 0 or width <= 0.0:
        return 0.0
    raw = math.fmod(progress * count, 1.0)
    if raw < 0.0:
        raw += 1.0
    half_width = width * 0.5
    distance = abs(raw - 0.5)
    return clamp01(1.0 - distance / half_width)


def squeeze_multiplier(progress: float, count: int, width: float, amount: float, gate: float) -> float:
    """1 − amount·pulse·gate; exactly 1.0 outside dips or when gated off"""
    if gate <= 0.0 or amount <= 0.0:
        return 1.0
    pulse = triangular_pulse(progress, count, width)
    if pulse <= 0.0:
        return 1.0
    return 1.0 - amount * pulse * clamp01(gate)


def surface_pulse(growth_progress: float, frequency: float, is_growing: bool) -> float:
    """
    Smooth disk surface pulse, 0..1 while growing, 0 otherwise.

    `frequency` counts pulses over the growth segment.
    """
    if not is_growing:
        return 0.0
    raw = math.fmod(growth_progress * frequency, 1.0)
    return math.sin(raw * math.pi * 2.0) * 0.5 + 0.5
