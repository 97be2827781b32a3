"""
Cycle phase tracker

Splits a free-running cycle into a growing and a shrinking segment and
derives the triangular global scale envelope from it.
"""

import math
from dataclasses import dataclass


def clamp01(value: float) -> float:
    """Clamp to [0, 1]; NaN collapses to 0"""
    if value != value:
        return 0.0
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class CyclePhase:
    phase: float            # position inside the cycle, [0, 1)
    is_growing: bool
    growth_progress: float  # 0..1 while growing, 1.0 while shrinking
    shrink_progress: float  # 0.0 while growing, 0..1 while shrinking
    global_scale: float     # 1.0 → max → 1.0

    @property
    def shrink_fade(self) -> float:
        """Opacity factor applied while shrinking"""
        return 1.0 if self.is_growing else max(0.0, 1.0 - self.shrink_progress)


def cycle_position(t: float, cycle_duration: float) -> float:
    """Position of t inside the cycle in [0, 1), also for negative t"""
    phase = math.fmod(t, cycle_duration) / cycle_duration
    if phase < 0.0:
        phase += 1.0
    # fmod of tiny negatives can round up to exactly 1.0
    if phase >= 1.0:
        phase = 0.0
    return phase


def global_scale_for(is_growing: bool, growth_progress: float, shrink_progress: float,
                     max_global_scale: float) -> float:
    extra = max_global_scale - 1.0
    if is_growing:
        return 1.0 + extra * growth_progress
    return 1.0 + extra * (1.0 - shrink_progress)


def compute_cycle_phase(
    t: float,
    cycle_duration: float,
    growth_end_fraction: float,
    max_global_scale: float,
) -> CyclePhase:
    """
    Evaluate the growth/shrink cycle at time t.

    Args:
        t: Animation clock (seconds)
        cycle_duration: Length of one grow+shrink cycle (seconds, > 0)
        growth_end_fraction: Share of the cycle spent growing, (0, 1)
        max_global_scale: Global scale reached at the end of growth (>= 1)

    Returns:
        CyclePhase with clamped progress values
    """
    phase = cycle_position(t, cycle_duration)
    is_growing = phase < growth_end_fraction

    if is_growing:
        growth_progress = clamp01(phase / growth_end_fraction)
        shrink_progress = 0.0
    else:
        growth_progress = 1.0
        shrink_progress = clamp01((phase - growth_end_fraction) / (1.0 - growth_end_fraction))

    return CyclePhase(
        phase=phase,
        is_growing=is_growing,
        growth_progress=growth_progress,
        shrink_progress=shrink_progress,
        global_scale=global_scale_for(is_growing, growth_progress, shrink_progress, max_global_scale),
    )
