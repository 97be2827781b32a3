"""
Pulse Engine

Pure per-frame synthesizer: (time, viewport, config) → ordered layer
parameters. Nothing here keeps state between calls, so frames can be
skipped, repeated or replayed at any cadence.
"""

import math
from typing import Tuple

from animations import oscillators
from animations.bars import evaluate_bars
from animations.cycle_phase import compute_cycle_phase
from animations.layer_scheduler import ring_progress, ring_shrink_fade, schedule_layers
from animations.squeeze import squeeze_multiplier, surface_pulse, triangular_pulse
from models.animation_config import AnimationConfig
from models.enums import EnvelopeMode, LogCategory
from models.frame import FrameGlobals, FrameParameters, PulseFrame, Viewport
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATION)


def _cycle_globals(t: float, fit: float, config: AnimationConfig) -> FrameGlobals:
    cp = compute_cycle_phase(
        t,
        config.cycle_duration,
        config.growth_end_fraction,
        config.max_global_scale,
    )
    gate = 1.0 if cp.is_growing else 0.0

    squeeze = squeeze_multiplier(
        cp.growth_progress,
        config.squeezes_per_cycle,
        config.squeeze_width,
        config.squeeze_amount,
        gate,
    )

    return FrameGlobals(
        t=t,
        # wobble restarts with every cycle so cycles replay exactly
        local_time=cp.phase * config.cycle_duration,
        fit_scale=fit,
        is_growing=cp.is_growing,
        growth_progress=cp.growth_progress,
        shrink_progress=cp.shrink_progress,
        global_scale=cp.global_scale,
        squeeze=squeeze,
        pulse=triangular_pulse(cp.growth_progress, config.squeezes_per_cycle, config.squeeze_width) * gate,
        surface_pulse=surface_pulse(cp.growth_progress, config.surface_pulse_frequency, cp.is_growing),
        ring_progress=ring_progress(cp.growth_progress, config.ring_trigger_threshold, cp.is_growing),
        ring_shrink_fade=ring_shrink_fade(cp.shrink_progress, cp.is_growing),
    )


def _swell_globals(t: float, fit: float, config: AnimationConfig) -> FrameGlobals:
    swell = oscillators.swell_norm(t, config.swell_frequency)
    rising = oscillators.swell_rising(t, config.swell_frequency)
    gate = 1.0 if rising else 0.0

    squeeze = squeeze_multiplier(
        swell,
        config.squeezes_per_cycle,
        config.squeeze_width,
        config.squeeze_amount,
        gate,
    )

    return FrameGlobals(
        t=t,
        local_time=t,
        fit_scale=fit,
        is_growing=rising,
        growth_progress=swell,
        shrink_progress=0.0,
        global_scale=1.0 + config.swell_amplitude * swell,
        breathing=oscillators.breathing(t, config.breathing_frequency),
        squeeze=squeeze,
        pulse=triangular_pulse(swell, config.squeezes_per_cycle, config.squeeze_width) * gate,
    )


def compute_frame_globals(t: float, viewport: Viewport, config: AnimationConfig) -> FrameGlobals:
    """Frame-wide scalars computed once per tick"""
    if not math.isfinite(t):
        raise ValueError(f"Animation time must be finite, got {t}")

    fit = viewport.fit_scale(config.reference_size)
    if config.mode == EnvelopeMode.CYCLE:
        return _cycle_globals(t, fit, config)
    return _swell_globals(t, fit, config)


def evaluate(t: float, viewport: Viewport, config: AnimationConfig) -> Tuple[FrameParameters, ...]:
    """
    Evaluate every layer at time t.

    Args:
        t: Animation clock in seconds (arbitrary epoch)
        viewport: Current drawing surface size
        config: Immutable animation configuration

    Returns:
        FrameParameters in the same order as config.layers
    """
    return schedule_layers(config, compute_frame_globals(t, viewport, config))


class PulseEngine:
    """
    Thin wrapper binding one AnimationConfig to the pure evaluate().

    Holds no per-frame state; the config is read-only.
    """

    def __init__(self, config: AnimationConfig):
        self.config = config
        log.info(
            f"PulseEngine ready: {config.display_name or config.mode.name}",
            mode=config.mode.name,
            layers=len(config.layers),
            bars=config.bars.count if config.bars else 0,
        )

    def evaluate(self, t: float, viewport: Viewport) -> Tuple[FrameParameters, ...]:
        return evaluate(t, viewport, self.config)

    def frame(self, t: float, viewport: Viewport) -> PulseFrame:
        """Layers plus listening bars for one tick"""
        bars = evaluate_bars(t, self.config.bars) if self.config.bars else ()
        return PulseFrame(timestamp=t, layers=self.evaluate(t, viewport), bars=bars)
