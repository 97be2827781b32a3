"""
Layer scheduler

Turns frame-wide scalars (FrameGlobals) plus the static layer list into
the ordered per-layer render parameters.

Cycle envelope:
    disks   fade in once growth crosses their threshold, fade out while shrinking
    center  always visible, scaled by the global envelope and the squeeze
    rings   start with the trigger disk, reach full progress at the end of
            growth, stay there through shrink and fade with their own factor

Swell envelope:
    disks   breathing × swell, optionally counter-phased, averaged from other
            layers, squeezed, with opacity following breathing/swell/pulse
    center  breathing × swell × squeeze
    rings   free-running expansion at their own speed
"""

import math
from typing import Dict, List, Tuple

from animations.cycle_phase import clamp01
from animations.oscillators import (
    LOCAL_PHASE_STEP,
    cycles,
    local_oscillation,
    local_phase,
    normalized,
    sine_wave,
)
from models.animation_config import AnimationConfig
from models.enums import EnvelopeMode, LayerKind
from models.frame import FrameGlobals, FrameParameters
from models.layer_config import LayerConfig

# Denominator floor for fades
EPSILON = 1e-4

# Disks grow from 95% to 100% of their size while appearing
APPEAR_SCALE_FLOOR = 0.95


def lerp(start: float, end: float, amount: float) -> float:
    return start + (end - start) * amount


def appear_progress(growth_progress: float, threshold: float, width: float) -> float:
    """Linear 0→1 ramp starting at threshold, complete `width` later"""
    return clamp01((growth_progress - threshold) / max(EPSILON, width))


def ring_progress(growth_progress: float, trigger_threshold: float, is_growing: bool) -> float:
    """Ring appear progress; frozen at 1.0 during shrink"""
    if not is_growing:
        return 1.0
    return clamp01((growth_progress - trigger_threshold) / max(EPSILON, 1.0 - trigger_threshold))


def ring_shrink_fade(shrink_progress: float, is_growing: bool) -> float:
    if is_growing:
        return 1.0
    return max(0.0, 1.0 - shrink_progress)


def _safe_scale(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(0.0, value)


def _safe_opacity(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return clamp01(value)


def _params(layer: LayerConfig, scale: float, opacity: float) -> FrameParameters:
    return FrameParameters(
        layer_id=layer.id,
        kind=layer.kind,
        scale=_safe_scale(scale),
        opacity=_safe_opacity(opacity),
        stroke_width=layer.line_width if layer.is_stroked else 0.0,
        blend_mode=layer.blend_mode,
    )


# ------------------------------------------------------------
# Cycle envelope
# ------------------------------------------------------------

def _cycle_disk(layer: LayerConfig, index: int, g: FrameGlobals, config: AnimationConfig) -> FrameParameters:
    ap = appear_progress(g.growth_progress, layer.appear_threshold, layer.appear_width)
    start, end = layer.opacity_range
    appear_opacity = lerp(start, end, ap)

    phase = layer.phase_offset if layer.phase_offset is not None else local_phase(index)
    wobble = local_oscillation(g.local_time, config.local_osc_frequency, layer.amplitude, phase)

    pulse_scale = 1.0 + config.surface_pulse_scale_amplitude * g.surface_pulse
    pulse_opacity = 1.0 + config.surface_pulse_opacity_amplitude * g.surface_pulse

    appear_scale = (APPEAR_SCALE_FLOOR + (1.0 - APPEAR_SCALE_FLOOR) * ap) * pulse_scale
    scale = g.global_scale * appear_scale * wobble * g.fit_scale

    opacity = appear_opacity if g.is_growing else appear_opacity * max(0.0, 1.0 - g.shrink_progress)
    return _params(layer, scale, opacity * pulse_opacity)


def _cycle_center(layer: LayerConfig, g: FrameGlobals) -> FrameParameters:
    return _params(layer, g.global_scale * g.squeeze * g.fit_scale, layer.base_opacity)


def _cycle_ring(layer: LayerConfig, g: FrameGlobals) -> FrameParameters:
    offset = layer.progress_offset if layer.progress_offset is not None else 0.0
    grow = 1.0 + (layer.max_scale - 1.0) * (g.ring_progress + offset)
    start, end = layer.opacity_range
    opacity = lerp(start, end, g.ring_progress) * g.ring_shrink_fade
    return _params(layer, grow * g.global_scale * g.fit_scale, opacity)


# ------------------------------------------------------------
# Swell envelope
# ------------------------------------------------------------

def _breathing_for(layer: LayerConfig, g: FrameGlobals, config: AnimationConfig) -> float:
    if layer.phase_offset is None:
        return g.breathing
    return sine_wave(g.t, config.breathing_frequency, layer.phase_offset)


def _swell_raw_scales(config: AnimationConfig, g: FrameGlobals) -> Dict[str, float]:
    """
    Disk and center scales before squeeze and viewport fit.

    Layers with scale_between are resolved after the layers they follow;
    AnimationConfig rejects unknown ids and loops.
    """
    by_id = {layer.id: layer for layer in config.layers}
    raw: Dict[str, float] = {}

    def resolve(layer: LayerConfig) -> float:
        if layer.id in raw:
            return raw[layer.id]
        if layer.scale_between is not None:
            first, second = layer.scale_between
            value = (resolve(by_id[first]) + resolve(by_id[second])) * 0.5 * layer.scale_bias
        else:
            b = _breathing_for(layer, g, config)
            breath = 1.0 - normalized(b) if layer.counter_phase else b
            value = (1.0 + layer.amplitude * breath) * g.global_scale
        raw[layer.id] = value
        return value

    for layer in config.layers:
        if layer.kind != LayerKind.RING:
            resolve(layer)
    return raw


def _modulation(depth: float, signal: float) -> float:
    """1 − depth + depth·signal: full signal at depth 1, constant 1 at depth 0"""
    return 1.0 - depth + depth * signal


def _swell_disk(layer: LayerConfig, raw_scale: float, g: FrameGlobals,
                config: AnimationConfig) -> FrameParameters:
    squeeze = g.squeeze if layer.squeezed else 1.0
    scale = raw_scale * squeeze * g.fit_scale

    # swell mode keeps the swell envelope in growth_progress
    opacity = (
        layer.opacity_range[1]
        * _modulation(layer.opacity_breath_depth, 1.0 - normalized(_breathing_for(layer, g, config)))
        * _modulation(layer.opacity_swell_depth, g.growth_progress)
        * (1.0 - layer.opacity_squeeze_dip * g.pulse)
    )
    return _params(layer, scale, opacity)


def _swell_center(layer: LayerConfig, raw_scale: float, g: FrameGlobals) -> FrameParameters:
    return _params(layer, raw_scale * g.squeeze * g.fit_scale, layer.base_opacity)


def free_ring_progress(t: float, speed: float, offset: float) -> float:
    progress = math.fmod(cycles(t, speed) + offset, 1.0)
    if progress < 0.0:
        progress += 1.0
    return clamp01(progress)


def _swell_ring(layer: LayerConfig, index: int, g: FrameGlobals) -> FrameParameters:
    offset = layer.progress_offset if layer.progress_offset is not None else index * LOCAL_PHASE_STEP
    progress = free_ring_progress(g.t, layer.speed, offset)
    scale = (1.0 + progress * (layer.max_scale - 1.0)) * g.fit_scale
    start, end = layer.opacity_range
    return _params(layer, scale, lerp(start, end, progress))


# ------------------------------------------------------------
# Entry point
# ------------------------------------------------------------

def schedule_layers(config: AnimationConfig, g: FrameGlobals) -> Tuple[FrameParameters, ...]:
    """
    Compute FrameParameters for every configured layer, in config order.

    Layer indices used for phase decorrelation count layers of the same kind.
    """
    kind_counters: Dict[LayerKind, int] = {kind: 0 for kind in LayerKind}
    raw = _swell_raw_scales(config, g) if config.mode == EnvelopeMode.SWELL else {}
    out: List[FrameParameters] = []

    for layer in config.layers:
        index = kind_counters[layer.kind]
        kind_counters[layer.kind] += 1

        if config.mode == EnvelopeMode.CYCLE:
            if layer.kind == LayerKind.DISK:
                out.append(_cycle_disk(layer, index, g, config))
            elif layer.kind == LayerKind.CENTER:
                out.append(_cycle_center(layer, g))
            else:
                out.append(_cycle_ring(layer, g))
        else:
            if layer.kind == LayerKind.DISK:
                out.append(_swell_disk(layer, raw[layer.id], g, config))
            elif layer.kind == LayerKind.CENTER:
                out.append(_swell_center(layer, raw[layer.id], g))
            else:
                out.append(_swell_ring(layer, index, g))

    return tuple(out)
