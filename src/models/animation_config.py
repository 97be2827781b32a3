"""
Animation configuration models

AnimationConfig carries the global envelope tunables plus the ordered layer
list. Instances are built once (presets or config.yaml) and shared
read-only by every frame evaluation.
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.color import Color
from models.enums import EnvelopeMode, LayerKind
from models.layer_config import LayerConfig


def _check_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite non-negative number, got {value}")


@dataclass(frozen=True)
class BarsConfig:
    """Listening indicator bars shown under the rings"""
    count: int = 3
    min_height: float = 12.0
    max_height: float = 30.0
    width: float = 8.0
    spacing: float = 2.0
    frequency: float = 3.0    # radians per second

    def __post_init__(self):
        _check_non_negative("frequency", self.frequency)
        if self.count < 0:
            raise ValueError(f"Bar count must be non-negative, got {self.count}")
        if self.min_height < 0 or self.max_height < self.min_height:
            raise ValueError(
                f"Invalid bar heights: min={self.min_height}, max={self.max_height}"
            )
        if self.width < 0 or self.spacing < 0:
            raise ValueError("Bar width and spacing must be non-negative")


@dataclass(frozen=True)
class AnimationConfig:
    """
    Immutable global envelope + layer configuration

    SWELL mode reads breathing_*/swell_* and free-running ring speeds.
    CYCLE mode reads cycle_duration, growth_end_fraction, max_global_scale,
    appear thresholds and the ring trigger. Squeeze settings apply to both.
    """
    mode: EnvelopeMode
    layers: Tuple[LayerConfig, ...]
    display_name: str = ""

    # Growth/shrink cycle
    cycle_duration: float = 2.0
    growth_end_fraction: float = 0.70
    max_global_scale: float = 1.9

    # Squeeze on the center layer
    squeezes_per_cycle: int = 2
    squeeze_amount: float = 0.06
    squeeze_width: float = 0.12

    # Swell envelope
    breathing_frequency: float = 0.04
    swell_frequency: float = 0.8
    swell_amplitude: float = 0.20

    # Per-disk local wobble
    local_osc_frequency: float = 0.8

    # Surface pulse on disks while growing
    surface_pulse_frequency: float = 0.0
    surface_pulse_scale_amplitude: float = 0.0
    surface_pulse_opacity_amplitude: float = 0.0

    ring_trigger_index: int = 2
    reference_size: float = 420.0

    # Presentation hints for renderers
    mount_scale: float = 1.0
    background: Tuple[Color, Color] = field(
        default_factory=lambda: (Color.from_rgb(5, 148, 255), Color.from_rgb(0, 42, 217))
    )
    bars: Optional[BarsConfig] = None
    caption: str = ""
    subtitle: str = ""

    def __post_init__(self):
        if not isinstance(self.mode, EnvelopeMode):
            raise TypeError(f"Expected EnvelopeMode, got {type(self.mode).__name__}")

        # Lists from YAML are accepted and frozen
        if not isinstance(self.layers, tuple):
            object.__setattr__(self, "layers", tuple(self.layers))

        if not math.isfinite(self.cycle_duration) or self.cycle_duration <= 0:
            raise ValueError(f"cycle_duration must be positive, got {self.cycle_duration}")
        if not 0.0 < self.growth_end_fraction < 1.0:
            raise ValueError(
                f"growth_end_fraction must be within (0, 1), got {self.growth_end_fraction}"
            )
        if not math.isfinite(self.max_global_scale) or self.max_global_scale < 1.0:
            raise ValueError(f"max_global_scale must be >= 1, got {self.max_global_scale}")

        if self.squeezes_per_cycle < 0:
            raise ValueError(f"squeezes_per_cycle must be >= 0, got {self.squeezes_per_cycle}")
        if not 0.0 <= self.squeeze_amount <= 1.0:
            raise ValueError(f"squeeze_amount must be within [0, 1], got {self.squeeze_amount}")
        _check_non_negative("squeeze_width", self.squeeze_width)

        _check_non_negative("breathing_frequency", self.breathing_frequency)
        _check_non_negative("swell_frequency", self.swell_frequency)
        _check_non_negative("swell_amplitude", self.swell_amplitude)
        _check_non_negative("local_osc_frequency", self.local_osc_frequency)
        _check_non_negative("surface_pulse_frequency", self.surface_pulse_frequency)
        _check_non_negative("surface_pulse_scale_amplitude", self.surface_pulse_scale_amplitude)
        _check_non_negative("surface_pulse_opacity_amplitude", self.surface_pulse_opacity_amplitude)
        _check_non_negative("mount_scale", self.mount_scale)
        if not math.isfinite(self.reference_size) or self.reference_size <= 0:
            raise ValueError(f"reference_size must be positive, got {self.reference_size}")
        if self.ring_trigger_index < 0:
            raise ValueError(f"ring_trigger_index must be >= 0, got {self.ring_trigger_index}")

        seen = set()
        for layer in self.layers:
            if layer.id in seen:
                raise ValueError(f"Duplicate layer id: {layer.id}")
            seen.add(layer.id)

        centers = [layer for layer in self.layers if layer.kind == LayerKind.CENTER]
        if len(centers) > 1:
            raise ValueError(f"At most one center layer allowed, got {len(centers)}")

        self._check_scale_references()

    def _check_scale_references(self) -> None:
        """scale_between must name existing non-ring layers without loops"""
        by_id = {layer.id: layer for layer in self.layers}
        for layer in self.layers:
            for ref in layer.scale_between or ():
                if ref not in by_id:
                    raise ValueError(f"Layer {layer.id} is sized from unknown layer {ref}")
                if by_id[ref].kind == LayerKind.RING:
                    raise ValueError(f"Layer {layer.id} cannot be sized from ring {ref}")

        state = {}

        def visit(layer_id: str) -> None:
            if state.get(layer_id) == "done":
                return
            if state.get(layer_id) == "visiting":
                raise ValueError(f"Circular scale_between through {layer_id}")
            state[layer_id] = "visiting"
            for ref in by_id[layer_id].scale_between or ():
                visit(ref)
            state[layer_id] = "done"

        for layer in self.layers:
            visit(layer.id)

    # ------------------------------------------------------------
    # Layer helpers
    # ------------------------------------------------------------

    def layers_of(self, kind: LayerKind) -> Tuple[LayerConfig, ...]:
        return tuple(layer for layer in self.layers if layer.kind == kind)

    @property
    def center(self) -> Optional[LayerConfig]:
        centers = self.layers_of(LayerKind.CENTER)
        return centers[0] if centers else None

    @property
    def ring_trigger_threshold(self) -> float:
        """
        Appear threshold of the disk that triggers the rings.

        The index is clamped to the last disk; without disks rings start
        with growth.
        """
        disks = self.layers_of(LayerKind.DISK)
        if not disks:
            return 0.0
        return disks[min(self.ring_trigger_index, len(disks) - 1)].appear_threshold
