"""Layer configuration model"""

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.color import Color
from models.enums import BlendMode, LayerKind


def _check_unit(name: str, value: float) -> None:
    if not math.isfinite(value) or not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def _check_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"{name} must be a finite non-negative number, got {value}")


@dataclass(frozen=True)
class LayerConfig:
    """
    Immutable description of one renderable layer.

    Opacity runs from base_opacity (not yet appeared) to target_opacity
    (fully appeared); target_opacity=None keeps it constant. A target below
    the base is allowed and gives layers that fade while they progress.

    phase_offset shifts the disk wobble (CYCLE) or the breathing of disks
    and the center (SWELL). phase_offset / progress_offset default to values
    derived from the layer's position among layers of the same kind (see
    layer_scheduler).

    The swell modulation fields are read by the SWELL envelope only:
        counter_phase         disk breathes against the center, 1 + amplitude·(1 − norm)
        scale_between         disk sized at the mean of two other layers' scales
        squeezed              disk follows the center squeeze
        opacity_breath_depth  share of opacity following (1 − norm breathing)
        opacity_swell_depth   share of opacity following the swell
        opacity_squeeze_dip   opacity dip at the squeeze pulse peak
    """
    id: str
    kind: LayerKind
    base_size: float
    base_opacity: float = 1.0
    target_opacity: Optional[float] = None
    amplitude: float = 0.0

    # Appear scheduling (cycle envelope)
    appear_threshold: float = 0.0
    appear_width: float = 0.18

    # Ring geometry / motion
    line_width: float = 1.0
    max_scale: float = 1.8
    speed: float = 0.0
    progress_offset: Optional[float] = None

    phase_offset: Optional[float] = None

    # Swell modulation
    counter_phase: bool = False
    scale_between: Optional[Tuple[str, str]] = None
    scale_bias: float = 1.0
    squeezed: bool = False
    opacity_breath_depth: float = 0.0
    opacity_swell_depth: float = 0.0
    opacity_squeeze_dip: float = 0.0

    color: Color = field(default_factory=Color.white)
    blend_mode: BlendMode = BlendMode.NORMAL
    icon: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Layer id must not be empty")
        if not isinstance(self.kind, LayerKind):
            raise TypeError(f"Expected LayerKind, got {type(self.kind).__name__}")

        _check_non_negative("base_size", self.base_size)
        _check_unit("base_opacity", self.base_opacity)
        if self.target_opacity is not None:
            _check_unit("target_opacity", self.target_opacity)

        _check_finite("amplitude", self.amplitude)

        if not math.isfinite(self.appear_threshold) or not 0.0 <= self.appear_threshold < 1.0:
            raise ValueError(f"appear_threshold must be within [0, 1), got {self.appear_threshold}")
        if not math.isfinite(self.appear_width) or self.appear_width <= 0.0:
            raise ValueError(f"appear_width must be positive, got {self.appear_width}")

        _check_non_negative("line_width", self.line_width)
        _check_non_negative("max_scale", self.max_scale)
        _check_non_negative("speed", self.speed)
        if self.progress_offset is not None:
            _check_finite("progress_offset", self.progress_offset)
        if self.phase_offset is not None:
            _check_finite("phase_offset", self.phase_offset)

        if self.scale_between is not None:
            # Lists from YAML are accepted and frozen
            if not isinstance(self.scale_between, tuple):
                object.__setattr__(self, "scale_between", tuple(self.scale_between))
            if self.kind != LayerKind.DISK:
                raise ValueError(f"scale_between is only supported on disks, got {self.kind.name}")
            if len(self.scale_between) != 2 or not all(self.scale_between):
                raise ValueError(f"scale_between needs two layer ids, got {self.scale_between}")
            if self.id in self.scale_between:
                raise ValueError(f"Layer {self.id} cannot be sized from itself")
        _check_non_negative("scale_bias", self.scale_bias)
        _check_unit("opacity_breath_depth", self.opacity_breath_depth)
        _check_unit("opacity_swell_depth", self.opacity_swell_depth)
        _check_unit("opacity_squeeze_dip", self.opacity_squeeze_dip)

    @property
    def opacity_range(self) -> tuple:
        """(start, end) opacity pair used for lerping"""
        end = self.base_opacity if self.target_opacity is None else self.target_opacity
        return (self.base_opacity, end)

    @property
    def is_stroked(self) -> bool:
        return self.kind == LayerKind.RING
