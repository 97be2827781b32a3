"""
Per-frame models produced by the synthesizer.

✔ Viewport         - drawing surface size for the current frame
✔ FrameParameters  - one layer → scale, opacity, stroke width, blend mode
✔ BarParameters    - one listening bar → height
✔ PulseFrame       - everything a renderer needs for one tick
"""

import time
from dataclasses import dataclass, field
from typing import Dict, Tuple

from models.enums import BlendMode, LayerKind


@dataclass(frozen=True)
class Viewport:
    """Drawing surface size (points/pixels, renderer-defined)"""
    width: float
    height: float

    @property
    def min_side(self) -> float:
        return max(0.0, min(self.width, self.height))

    def fit_scale(self, reference_size: float) -> float:
        """Uniform multiplier keeping proportions across screen sizes"""
        return self.min_side / reference_size


@dataclass(frozen=True)
class FrameGlobals:
    """
    Frame-wide scalars shared by every layer of one tick.

    local_time is the clock the per-layer wobble runs on: cycle-local time
    in CYCLE mode, raw time in SWELL mode.
    """
    t: float
    local_time: float
    fit_scale: float
    is_growing: bool
    growth_progress: float
    shrink_progress: float
    global_scale: float
    breathing: float = 0.0
    squeeze: float = 1.0
    pulse: float = 0.0          # gated squeeze pulse height, 0..1
    surface_pulse: float = 0.0
    ring_progress: float = 1.0
    ring_shrink_fade: float = 1.0


@dataclass(frozen=True)
class FrameParameters:
    """
    Render parameters of ONE layer for ONE frame.

    Renderers apply these values directly, with no easing between ticks.
    """
    layer_id: str
    kind: LayerKind
    scale: float
    opacity: float
    stroke_width: float = 0.0
    blend_mode: BlendMode = BlendMode.NORMAL


@dataclass(frozen=True)
class BarParameters:
    index: int
    height: float
    width: float


@dataclass(frozen=True)
class PulseFrame:
    """
    Full output of one tick.

    timestamp is the animation clock value the frame was evaluated at;
    created_at is wall time, for metrics only.
    """
    timestamp: float
    layers: Tuple[FrameParameters, ...]
    bars: Tuple[BarParameters, ...] = ()
    created_at: float = field(default_factory=time.time, compare=False)

    def by_id(self) -> Dict[str, FrameParameters]:
        return {p.layer_id: p for p in self.layers}
