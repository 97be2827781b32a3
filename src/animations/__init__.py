"""
Pulse rings synthesizer

Pure per-frame animation math:
- oscillators: breathing, swell and per-layer wobble
- cycle_phase: growth/shrink cycle tracker
- squeeze: gated triangular dips on the center layer
- layer_scheduler: per-layer appear/fade and final parameters
- engine: evaluate() and PulseEngine
- presets: named AnimationConfig variants
"""

from .engine import PulseEngine, evaluate
from .presets import get_preset, list_presets

__all__ = [
    "PulseEngine",
    "evaluate",
    "get_preset",
    "list_presets",
]
