"""
Listening bars

Small capsules under the rings, each following its own phase-shifted sine.
"""

import math
from typing import Tuple

from animations.oscillators import TWO_PI, cycles
from models.animation_config import BarsConfig
from models.frame import BarParameters


def bar_height(t: float, index: int, config: BarsConfig) -> float:
    # sine 0→1, one radian apart per bar
    angle = TWO_PI * cycles(t, config.frequency / TWO_PI)
    wave = math.sin(angle + (index + 1)) * 0.5 + 0.5
    return config.min_height + wave * (config.max_height - config.min_height)


def evaluate_bars(t: float, config: BarsConfig) -> Tuple[BarParameters, ...]:
    return tuple(
        BarParameters(index=i, height=bar_height(t, i, config), width=config.width)
        for i in range(config.count)
    )
