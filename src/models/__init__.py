"""
Models package - configuration and per-frame data models
"""

from .enums import LayerKind, EnvelopeMode, BlendMode, PresetID, LogLevel, LogCategory
from .color import Color
from .layer_config import LayerConfig
from .animation_config import AnimationConfig, BarsConfig
from .frame import Viewport, FrameGlobals, FrameParameters, BarParameters, PulseFrame

__all__ = [
    'LayerKind',
    'EnvelopeMode',
    'BlendMode',
    'PresetID',
    'LogLevel',
    'LogCategory',
    'Color',
    'LayerConfig',
    'AnimationConfig',
    'BarsConfig',
    'Viewport',
    'FrameGlobals',
    'FrameParameters',
    'BarParameters',
    'PulseFrame',
]
