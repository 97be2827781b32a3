"""
Enums for the pulse rings synthesizer
"""

from enum import Enum, auto


class LayerKind(Enum):
    """
    Renderable layer kinds

    CENTER: Filled central disk with icon overlay, carries the squeeze
    DISK: Filled halo disk behind the center
    RING: Thin stroked outline that expands past the disks
    """
    CENTER = auto()
    DISK = auto()
    RING = auto()


class EnvelopeMode(Enum):
    """
    Global envelope driving the whole layer set

    SWELL: Fast breathing plus slow sine swell, squeeze while swell rises
    CYCLE: Free-running growth/shrink cycle with per-layer appear scheduling
    """
    SWELL = auto()
    CYCLE = auto()


class BlendMode(Enum):
    """Compositing mode requested from the renderer"""
    NORMAL = auto()
    PLUS_LIGHTER = auto()   # Additive, brightens overlapping layers


class PresetID(Enum):
    """Named animation presets"""
    SHAZAM_PULSE = auto()
    PULSE_RINGS = auto()
    SWELL_HALO = auto()
    CLASSIC_RINGS = auto()
    PULSING_RINGS = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATION = auto()   # Engine construction, preset selection
    RENDER_ENGINE = auto()
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
