"""
Color model - RGB color carried by layer configs

Layers only describe their fill/stroke color; opacity is computed per frame
and stays separate so renderers can combine them however they composite.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """
    Immutable 8-bit RGB color

    Examples:
        color = Color.from_rgb(5, 148, 255)
        color = Color.from_unit(0.02, 0.58, 1.0)   # 0..1 components
        r, g, b = color.to_rgb()
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(int(r), int(g), int(b))

    @classmethod
    def from_unit(cls, r: float, g: float, b: float) -> 'Color':
        """
        Create from unit-range components (0.0-1.0)

        Components are clamped before scaling to 0-255.
        """
        def _scale(v: float) -> int:
            return int(round(max(0.0, min(1.0, v)) * 255))
        return cls(_scale(r), _scale(g), _scale(b))

    @classmethod
    def from_hex(cls, value: str) -> 'Color':
        """Create from '#RRGGBB' or 'RRGGBB'"""
        text = value.lstrip('#')
        if len(text) != 6:
            raise ValueError(f"Invalid hex color: {value}")
        return cls(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))

    @classmethod
    def white(cls) -> 'Color':
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> 'Color':
        return cls(0, 0, 0)

    @classmethod
    def blue(cls) -> 'Color':
        return cls(0, 122, 255)

    # === CONVERSION ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
