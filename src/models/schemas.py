"""
Frame snapshot schemas - Pydantic models for serialized frames
"""

from pydantic import BaseModel, Field
from typing import List

from models.frame import PulseFrame


class LayerSnapshot(BaseModel):
    """Render parameters of one layer"""
    id: str = Field(description="Layer id (e.g., 'disk-0', 'center')")
    kind: str = Field(description="CENTER, DISK or RING")
    scale: float = Field(ge=0.0, description="Final scale factor, viewport fit included")
    opacity: float = Field(ge=0.0, le=1.0, description="Final opacity")
    stroke_width: float = Field(0.0, ge=0.0, description="Stroke width for rings, 0 for filled layers")
    blend_mode: str = Field("NORMAL", description="NORMAL or PLUS_LIGHTER")


class BarSnapshot(BaseModel):
    index: int
    height: float = Field(ge=0.0)
    width: float = Field(ge=0.0)


class FrameSnapshot(BaseModel):
    """One evaluated tick"""
    t: float = Field(description="Animation clock value (seconds)")
    layers: List[LayerSnapshot]
    bars: List[BarSnapshot] = Field(default_factory=list)

    model_config = {
        "json_schema_extra": {
            "example": {
                "t": 0.7,
                "layers": [
                    {"id": "center", "kind": "CENTER", "scale": 1.5, "opacity": 0.5,
                     "stroke_width": 0.0, "blend_mode": "NORMAL"}
                ],
                "bars": [{"index": 0, "height": 21.0, "width": 8.0}],
            }
        }
    }

    @classmethod
    def from_frame(cls, frame: PulseFrame) -> "FrameSnapshot":
        return cls(
            t=frame.timestamp,
            layers=[
                LayerSnapshot(
                    id=p.layer_id,
                    kind=p.kind.name,
                    scale=p.scale,
                    opacity=p.opacity,
                    stroke_width=p.stroke_width,
                    blend_mode=p.blend_mode.name,
                )
                for p in frame.layers
            ],
            bars=[BarSnapshot(index=b.index, height=b.height, width=b.width) for b in frame.bars],
        )
