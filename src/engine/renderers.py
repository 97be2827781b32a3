"""
Renderer Protocol
=================
Output side of the frame driver.

Contract:
- mount() is called once before the first frame; the one-shot appear
  scale (config.mount_scale) is applied there, never per frame
- apply() receives every frame and must use its values directly,
  without easing or interpolation between frames
- unmount() is called once when the driver stops
"""

from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Protocol, TextIO

from models.animation_config import AnimationConfig
from models.enums import LogCategory
from models.frame import PulseFrame, Viewport
from models.schemas import FrameSnapshot
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)


class Renderer(Protocol):
    """Minimal contract for anything that draws PulseFrames."""

    def mount(self, config: AnimationConfig, viewport: Viewport) -> None:
        """Prepare the surface; apply the one-shot mount transform."""
        ...

    def apply(self, frame: PulseFrame) -> None:
        """Draw one frame immediately, no implicit tweening."""
        ...

    def unmount(self) -> None:
        """Release the surface."""
        ...


class RecordingRenderer:
    """Keeps recent frames in memory (previews, tests)"""

    def __init__(self, max_frames: Optional[int] = None):
        self.max_frames = max_frames
        self.frames: Deque[PulseFrame] = deque(maxlen=max_frames)
        self.mounted = False
        self.mount_scale = 1.0
        self.viewport: Optional[Viewport] = None

    def mount(self, config: AnimationConfig, viewport: Viewport) -> None:
        self.mounted = True
        self.mount_scale = config.mount_scale
        self.viewport = viewport

    def apply(self, frame: PulseFrame) -> None:
        self.frames.append(frame)

    def unmount(self) -> None:
        self.mounted = False

    @property
    def last(self) -> Optional[PulseFrame]:
        return self.frames[-1] if self.frames else None


class JsonLinesRenderer:
    """Writes one FrameSnapshot JSON document per line"""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.frames_written = 0

    def mount(self, config: AnimationConfig, viewport: Viewport) -> None:
        log.debug(
            "JSON lines output mounted",
            preset=config.display_name,
            viewport=f"{viewport.width:g}x{viewport.height:g}",
        )

    def apply(self, frame: PulseFrame) -> None:
        self.stream.write(FrameSnapshot.from_frame(frame).model_dump_json())
        self.stream.write("\n")
        self.frames_written += 1

    def unmount(self) -> None:
        self.stream.flush()


class LoggingRenderer:
    """Logs a compact layer summary every `every` frames"""

    def __init__(self, every: int = 60):
        self.every = max(1, every)
        self._count = 0

    def mount(self, config: AnimationConfig, viewport: Viewport) -> None:
        log.info(
            f"Mounted {config.display_name or config.mode.name}",
            caption=config.caption or "-",
            mount_scale=config.mount_scale,
            fit=f"{viewport.fit_scale(config.reference_size):.3f}",
        )

    def apply(self, frame: PulseFrame) -> None:
        self._count += 1
        if self._count % self.every:
            return
        log.info(
            f"t={frame.timestamp:.3f}s",
            details=[
                f"{p.layer_id}: scale={p.scale:.3f} opacity={p.opacity:.3f}"
                for p in frame.layers
            ],
        )

    def unmount(self) -> None:
        log.info("Unmounted", frames=self._count)
