"""
FrameDriver — asyncio render loop for the pulse rings synthesizer.

Architecture:
  - Reads the animation clock once per tick
  - Evaluates the pure PulseEngine for that instant
  - Hands the frame to the renderer, which applies it without easing
  - Supports pause/step/FPS control and viewport changes

The engine keeps no state, so a late or skipped tick only changes which
instants get drawn, never what they look like.
"""

from __future__ import annotations
import asyncio
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional

from animations.engine import PulseEngine
from engine.renderers import Renderer
from models.enums import LogCategory
from models.frame import PulseFrame, Viewport
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)

MIN_FPS = 1
MAX_FPS = 240


class FrameDriver:
    """
    Drives one PulseEngine into one Renderer.

    Manages:
    - Render loop task lifecycle (start/stop)
    - Mount/unmount of the renderer
    - Pause/step/FPS control
    - Performance metrics
    """

    def __init__(
        self,
        engine: PulseEngine,
        renderer: Renderer,
        viewport: Viewport,
        fps: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize FrameDriver.

        Args:
            engine: Synthesizer bound to an AnimationConfig
            renderer: Output target
            viewport: Initial drawing surface size
            fps: Target render frequency (1-240, default 60)
            clock: Animation time source in seconds, monotonic
        """
        self.engine = engine
        self.renderer = renderer
        self.viewport = viewport
        self.fps = max(MIN_FPS, min(fps, MAX_FPS))
        self.clock = clock

        # Runtime state
        self.running = False
        self.paused = False
        self.step_requested = False
        self.mounted = False
        self.render_task: Optional[asyncio.Task] = None

        # Timing & performance metrics
        self.frame_times: Deque[float] = deque(maxlen=300)  # Last 5 seconds @ 60 FPS
        self.frames_rendered = 0
        self.render_errors = 0
        self.last_frame: Optional[PulseFrame] = None

        log.info("FrameDriver initialized", fps=self.fps)

    # === Control ===

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def step_frame(self) -> None: self.step_requested = True

    def set_fps(self, fps: int) -> None:
        """Change target FPS at runtime."""
        self.fps = max(MIN_FPS, min(fps, MAX_FPS))
        log.info(f"FrameDriver FPS set to {self.fps}")

    def set_viewport(self, viewport: Viewport) -> None:
        """Resize; takes effect on the next tick."""
        self.viewport = viewport
        log.debug("Viewport changed", width=viewport.width, height=viewport.height)

    # === Lifecycle ===

    def _mount(self) -> None:
        if not self.mounted:
            self.renderer.mount(self.engine.config, self.viewport)
            self.mounted = True

    async def start(self) -> None:
        """Start the render loop."""
        if self.running:
            log.warn("FrameDriver already running")
            return

        self._mount()
        self.running = True
        self.render_task = asyncio.create_task(self._render_loop())
        log.info(f"FrameDriver render loop started @ {self.fps} FPS")

    async def stop(self) -> None:
        """Stop the render loop and unmount the renderer."""
        if not self.running and not self.mounted:
            return
        self.running = False
        if self.render_task:
            self.render_task.cancel()
            try:
                await self.render_task
            except asyncio.CancelledError:
                pass
            self.render_task = None

        if self.mounted:
            self.renderer.unmount()
            self.mounted = False

        log.info(
            "FrameDriver stopped",
            frames_rendered=self.frames_rendered,
            render_errors=self.render_errors,
        )

    async def run_for(self, seconds: float) -> None:
        """Run the loop for a wall-clock duration, then stop."""
        await self.start()
        try:
            await asyncio.sleep(max(0.0, seconds))
        finally:
            await self.stop()

    # === Rendering ===

    def render_once(self, t: Optional[float] = None) -> PulseFrame:
        """
        Evaluate and render a single frame synchronously.

        Args:
            t: Animation time; defaults to the driver clock
        """
        self._mount()
        now = self.clock() if t is None else t
        frame = self.engine.frame(now, self.viewport)
        self.renderer.apply(frame)
        self.last_frame = frame
        self.frames_rendered += 1
        self.frame_times.append(time.perf_counter())
        return frame

    async def _render_loop(self) -> None:
        """Main render loop @ target FPS."""
        log.debug(f"Render loop @ {self.fps} FPS (delay={1000.0 / self.fps:.2f}ms)")

        while self.running:
            # Handle pause/step
            if self.paused and not self.step_requested:
                await asyncio.sleep(0.01)
                continue

            try:
                self.render_once()
            except Exception as e:
                self.render_errors += 1
                log.error(f"Render error: {e}", exc_info=True)

            self.step_requested = False

            # Frame rate control
            await asyncio.sleep(1.0 / self.fps)

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Get measured FPS over recent frames."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return (len(self.frame_times) - 1) / duration

    def get_metrics(self) -> Dict:
        """Get performance metrics."""
        return {
            "fps_target": self.fps,
            "fps_actual": self.get_actual_fps(),
            "frames_rendered": self.frames_rendered,
            "render_errors": self.render_errors,
            "paused": self.paused,
        }

    def __repr__(self) -> str:
        metrics = self.get_metrics()
        return (
            f"FrameDriver(fps={metrics['fps_actual']:.1f}/{metrics['fps_target']}, "
            f"frames={metrics['frames_rendered']})"
        )
