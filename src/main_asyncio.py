"""
main_asyncio.py — Command-line entry point for the pulse rings preview
----------------------------------------------------------------------

Responsible for:
- loading configuration and applying command-line overrides
- wiring PulseEngine, renderer and FrameDriver
- running the async render loop for the requested duration
"""

import sys

# Set UTF-8 encoding for output BEFORE logging starts (fixes Unicode symbol rendering)
if hasattr(sys.stdout, 'reconfigure') and sys.stdout.encoding != 'UTF-8':
    sys.stdout.reconfigure(encoding='utf-8')  # type: ignore
if hasattr(sys.stderr, 'reconfigure') and sys.stderr.encoding != 'UTF-8':
    sys.stderr.reconfigure(encoding='utf-8')  # type: ignore

import argparse
import asyncio
import dataclasses
from typing import List, Optional

from animations.engine import PulseEngine
from engine.frame_driver import FrameDriver
from engine.renderers import JsonLinesRenderer, LoggingRenderer
from managers.config_manager import ConfigError, ConfigManager
from models.enums import LogCategory, PresetID
from utils.enum_helper import EnumHelper
from utils.logger import configure_logger, get_logger

log = get_logger().for_category(LogCategory.SYSTEM)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render pulse rings animation frames")
    parser.add_argument(
        "--preset",
        default=None,
        help=f"Preset name ({', '.join(EnumHelper.list_names(PresetID, lowercase=True))})",
    )
    parser.add_argument("--seconds", type=float, default=5.0, help="Run duration (default: 5)")
    parser.add_argument("--fps", type=int, default=None, help="Target frame rate")
    parser.add_argument("--width", type=float, default=None, help="Viewport width")
    parser.add_argument("--height", type=float, default=None, help="Viewport height")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write JSON lines frame snapshots to stdout instead of log summaries",
    )
    parser.add_argument(
        "--config",
        default="config/config.yaml",
        help="Config file (relative to src/ or absolute)",
    )
    return parser


async def run(args: argparse.Namespace) -> int:
    config = ConfigManager(config_path=args.config)
    config.load()

    try:
        configure_logger(config.get_log_level(), use_colors=config.get_use_colors())
        preset_id = EnumHelper.from_string(PresetID, args.preset) if args.preset else None
        anim_config = config.build_animation_config(preset_id)
        fps = args.fps or config.get_fps()
        viewport = config.get_viewport()
    except (ConfigError, ValueError) as ex:
        log.error("Invalid configuration", error=str(ex))
        return 2

    if args.width is not None or args.height is not None:
        viewport = dataclasses.replace(
            viewport,
            width=args.width if args.width is not None else viewport.width,
            height=args.height if args.height is not None else viewport.height,
        )

    renderer = JsonLinesRenderer(sys.stdout) if args.json else LoggingRenderer(every=fps)
    driver = FrameDriver(PulseEngine(anim_config), renderer, viewport, fps=fps)

    log.info(
        f"Running {anim_config.display_name} for {args.seconds:g}s",
        viewport=f"{viewport.width:g}x{viewport.height:g}",
        fps=driver.fps,
    )
    await driver.run_for(args.seconds)
    log.info("Done", **driver.get_metrics())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        log.info("Keyboard interrupt received")
        return 130


# ---------------------------------------------------------------------------
# ENTRY POINT
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
