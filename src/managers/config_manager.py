"""
Config Manager

Loads YAML configuration (with include support) and turns it into the
immutable AnimationConfig handed to the PulseEngine.
"""

import dataclasses
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional

from animations.presets import DEFAULT_PRESET, get_preset
from models.animation_config import AnimationConfig, BarsConfig
from models.color import Color
from models.enums import BlendMode, LayerKind, LogCategory, LogLevel, PresetID
from models.frame import Viewport
from models.layer_config import LayerConfig
from utils.enum_helper import EnumHelper
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

# AnimationConfig fields that YAML overrides may set directly
_NON_SCALAR_FIELDS = {"mode", "layers", "background", "bars"}
OVERRIDABLE_FIELDS = {
    f.name for f in dataclasses.fields(AnimationConfig) if f.name not in _NON_SCALAR_FIELDS
}


class ConfigError(ValueError):
    """Invalid configuration value; `key` names the offending entry"""

    def __init__(self, key: str, message: str):
        super().__init__(f"{key}: {message}")
        self.key = key


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML
    files. Falls back to factory_defaults.yaml when the main config cannot
    be read.

    Example:
        config = ConfigManager()
        config.load()

        anim_config = config.build_animation_config()
        viewport = config.get_viewport()
        fps = config.get_fps()
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/ or absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory defaults on failure

        Returns:
            Merged config data dict
        """
        src_dir = Path(__file__).parent.parent
        try:
            full_path = src_dir / self.config_path

            with open(full_path, "r", encoding="utf-8") as f:
                main_config = yaml.safe_load(f) or {}

            if not isinstance(main_config, dict):
                raise ConfigError(str(self.config_path), "top level must be a mapping")

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], full_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            defaults_path = src_dir / self.factory_defaults_path
            with open(defaults_path, "r", encoding="utf-8") as f:
                self.data = yaml.safe_load(f) or {}

        return self.data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["animation.yaml", "logging.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                with open(filepath, 'r', encoding='utf-8') as f:
                    file_data = yaml.safe_load(f)
                    if file_data:
                        merged.update(file_data)
                        log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    # ===== Sections =====

    @property
    def animation(self) -> Dict[str, Any]:
        return self.data.get("animation") or {}

    @property
    def logging(self) -> Dict[str, Any]:
        return self.data.get("logging") or {}

    # ===== Simple values =====

    def get_preset_id(self) -> PresetID:
        name = self.animation.get("preset")
        if name is None:
            return DEFAULT_PRESET
        try:
            return EnumHelper.to_enum(PresetID, name)
        except (TypeError, ValueError) as ex:
            raise ConfigError("animation.preset", str(ex))

    def get_fps(self) -> int:
        fps = self.animation.get("fps", 60)
        if not isinstance(fps, int) or isinstance(fps, bool) or fps <= 0:
            raise ConfigError("animation.fps", f"expected positive integer, got {fps!r}")
        return fps

    def get_viewport(self) -> Viewport:
        raw = self.animation.get("viewport") or {}
        try:
            return Viewport(width=float(raw.get("width", 390)), height=float(raw.get("height", 844)))
        except (TypeError, ValueError) as ex:
            raise ConfigError("animation.viewport", str(ex))

    def get_log_level(self) -> LogLevel:
        try:
            return EnumHelper.to_enum(LogLevel, self.logging.get("level", "INFO"))
        except (TypeError, ValueError) as ex:
            raise ConfigError("logging.level", str(ex))

    def get_use_colors(self) -> bool:
        return bool(self.logging.get("use_colors", True))

    # ===== Animation config =====

    def build_animation_config(self, preset_id: Optional[PresetID] = None) -> AnimationConfig:
        """
        Preset (argument or animation.preset) with YAML customizations applied.

        animation.overrides: scalar AnimationConfig fields
        animation.layers:    full replacement layer list
        animation.bars:      BarsConfig fields, or null to disable bars
        """
        preset_id = preset_id or self.get_preset_id()
        base = get_preset(preset_id)
        changes: Dict[str, Any] = {}

        overrides = self.animation.get("overrides") or {}
        for key, value in overrides.items():
            if key not in OVERRIDABLE_FIELDS:
                raise ConfigError(f"animation.overrides.{key}", "unknown or non-scalar field")
            changes[key] = value

        if "layers" in self.animation:
            changes["layers"] = tuple(
                self._parse_layer(entry, i) for i, entry in enumerate(self.animation["layers"] or [])
            )

        if "bars" in self.animation:
            raw_bars = self.animation["bars"]
            try:
                changes["bars"] = BarsConfig(**raw_bars) if raw_bars else None
            except (TypeError, ValueError) as ex:
                raise ConfigError("animation.bars", str(ex))

        try:
            config = dataclasses.replace(base, **changes) if changes else base
        except (TypeError, ValueError) as ex:
            raise ConfigError("animation", str(ex))

        log.info(
            f"Animation config built from preset {preset_id.name}",
            overrides=len(overrides),
            layers=len(config.layers),
        )
        return config

    @staticmethod
    def _parse_layer(entry: Dict[str, Any], index: int) -> LayerConfig:
        key = f"animation.layers[{index}]"
        if not isinstance(entry, dict):
            raise ConfigError(key, "layer entry must be a mapping")

        data = dict(entry)
        try:
            data["kind"] = EnumHelper.to_enum(LayerKind, data["kind"])
            if "blend_mode" in data:
                data["blend_mode"] = EnumHelper.to_enum(BlendMode, data["blend_mode"])
            if "color" in data:
                data["color"] = Color.from_hex(str(data["color"]))
            return LayerConfig(**data)
        except KeyError as ex:
            raise ConfigError(key, f"missing field {ex}")
        except (TypeError, ValueError) as ex:
            raise ConfigError(key, str(ex))
