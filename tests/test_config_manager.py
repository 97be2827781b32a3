"""
Tests for ConfigManager: include loading, fallback and AnimationConfig building
"""

import pytest
import yaml

from managers.config_manager import ConfigError, ConfigManager
from models.color import Color
from models.enums import BlendMode, EnvelopeMode, LayerKind, LogLevel, PresetID


def write_yaml(path, data):
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def load_config(tmp_path, animation=None, logging=None):
    data = {"animation": animation or {}}
    if logging is not None:
        data["logging"] = logging
    manager = ConfigManager(config_path=str(write_yaml(tmp_path / "config.yaml", data)))
    manager.load()
    return manager


class TestLoading:

    def test_include_files_are_merged(self, tmp_path):
        write_yaml(tmp_path / "animation.yaml", {"animation": {"preset": "swell_halo", "fps": 30}})
        write_yaml(tmp_path / "logging.yaml", {"logging": {"level": "debug"}})
        main = write_yaml(tmp_path / "config.yaml", {"include": ["animation.yaml", "logging.yaml"]})

        manager = ConfigManager(config_path=str(main))
        data = manager.load()

        assert set(data) == {"animation", "logging"}
        assert manager.get_preset_id() == PresetID.SWELL_HALO
        assert manager.get_fps() == 30
        assert manager.get_log_level() == LogLevel.DEBUG

    def test_monolithic_config(self, tmp_path):
        manager = load_config(tmp_path, {"preset": "CLASSIC_RINGS"})
        assert manager.get_preset_id() == PresetID.CLASSIC_RINGS

    def test_missing_file_falls_back_to_factory_defaults(self, tmp_path):
        manager = ConfigManager(config_path=str(tmp_path / "missing.yaml"))
        data = manager.load()
        assert data["animation"]["preset"] == "SHAZAM_PULSE"
        assert manager.get_viewport().width == 390

    def test_missing_include_falls_back(self, tmp_path):
        main = write_yaml(tmp_path / "config.yaml", {"include": ["nope.yaml"]})
        manager = ConfigManager(config_path=str(main))
        assert manager.load()["logging"]["level"] == "INFO"

    def test_non_mapping_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        manager = ConfigManager(config_path=str(path))
        assert "animation" in manager.load()

    def test_bundled_config_loads(self):
        manager = ConfigManager()
        manager.load()
        assert manager.get_preset_id() == PresetID.SHAZAM_PULSE
        assert manager.build_animation_config().mode == EnvelopeMode.CYCLE


class TestValues:

    def test_defaults_for_empty_sections(self, tmp_path):
        manager = load_config(tmp_path)
        assert manager.get_preset_id() == PresetID.SHAZAM_PULSE
        assert manager.get_fps() == 60
        assert manager.get_log_level() == LogLevel.INFO
        assert manager.get_use_colors() is True

    @pytest.mark.parametrize("fps", [0, -5, "fast", True, 2.5])
    def test_invalid_fps(self, tmp_path, fps):
        manager = load_config(tmp_path, {"fps": fps})
        with pytest.raises(ConfigError) as info:
            manager.get_fps()
        assert info.value.key == "animation.fps"

    def test_invalid_preset(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, {"preset": "disco"}).get_preset_id()

    def test_invalid_log_level(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, logging={"level": "LOUD"}).get_log_level()

    def test_viewport(self, tmp_path):
        viewport = load_config(tmp_path, {"viewport": {"width": 1080, "height": 1920}}).get_viewport()
        assert (viewport.width, viewport.height) == (1080.0, 1920.0)

    def test_invalid_viewport(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, {"viewport": {"width": "wide"}}).get_viewport()


class TestAnimationConfig:

    def test_preset_argument_wins(self, tmp_path):
        manager = load_config(tmp_path, {"preset": "SHAZAM_PULSE"})
        config = manager.build_animation_config(PresetID.SWELL_HALO)
        assert config.display_name == "Swell Halo"

    def test_overrides_applied(self, tmp_path):
        manager = load_config(tmp_path, {"overrides": {"cycle_duration": 3.0, "squeeze_amount": 0.1}})
        config = manager.build_animation_config()
        assert config.cycle_duration == 3.0
        assert config.squeeze_amount == 0.1
        assert len(config.layers) == 7

    def test_unknown_override(self, tmp_path):
        manager = load_config(tmp_path, {"overrides": {"sparkle": 1}})
        with pytest.raises(ConfigError) as info:
            manager.build_animation_config()
        assert info.value.key == "animation.overrides.sparkle"

    def test_non_scalar_override_rejected(self, tmp_path):
        manager = load_config(tmp_path, {"overrides": {"layers": []}})
        with pytest.raises(ConfigError):
            manager.build_animation_config()

    def test_invalid_override_value(self, tmp_path):
        manager = load_config(tmp_path, {"overrides": {"growth_end_fraction": 1.5}})
        with pytest.raises(ConfigError):
            manager.build_animation_config()

    def test_layers_replaced(self, tmp_path):
        manager = load_config(tmp_path, {
            "layers": [
                {"id": "core", "kind": "center", "base_size": 80, "color": "#007AFF"},
                {"id": "halo", "kind": "disk", "base_size": 200, "base_opacity": 0.1,
                 "target_opacity": 0.3, "appear_threshold": 0.2, "blend_mode": "plus-lighter"},
                {"id": "outer", "kind": "RING", "base_size": 380, "line_width": 2},
            ],
        })
        config = manager.build_animation_config()
        assert [layer.id for layer in config.layers] == ["core", "halo", "outer"]
        assert config.layers[0].color == Color.blue()
        assert config.layers[1].blend_mode == BlendMode.PLUS_LIGHTER
        assert config.layers[2].kind == LayerKind.RING
        assert config.ring_trigger_threshold == pytest.approx(0.2)

    def test_layers_sized_between(self, tmp_path):
        manager = load_config(tmp_path, {
            "layers": [
                {"id": "core", "kind": "center", "base_size": 80, "amplitude": 0.02},
                {"id": "halo", "kind": "disk", "base_size": 200, "amplitude": 0.3,
                 "counter_phase": True, "squeezed": True, "opacity_breath_depth": 1.0},
                {"id": "mid", "kind": "disk", "base_size": 150,
                 "scale_between": ["core", "halo"], "scale_bias": 0.99},
            ],
        })
        config = manager.build_animation_config(PresetID.SWELL_HALO)
        assert config.layers[2].scale_between == ("core", "halo")
        assert config.layers[1].counter_phase

    def test_layers_sized_from_unknown_layer(self, tmp_path):
        manager = load_config(tmp_path, {
            "layers": [
                {"id": "mid", "kind": "disk", "base_size": 150, "scale_between": ["core", "halo"]},
            ],
        })
        with pytest.raises(ConfigError) as info:
            manager.build_animation_config()
        assert info.value.key == "animation"

    @pytest.mark.parametrize("entry", [
        "ring",
        {"id": "x", "base_size": 10},
        {"id": "x", "kind": "blob", "base_size": 10},
        {"id": "x", "kind": "disk", "base_size": 10, "base_opacity": 3},
        {"id": "x", "kind": "disk", "base_size": 10, "sparkle": True},
    ])
    def test_invalid_layers(self, tmp_path, entry):
        manager = load_config(tmp_path, {"layers": [entry]})
        with pytest.raises(ConfigError) as info:
            manager.build_animation_config()
        assert info.value.key == "animation.layers[0]"

    def test_bars_disabled(self, tmp_path):
        config = load_config(tmp_path, {"bars": None}).build_animation_config()
        assert config.bars is None

    def test_bars_customized(self, tmp_path):
        config = load_config(tmp_path, {"bars": {"count": 5, "max_height": 40}}).build_animation_config()
        assert config.bars.count == 5
        assert config.bars.max_height == 40

    def test_invalid_bars(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, {"bars": {"count": -2}}).build_animation_config()
