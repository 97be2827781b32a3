import dataclasses
import pytest

from conftest import make_cycle_config
from models.animation_config import AnimationConfig, BarsConfig
from models.enums import EnvelopeMode, LayerKind
from models.layer_config import LayerConfig


def test_layers_list_is_frozen_to_tuple():
    center = LayerConfig(id="center", kind=LayerKind.CENTER, base_size=90.0)
    config = AnimationConfig(mode=EnvelopeMode.SWELL, layers=[center])
    assert isinstance(config.layers, tuple)


def test_layer_helpers(cycle_config):
    assert len(cycle_config.layers_of(LayerKind.DISK)) == 4
    assert cycle_config.center.id == "center"
    assert cycle_config.ring_trigger_threshold == pytest.approx(0.35)


def test_trigger_index_clamped_to_last_disk():
    config = make_cycle_config(ring_trigger_index=10)
    assert config.ring_trigger_threshold == pytest.approx(0.50)


def test_trigger_without_disks():
    ring = LayerConfig(id="ring-0", kind=LayerKind.RING, base_size=400.0)
    assert make_cycle_config(layers=(ring,)).ring_trigger_threshold == 0.0


def test_no_center():
    ring = LayerConfig(id="ring-0", kind=LayerKind.RING, base_size=400.0)
    assert make_cycle_config(layers=(ring,)).center is None


@pytest.mark.parametrize("field, value", [
    ("cycle_duration", 0.0),
    ("cycle_duration", -2.0),
    ("cycle_duration", float("nan")),
    ("growth_end_fraction", 0.0),
    ("growth_end_fraction", 1.0),
    ("max_global_scale", 0.9),
    ("squeezes_per_cycle", -1),
    ("squeeze_amount", 1.5),
    ("squeeze_width", -0.1),
    ("swell_amplitude", -0.2),
    ("swell_amplitude", float("inf")),
    ("squeeze_width", float("nan")),
    ("breathing_frequency", float("inf")),
    ("breathing_frequency", float("nan")),
    ("swell_frequency", -0.8),
    ("swell_frequency", float("inf")),
    ("local_osc_frequency", float("nan")),
    ("surface_pulse_frequency", float("inf")),
    ("surface_pulse_opacity_amplitude", float("nan")),
    ("mount_scale", float("-inf")),
    ("reference_size", 0.0),
    ("ring_trigger_index", -1),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValueError):
        make_cycle_config(**{field: value})


def test_duplicate_ids_rejected():
    layer = LayerConfig(id="disk", kind=LayerKind.DISK, base_size=100.0)
    with pytest.raises(ValueError, match="Duplicate"):
        make_cycle_config(layers=(layer, layer))


def test_single_center_only():
    a = LayerConfig(id="a", kind=LayerKind.CENTER, base_size=90.0)
    b = LayerConfig(id="b", kind=LayerKind.CENTER, base_size=90.0)
    with pytest.raises(ValueError, match="center"):
        make_cycle_config(layers=(a, b))


class TestScaleReferences:

    @staticmethod
    def _disk(layer_id, between=None):
        return LayerConfig(id=layer_id, kind=LayerKind.DISK, base_size=150.0, scale_between=between)

    def _center(self):
        return LayerConfig(id="center", kind=LayerKind.CENTER, base_size=90.0)

    def test_unknown_layer(self):
        with pytest.raises(ValueError, match="unknown"):
            make_cycle_config(layers=(self._center(), self._disk("mid", ("center", "outer"))))

    def test_ring_reference(self):
        ring = LayerConfig(id="ring-0", kind=LayerKind.RING, base_size=300.0)
        with pytest.raises(ValueError, match="ring"):
            make_cycle_config(layers=(self._center(), ring, self._disk("mid", ("center", "ring-0"))))

    def test_loop(self):
        layers = (self._center(), self._disk("a", ("center", "b")), self._disk("b", ("center", "a")))
        with pytest.raises(ValueError, match="Circular"):
            make_cycle_config(layers=layers)

    def test_shared_references_allowed(self):
        layers = (
            self._center(),
            self._disk("outer"),
            self._disk("mid", ("center", "outer")),
            self._disk("mid2", ("center", "mid")),
            self._disk("inner", ("mid", "mid2")),
        )
        config = make_cycle_config(layers=layers)
        assert config.layers[-1].scale_between == ("mid", "mid2")


def test_mode_must_be_enum():
    with pytest.raises(TypeError):
        make_cycle_config(mode="CYCLE")


def test_replace_revalidates(cycle_config):
    with pytest.raises(ValueError):
        dataclasses.replace(cycle_config, cycle_duration=0.0)


class TestBarsConfig:

    def test_defaults(self):
        bars = BarsConfig()
        assert bars.count == 3
        assert bars.min_height < bars.max_height

    @pytest.mark.parametrize("kwargs", [
        {"count": -1},
        {"min_height": -1.0},
        {"min_height": 40.0, "max_height": 30.0},
        {"width": -2.0},
        {"frequency": float("inf")},
        {"frequency": float("nan")},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            BarsConfig(**kwargs)
