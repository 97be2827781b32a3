import pytest

from models.animation_config import AnimationConfig
from models.color import Color
from models.enums import BlendMode, EnvelopeMode, LayerKind, LogLevel
from models.frame import Viewport
from models.layer_config import LayerConfig
from utils.logger import configure_logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Only errors, no ANSI codes, while tests run."""
    configure_logger(LogLevel.ERROR, use_colors=False)
    yield
    configure_logger(LogLevel.INFO, use_colors=True)


@pytest.fixture
def unit_viewport():
    """Viewport whose fit scale is exactly 1.0 for reference_size=420."""
    return Viewport(width=420.0, height=900.0)


def make_cycle_config(**overrides) -> AnimationConfig:
    disks = [
        LayerConfig(
            id=f"disk-{i}",
            kind=LayerKind.DISK,
            base_size=140.0 + 40.0 * i,
            base_opacity=0.06,
            target_opacity=0.3,
            amplitude=0.03,
            appear_threshold=threshold,
            appear_width=0.18,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i, threshold in enumerate((0.05, 0.18, 0.35, 0.50))
    ]
    center = LayerConfig(id="center", kind=LayerKind.CENTER, base_size=90.0, color=Color.blue())
    rings = [
        LayerConfig(
            id=f"ring-{i}",
            kind=LayerKind.RING,
            base_size=400.0,
            base_opacity=0.03,
            target_opacity=0.8,
            line_width=1.0,
            max_scale=1.8,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i in range(2)
    ]
    params = dict(
        mode=EnvelopeMode.CYCLE,
        layers=tuple(disks + [center] + rings),
        cycle_duration=2.0,
        growth_end_fraction=0.7,
        max_global_scale=2.0,
        squeezes_per_cycle=2,
        squeeze_amount=0.06,
        squeeze_width=0.12,
        local_osc_frequency=0.8,
        ring_trigger_index=2,
        reference_size=420.0,
    )
    params.update(overrides)
    return AnimationConfig(**params)


@pytest.fixture
def cycle_config():
    """Scenario config: 2.0 s cycle, growth ends at 0.7, max global scale 2.0."""
    return make_cycle_config()
