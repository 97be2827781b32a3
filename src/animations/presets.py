"""
Animation presets

Named configurations for the single PulseEngine. Each preset reproduces
one of the listening-indicator looks; they differ only in data.
"""

from typing import Dict, List

from models.animation_config import AnimationConfig, BarsConfig
from models.color import Color
from models.enums import BlendMode, EnvelopeMode, LayerKind, PresetID
from models.layer_config import LayerConfig

BACKGROUND_TOP = Color.from_rgb(5, 148, 255)
BACKGROUND_BOTTOM = Color.from_rgb(0, 42, 217)

DISK_APPEAR_THRESHOLDS = (0.05, 0.18, 0.35, 0.50)
DISK_BASE_SIZES = (140.0, 180.0, 220.0, 260.0)


def _cycle_disks(max_opacity: float) -> List[LayerConfig]:
    return [
        LayerConfig(
            id=f"disk-{i}",
            kind=LayerKind.DISK,
            base_size=size,
            base_opacity=0.06,
            target_opacity=max_opacity,
            amplitude=0.03,
            appear_threshold=threshold,
            appear_width=0.18,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i, (size, threshold) in enumerate(zip(DISK_BASE_SIZES, DISK_APPEAR_THRESHOLDS))
    ]


def _shazam_pulse() -> AnimationConfig:
    rings = [
        LayerConfig(
            id=f"ring-{i}",
            kind=LayerKind.RING,
            base_size=300.0 + i * 80.0,   # fixed spacing keeps the two rings apart
            base_opacity=0.03,
            target_opacity=0.80,
            line_width=1.0,
            max_scale=1.8,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i in range(2)
    ]
    center = LayerConfig(
        id="center",
        kind=LayerKind.CENTER,
        base_size=100.0,
        base_opacity=0.5,
        color=Color.blue(),
        icon="shazam",
    )
    return AnimationConfig(
        mode=EnvelopeMode.CYCLE,
        display_name="Shazam Pulse",
        layers=tuple(_cycle_disks(0.2) + [center] + rings),
        cycle_duration=2.5,
        growth_end_fraction=0.70,
        max_global_scale=2.2,
        squeezes_per_cycle=3,
        squeeze_amount=0.04,
        squeeze_width=0.12,
        local_osc_frequency=0.8,
        surface_pulse_frequency=3.0,
        surface_pulse_scale_amplitude=0.03,
        surface_pulse_opacity_amplitude=0.15,
        ring_trigger_index=2,
        reference_size=420.0,
        background=(BACKGROUND_TOP, BACKGROUND_BOTTOM),
        bars=BarsConfig(),
        caption="Listening for music",
        subtitle="Make sure your device can hear the song clearly",
    )


def _pulse_rings() -> AnimationConfig:
    rings = [
        LayerConfig(
            id=f"ring-{i}",
            kind=LayerKind.RING,
            base_size=400.0,
            base_opacity=0.03,
            target_opacity=0.80,
            line_width=1.0,
            max_scale=1.8,
            progress_offset=i * 0.05,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i in range(2)
    ]
    center = LayerConfig(
        id="center",
        kind=LayerKind.CENTER,
        base_size=90.0,
        base_opacity=1.0,
        color=Color.blue(),
        icon="waveform.circle.fill",
    )
    return AnimationConfig(
        mode=EnvelopeMode.CYCLE,
        display_name="Pulse Rings",
        layers=tuple(_cycle_disks(0.3) + [center] + rings),
        cycle_duration=2.0,
        growth_end_fraction=0.70,
        max_global_scale=1.9,
        squeezes_per_cycle=2,
        squeeze_amount=0.06,
        squeeze_width=0.12,
        local_osc_frequency=0.8,
        ring_trigger_index=2,
        reference_size=420.0,
        background=(Color.from_unit(0.02, 0.58, 1.00), Color.from_unit(0.00, 0.16, 0.85)),
    )


def _swell_halo() -> AnimationConfig:
    halo_specs = (
        (220.0, 0.14, 0.015),
        (180.0, 0.28, 0.02),
        (150.0, 0.10, 0.01),
        (260.0, 0.06, 0.008),
    )
    halos = [
        LayerConfig(
            id=f"halo-{i}",
            kind=LayerKind.DISK,
            base_size=size,
            base_opacity=opacity,
            amplitude=amplitude,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i, (size, opacity, amplitude) in enumerate(halo_specs)
    ]
    center = LayerConfig(
        id="central",
        kind=LayerKind.CENTER,
        base_size=140.0,
        base_opacity=0.95,
        amplitude=0.04,
        color=Color.blue(),
        icon="waveform.circle.fill",
    )
    rings = [
        LayerConfig(id="ring-0", kind=LayerKind.RING, base_size=300.0, base_opacity=0.05,
                    target_opacity=0.40, line_width=1.0, max_scale=2.4, speed=0.25,
                    blend_mode=BlendMode.PLUS_LIGHTER),
        LayerConfig(id="ring-1", kind=LayerKind.RING, base_size=340.0, base_opacity=0.04,
                    target_opacity=0.34, line_width=0.8, max_scale=2.2, speed=0.22,
                    blend_mode=BlendMode.PLUS_LIGHTER),
    ]
    return AnimationConfig(
        mode=EnvelopeMode.SWELL,
        display_name="Swell Halo",
        layers=tuple(halos + [center] + rings),
        breathing_frequency=0.04,
        swell_frequency=0.8,
        swell_amplitude=0.20,
        squeezes_per_cycle=2,
        squeeze_amount=0.02,
        squeeze_width=0.05,
        reference_size=400.0,
        mount_scale=1.03,
        background=(Color.from_unit(0.02, 0.58, 1.00), Color.from_unit(0.00, 0.16, 0.85)),
    )


def _classic_rings() -> AnimationConfig:
    ring_count = 4
    rings = [
        LayerConfig(
            id=f"ring-{i}",
            kind=LayerKind.RING,
            base_size=180.0,
            base_opacity=1.0,
            target_opacity=0.0,     # fades out as it expands
            line_width=3.0,
            max_scale=2.6,
            speed=0.8,
            progress_offset=i / ring_count,
            color=Color.blue(),
        )
        for i in range(ring_count)
    ]
    center = LayerConfig(
        id="button",
        kind=LayerKind.CENTER,
        base_size=64.0,
        base_opacity=1.0,
        amplitude=0.05,
        color=Color.blue(),
        icon="waveform",
    )
    return AnimationConfig(
        mode=EnvelopeMode.SWELL,
        display_name="Classic Rings",
        layers=tuple(rings + [center]),
        breathing_frequency=0.6,
        swell_amplitude=0.0,
        squeezes_per_cycle=0,
        squeeze_amount=0.0,
        reference_size=360.0,
        background=(Color.black(), Color.black()),
    )


def _pulsing_rings() -> AnimationConfig:
    # base opacities are fill alpha × layer opacity of the original drawing
    outer = LayerConfig(
        id="outer",
        kind=LayerKind.DISK,
        base_size=180.0,
        base_opacity=0.14 * 0.55,
        amplitude=0.35,
        counter_phase=True,
        squeezed=True,
        opacity_breath_depth=1.0,
        opacity_swell_depth=0.4,
        opacity_squeeze_dip=0.5,
        blend_mode=BlendMode.PLUS_LIGHTER,
    )
    mid = LayerConfig(
        id="mid",
        kind=LayerKind.DISK,
        base_size=150.0,
        base_opacity=0.28 * 0.45,
        scale_between=("center", "outer"),
        scale_bias=0.99,
        squeezed=True,
        opacity_breath_depth=0.9,
        opacity_swell_depth=0.4,
        opacity_squeeze_dip=0.4,
        blend_mode=BlendMode.PLUS_LIGHTER,
    )
    mid2 = LayerConfig(
        id="mid2",
        kind=LayerKind.DISK,
        base_size=120.0,
        base_opacity=0.38 * 0.38,
        scale_between=("center", "mid"),
        scale_bias=0.995,
        squeezed=True,
        opacity_breath_depth=0.85,
        opacity_swell_depth=0.4,
        opacity_squeeze_dip=0.45,
        blend_mode=BlendMode.PLUS_LIGHTER,
    )
    center = LayerConfig(
        id="center",
        kind=LayerKind.CENTER,
        base_size=90.0,
        base_opacity=1.0,
        amplitude=0.02,
        color=Color.blue(),
        icon="shazam.logo.fill",
    )
    rings = [
        LayerConfig(
            id=f"ring-{i}",
            kind=LayerKind.RING,
            base_size=308.0 + i * 16.0,
            base_opacity=0.05,
            target_opacity=0.50,
            line_width=0.3,
            max_scale=1.5,
            speed=0.75,
            blend_mode=BlendMode.PLUS_LIGHTER,
        )
        for i in range(2)
    ]
    return AnimationConfig(
        mode=EnvelopeMode.SWELL,
        display_name="Pulsing Rings",
        layers=(outer, mid, mid2, center, *rings),
        breathing_frequency=0.4,
        swell_frequency=0.8,
        swell_amplitude=0.2,
        squeezes_per_cycle=2,
        squeeze_amount=0.02,
        squeeze_width=0.05,
        # whole stack is drawn at 1.5x on a 390 pt wide screen
        reference_size=260.0,
        background=(Color.blue(), Color.blue()),
    )


_BUILDERS = {
    PresetID.SHAZAM_PULSE: _shazam_pulse,
    PresetID.PULSE_RINGS: _pulse_rings,
    PresetID.SWELL_HALO: _swell_halo,
    PresetID.CLASSIC_RINGS: _classic_rings,
    PresetID.PULSING_RINGS: _pulsing_rings,
}

PRESETS: Dict[PresetID, AnimationConfig] = {pid: build() for pid, build in _BUILDERS.items()}

DEFAULT_PRESET = PresetID.SHAZAM_PULSE


def get_preset(preset_id: PresetID) -> AnimationConfig:
    try:
        return PRESETS[preset_id]
    except KeyError:
        raise ValueError(f"Unknown preset: {preset_id}")


def list_presets() -> List[PresetID]:
    return list(PRESETS.keys())
