"""
Tests for the triangular squeeze pulse and the disk surface pulse
"""

import math
import pytest

from animations.squeeze import squeeze_multiplier, surface_pulse, triangular_pulse


class TestTriangularPulse:

    def test_peaks_at_sub_interval_centers(self):
        assert triangular_pulse(0.25, 2, 0.12) == pytest.approx(1.0)
        assert triangular_pulse(0.75, 2, 0.12) == pytest.approx(1.0)

    def test_zero_away_from_dips(self):
        for progress in (0.0, 0.1, 0.5, 0.6, 0.9, 0.99):
            assert triangular_pulse(progress, 2, 0.12) == 0.0

    def test_symmetric_around_center(self):
        for delta in (0.005, 0.01, 0.02, 0.029):
            left = triangular_pulse(0.25 - delta, 2, 0.12)
            right = triangular_pulse(0.25 + delta, 2, 0.12)
            assert left == pytest.approx(right)
            assert 0.0 < left < 1.0

    def test_linear_flanks(self):
        # half width 0.06 of a sub-interval, sub-interval 0.5 long → 0.03 in progress
        assert triangular_pulse(0.25 + 0.015, 2, 0.12) == pytest.approx(0.5)

    def test_disabled_when_count_or_width_zero(self):
        assert triangular_pulse(0.25, 0, 0.12) == 0.0
        assert triangular_pulse(0.25, 2, 0.0) == 0.0

    def test_wide_dips_stay_bounded(self):
        """width >= 1 covers the whole sub-interval without exceeding 1"""
        for i in range(50):
            value = triangular_pulse(i / 50, 3, 4.0)
            assert 0.0 <= value <= 1.0
        assert triangular_pulse(0.5 / 3, 3, 4.0) == pytest.approx(1.0)
        assert triangular_pulse(0.0, 3, 4.0) == pytest.approx(0.75)

    def test_negative_progress_wraps(self):
        assert triangular_pulse(-0.75, 2, 0.12) == pytest.approx(triangular_pulse(0.25, 2, 0.12))


class TestSqueezeMultiplier:

    def test_exactly_one_outside_dips(self):
        for progress in (0.0, 0.1, 0.4, 0.5, 0.6, 0.95):
            assert squeeze_multiplier(progress, 2, 0.12, 0.06, 1.0) == 1.0

    def test_depth_at_dip_center(self):
        assert squeeze_multiplier(0.25, 2, 0.12, 0.06, 1.0) == pytest.approx(0.94)

    def test_gate_closed(self):
        assert squeeze_multiplier(0.25, 2, 0.12, 0.06, 0.0) == 1.0

    def test_zero_amount(self):
        assert squeeze_multiplier(0.25, 2, 0.12, 0.0, 1.0) == 1.0

    @pytest.mark.parametrize("progress", [i / 97 for i in range(98)])
    def test_bounds(self, progress):
        value = squeeze_multiplier(progress, 3, 0.3, 0.5, 1.0)
        assert 0.5 - 1e-12 <= value <= 1.0


class TestSurfacePulse:

    def test_zero_while_shrinking(self):
        assert surface_pulse(1.0, 3.0, False) == 0.0

    def test_midpoint_at_start(self):
        assert surface_pulse(0.0, 3.0, True) == pytest.approx(0.5)

    def test_matches_sine(self):
        growth = 0.4
        expected = math.sin(math.fmod(growth * 3.0, 1.0) * 2 * math.pi) * 0.5 + 0.5
        assert surface_pulse(growth, 3.0, True) == pytest.approx(expected)

    def test_range(self):
        for i in range(101):
            assert 0.0 <= surface_pulse(i / 100, 3.0, True) <= 1.0
