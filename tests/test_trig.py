"""
Unit tests for the mathkit trigonometric functions.
"""

import logging
import math
import sys
from pathlib import Path

import pytest

# Add parent to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from mathkit import cos, sin, tan
from mathkit.constants import EPSILON


class TestAtZero:
    @pytest.mark.parametrize("degrees", [False, True])
    def test_sin(self, degrees):
        assert sin(0, degrees=degrees) == 0.0

    @pytest.mark.parametrize("degrees", [False, True])
    def test_cos(self, degrees):
        assert cos(0, degrees=degrees) == 1.0

    @pytest.mark.parametrize("degrees", [False, True])
    def test_tan(self, degrees):
        assert tan(0, degrees=degrees) == 0.0


class TestQuarterTurns:
    def test_half_pi_radians(self):
        assert sin(math.pi / 2) == 1.0
        assert cos(math.pi / 2) == 0.0
        assert tan(math.pi / 2) == math.inf

    def test_three_halves_pi_radians(self):
        assert sin(3 * math.pi / 2) == -1.0
        assert cos(3 * math.pi / 2) == 0.0
        assert tan(3 * math.pi / 2) == -math.inf

    def test_90_degrees(self):
        assert sin(90, degrees=True) == 1.0
        assert cos(90, degrees=True) == 0.0
        assert tan(90, degrees=True) == math.inf

    def test_270_degrees(self):
        assert sin(270, degrees=True) == -1.0
        assert cos(270, degrees=True) == 0.0
        assert tan(270, degrees=True) == -math.inf

    def test_half_turn(self):
        assert sin(math.pi) == 0.0
        assert cos(math.pi) == -1.0
        assert tan(math.pi) == 0.0
        assert sin(180, degrees=True) == 0.0
        assert cos(180, degrees=True) == -1.0

    def test_full_turn(self):
        assert sin(2 * math.pi) == 0.0
        assert sin(360, degrees=True) == 0.0
        assert cos(360, degrees=True) == 1.0


class TestSnapping:
    def test_tiny_result_snaps(self):
        assert sin(1e-12) == 0.0
        assert tan(-1e-12) == 0.0

    def test_above_epsilon_kept(self):
        assert sin(1e-9) == pytest.approx(1e-9)

    def test_snapped_results_are_exact_zero(self):
        for k in range(-4, 5):
            result = sin(k * math.pi)
            assert result == 0.0
            assert abs(result) < EPSILON


class TestDegrees:
    def test_common_angles(self):
        assert sin(30, degrees=True) == pytest.approx(0.5)
        assert cos(60, degrees=True) == pytest.approx(0.5)
        assert tan(45, degrees=True) == pytest.approx(1.0)

    def test_matches_radians(self):
        for deg in (-135.0, -10.0, 15.0, 123.4, 300.0):
            assert sin(deg, degrees=True) == pytest.approx(sin(math.radians(deg)))
            assert cos(deg, degrees=True) == pytest.approx(cos(math.radians(deg)))

    def test_wraps_whole_turns(self):
        assert sin(390, degrees=True) == pytest.approx(0.5)
        assert sin(-330, degrees=True) == pytest.approx(0.5)

    def test_default_is_radians(self):
        assert sin(90) == pytest.approx(math.sin(90.0))
        assert sin(90) != 1.0


class TestTanAsymptotes:
    @pytest.mark.parametrize(
        "angle,expected",
        [
            (5 * math.pi / 2, math.inf),
            (-math.pi / 2, -math.inf),
            (7 * math.pi / 2, -math.inf),
        ],
    )
    def test_periodic_radians(self, angle, expected):
        assert tan(angle) == expected

    @pytest.mark.parametrize(
        "angle,expected",
        [(450, math.inf), (-90, -math.inf), (-270, math.inf), (630, -math.inf)],
    )
    def test_periodic_degrees(self, angle, expected):
        assert tan(angle, degrees=True) == expected

    def test_near_but_outside_epsilon(self):
        result = tan(math.pi / 2 - 1e-6)
        assert math.isfinite(result)
        assert result > 1e5

    def test_asymptote_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mathkit"):
            tan(90, degrees=True)
        assert "asymptote" in caplog.text


class TestNonFinite:
    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    @pytest.mark.parametrize("fn", [sin, cos, tan])
    def test_returns_nan(self, fn, value):
        assert math.isnan(fn(value))
        assert math.isnan(fn(value, degrees=True))


class TestInputTypes:
    @pytest.mark.parametrize("fn", [sin, cos, tan])
    def test_string_rejected(self, fn):
        with pytest.raises(TypeError):
            fn("1.0")

    def test_int_accepted(self):
        assert cos(0) == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
