"""Tests for the regular-pentagon validator."""

import logging
import math

import pytest

from conftest import ring
from flaghack.ley.pentagon import pentagram_center


class TestPentagramCenter:
    def test_regular_pentagon_returns_centroid(self, pentagon40):
        center = pentagram_center(pentagon40, 80.0)
        assert center is not None
        assert center[0] == pytest.approx(0.0, abs=1e-9)
        assert center[1] == pytest.approx(0.0, abs=1e-9)

    def test_offset_pentagon_centroid(self):
        center = pentagram_center(ring(5, 30.0, center=(200.0, -50.0)), 80.0)
        assert center == pytest.approx((200.0, -50.0))

    def test_orientation_does_not_matter(self, pentagon40):
        rotated = [(-y, x) for x, y in pentagon40]
        assert pentagram_center(rotated, 80.0) is not None

    def test_input_order_does_not_matter(self, pentagon40):
        shuffled = [pentagon40[i] for i in (3, 0, 4, 1, 2)]
        assert pentagram_center(shuffled, 80.0) is not None

    def test_jittered_radius_accepted(self, jittered_pentagon):
        assert pentagram_center(jittered_pentagon, 150.0) is not None

    def test_collinear_rejected(self, collinear5):
        assert pentagram_center(collinear5, 100.0) is None

    def test_coincident_points_rejected(self):
        assert pentagram_center([(3.0, 3.0)] * 5, 100.0) is None

    def test_large_radius_spread_rejected(self):
        points = ring(5, 50.0, jitter=lambda i: 1.5 if i == 0 else 0.8)
        assert pentagram_center(points, 200.0) is None

    def test_uneven_spacing_rejected(self):
        # four points bunched on one side of the circle
        angles = [0.0, 0.3, 0.6, 0.9, 3.5]
        points = [(math.cos(a) * 40.0, math.sin(a) * 40.0) for a in angles]
        assert pentagram_center(points, 200.0) is None

    def test_tolerances_are_configurable(self, jittered_pentagon):
        assert pentagram_center(jittered_pentagon, 150.0, radius_tolerance=0.1) is None

    def test_wrong_point_count(self, pentagon40):
        assert pentagram_center(pentagon40[:4], 80.0) is None

    def test_diagonal_check_rejects_and_warns(self, pentagon40, caplog):
        # diagonal of the radius-40 pentagon is ~76, so 60 only fails there
        with caplog.at_level(logging.WARNING, logger="flaghack.ley.pentagon"):
            assert pentagram_center(pentagon40, 60.0) is None
        assert "diagonal" in caplog.text
