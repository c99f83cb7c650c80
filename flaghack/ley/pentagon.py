"""Regular-pentagon test for five-flag cliques."""
from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

from flaghack.ley.geometry import Vec2, centroid, distance_squared, polar_about

logger = logging.getLogger(__name__)

PENTAGRAM_RADIUS_TOLERANCE = 0.45
PENTAGRAM_ANGLE_TOLERANCE = 0.7
DEGENERATE_RADIUS = 1e-6

_TAU = 2.0 * math.pi
_EXPECTED_GAP = _TAU / 5.0


def pentagram_center(
    points: Sequence[Vec2],
    max_distance: float,
    radius_tolerance: float = PENTAGRAM_RADIUS_TOLERANCE,
    angle_tolerance: float = PENTAGRAM_ANGLE_TOLERANCE,
) -> Optional[Vec2]:
    """
    Return the centroid if the five points roughly form a regular pentagon.

    Flags are planted by hand, so the test is loose: the points must sit on
    a common circle within ``radius_tolerance`` (relative spread) and be
    spaced around it within ``angle_tolerance`` radians of 72 degrees each.
    Orientation does not matter.
    """
    if len(points) != 5:
        return None

    center = centroid(points)
    polar: List[Tuple[float, Vec2, float]] = []
    for p in points:
        r, angle = polar_about(p, center)
        polar.append((angle, p, r))

    radii = [r for _, _, r in polar]
    mean_r = sum(radii) / 5.0
    if mean_r <= DEGENERATE_RADIUS:
        return None
    if (max(radii) - min(radii)) / mean_r > radius_tolerance:
        return None

    polar.sort(key=lambda item: item[0])
    for k in range(5):
        angle = polar[k][0]
        next_angle = polar[0][0] + _TAU if k == 4 else polar[k + 1][0]
        if abs((next_angle - angle) - _EXPECTED_GAP) > angle_tolerance:
            return None

    # Diagonals of a clique are already within range; failing here means the
    # candidate did not come from a proper clique.
    max_d2 = max_distance * max_distance
    for k in range(5):
        a = polar[k][1]
        b = polar[(k + 2) % 5][1]
        if distance_squared(a, b) > max_d2:
            logger.warning(f"Pentagram candidate rejected on diagonal {a} -> {b} (max {max_distance})")
            return None

    return center
