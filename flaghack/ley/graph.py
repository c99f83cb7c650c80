"""
Proximity graph over flag positions.

Every pair of markers closer than ``max_distance`` becomes an edge. The pass
is a plain O(n^2) pair test, which is fine for the tens of flags a field
holds; beyond a few hundred markers this is the first thing to revisit.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from flaghack.ley.geometry import Vec2, distance_squared


@dataclass(frozen=True)
class LineCandidate:
    """An unclassified edge: index pair (i < j), endpoints and glow intensity."""

    i: int
    j: int
    a: Vec2
    b: Vec2
    intensity: float

    @property
    def indices(self) -> Tuple[int, int]:
        return (self.i, self.j)


def line_intensity(dist: float, max_distance: float) -> float:
    """Closer pairs glow brighter: (1 - d/max)^2, clamped to [0, 1]."""
    t = 1.0 - (dist / max_distance)
    return max(0.0, min(1.0, t * t))


def build_proximity_graph(
    points: Sequence[Vec2], max_distance: float
) -> Tuple[List[LineCandidate], List[List[int]]]:
    """
    Build the edge list and the forward adjacency lists.

    ``neighbors[i]`` only holds indices greater than ``i``, ascending. The
    clique search relies on this to extend strictly increasing index
    sequences and so visit every clique once.
    """
    n = len(points)
    neighbors: List[List[int]] = [[] for _ in range(n)]
    lines: List[LineCandidate] = []
    if n < 2 or max_distance <= 0:
        return lines, neighbors

    max_d2 = max_distance * max_distance
    for i in range(n):
        a = points[i]
        for j in range(i + 1, n):
            b = points[j]
            d2 = distance_squared(a, b)
            if d2 <= max_d2:
                neighbors[i].append(j)
                lines.append(
                    LineCandidate(
                        i=i,
                        j=j,
                        a=a,
                        b=b,
                        intensity=line_intensity(math.sqrt(d2), max_distance),
                    )
                )
    return lines, neighbors
