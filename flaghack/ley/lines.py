"""
Ley-line state: classified proximity edges plus detected pentagram centres.

``compute_ley_state`` is the single entry point gameplay code calls after any
change to the flags on the field. It is a pure function of the marker
snapshot and the thresholds; nothing is cached between calls, so the indices
in a returned state only refer to the exact list that was passed in.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Set, Tuple

from flaghack.ley.cliques import iter_five_cliques
from flaghack.ley.geometry import Vec2, distance_squared, normalize_pair
from flaghack.ley.graph import LineCandidate, build_proximity_graph
from flaghack.ley.pentagon import (
    PENTAGRAM_ANGLE_TOLERANCE,
    PENTAGRAM_RADIUS_TOLERANCE,
    pentagram_center,
)

logger = logging.getLogger(__name__)


class LeyLineKind(Enum):
    NORMAL = "normal"
    PENTAGRAM = "pentagram"


@dataclass(frozen=True)
class LeyLine:
    i: int
    j: int
    a: Vec2
    b: Vec2
    intensity: float
    kind: LeyLineKind = LeyLineKind.NORMAL

    @property
    def indices(self) -> Tuple[int, int]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Pentagram:
    indices: Tuple[int, int, int, int, int]
    center: Vec2

    def pairs(self) -> List[Tuple[int, int]]:
        """The ten internal edges as normalized index pairs."""
        out: List[Tuple[int, int]] = []
        for x in range(5):
            for y in range(x + 1, 5):
                out.append(normalize_pair(self.indices[x], self.indices[y]))
        return out


@dataclass(frozen=True)
class LeyState:
    lines: Tuple[LeyLine, ...] = field(default_factory=tuple)
    pentagram_centers: Tuple[Vec2, ...] = field(default_factory=tuple)
    pentagrams: Tuple[Pentagram, ...] = field(default_factory=tuple)

    @property
    def pentagram_lines(self) -> List[LeyLine]:
        return [line for line in self.lines if line.kind is LeyLineKind.PENTAGRAM]


def find_pentagrams(
    points: Sequence[Vec2],
    max_distance: float,
    neighbors: Sequence[Sequence[int]],
    radius_tolerance: float = PENTAGRAM_RADIUS_TOLERANCE,
    angle_tolerance: float = PENTAGRAM_ANGLE_TOLERANCE,
) -> List[Pentagram]:
    pentagrams: List[Pentagram] = []
    if len(points) < 5:
        return pentagrams
    for clique in iter_five_cliques(neighbors):
        center = pentagram_center(
            [points[idx] for idx in clique],
            max_distance,
            radius_tolerance=radius_tolerance,
            angle_tolerance=angle_tolerance,
        )
        if center is not None:
            pentagrams.append(Pentagram(indices=clique, center=center))
    return pentagrams


def pentagram_pairs(pentagrams: Sequence[Pentagram]) -> Set[Tuple[int, int]]:
    pairs: Set[Tuple[int, int]] = set()
    for pentagram in pentagrams:
        pairs.update(pentagram.pairs())
    return pairs


def classify_lines(candidates: Sequence[LineCandidate], pentagrams: Sequence[Pentagram]) -> List[LeyLine]:
    member_pairs = pentagram_pairs(pentagrams)
    return [
        LeyLine(
            i=c.i,
            j=c.j,
            a=c.a,
            b=c.b,
            intensity=c.intensity,
            kind=LeyLineKind.PENTAGRAM if c.indices in member_pairs else LeyLineKind.NORMAL,
        )
        for c in candidates
    ]


def compute_ley_state(
    points: Sequence[Vec2],
    max_distance: float,
    *,
    radius_tolerance: float = PENTAGRAM_RADIUS_TOLERANCE,
    angle_tolerance: float = PENTAGRAM_ANGLE_TOLERANCE,
) -> LeyState:
    """
    Recompute lines and pentagram centres for the current flag positions.

    Fewer than two flags or a non-positive distance yields an empty state;
    fewer than five flags skips the pentagram search. Coordinates must be
    finite (NaN simply never connects).
    """
    snapshot: Tuple[Vec2, ...] = tuple((float(p[0]), float(p[1])) for p in points)
    if len(snapshot) < 2 or max_distance <= 0:
        return LeyState()

    candidates, neighbors = build_proximity_graph(snapshot, max_distance)
    pentagrams: List[Pentagram] = []
    if len(snapshot) >= 5:
        pentagrams = find_pentagrams(
            snapshot,
            max_distance,
            neighbors,
            radius_tolerance=radius_tolerance,
            angle_tolerance=angle_tolerance,
        )

    lines = classify_lines(candidates, pentagrams)
    logger.debug(f"Ley state: {len(snapshot)} flags, {len(lines)} lines, {len(pentagrams)} pentagrams")
    return LeyState(
        lines=tuple(lines),
        pentagram_centers=tuple(p.center for p in pentagrams),
        pentagrams=tuple(pentagrams),
    )


def pentagram_at(state: LeyState, pos: Vec2, radius: float) -> Optional[Vec2]:
    """Return the first pentagram centre within radius of pos, if any."""
    r2 = radius * radius
    for center in state.pentagram_centers:
        if distance_squared(center, pos) <= r2:
            return center
    return None


def is_inside_pentagram(state: LeyState, pos: Vec2, radius: float) -> bool:
    return pentagram_at(state, pos, radius) is not None
