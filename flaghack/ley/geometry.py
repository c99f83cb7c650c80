"""Small vector and sorted-list helpers shared by the ley engine."""
import math
from typing import List, Sequence, Tuple

Vec2 = Tuple[float, float]


def distance_squared(a: Vec2, b: Vec2) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    return dx * dx + dy * dy


def centroid(points: Sequence[Vec2]) -> Vec2:
    if not points:
        return (0.0, 0.0)
    n = len(points)
    sx = sum(p[0] for p in points)
    sy = sum(p[1] for p in points)
    return (sx / n, sy / n)


def polar_about(point: Vec2, center: Vec2) -> Tuple[float, float]:
    """Return (radius, angle) of point relative to center; angle from atan2."""
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    return math.hypot(dx, dy), math.atan2(dy, dx)


def normalize_pair(a: int, b: int) -> Tuple[int, int]:
    return (a, b) if a <= b else (b, a)


def neighbors_after(sorted_neighbors: Sequence[int], min_index: int) -> Sequence[int]:
    """Slice of an ascending list holding only values strictly greater than min_index."""
    start = 0
    while start < len(sorted_neighbors) and sorted_neighbors[start] <= min_index:
        start += 1
    return sorted_neighbors[start:]


def intersect_sorted(left: Sequence[int], right: Sequence[int]) -> List[int]:
    """Linear merge of two ascending index lists, keeping common values."""
    i = 0
    j = 0
    out: List[int] = []
    while i < len(left) and j < len(right):
        lv = left[i]
        rv = right[j]
        if lv < rv:
            i += 1
        elif lv > rv:
            j += 1
        else:
            out.append(lv)
            i += 1
            j += 1
    return out
