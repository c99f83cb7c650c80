"""Five-clique enumeration over the forward adjacency lists."""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from flaghack.ley.geometry import intersect_sorted, neighbors_after

Clique5 = Tuple[int, int, int, int, int]


def iter_five_cliques(neighbors: Sequence[Sequence[int]]) -> Iterator[Clique5]:
    """
    Yield every (a, b, c, d, e), a < b < c < d < e, that is pairwise connected.

    Each level narrows the candidate list to the intersection of what is left
    after the current pick and the pick's own neighbours. A branch is dropped
    as soon as fewer candidates remain than picks still needed, so sparse
    fields cost little beyond the graph build.
    """
    n = len(neighbors)
    if n < 5:
        return

    for a in range(n - 4):
        b_candidates = neighbors_after(neighbors[a], a)
        if len(b_candidates) < 4:
            continue

        for b_pos, b in enumerate(b_candidates):
            if len(b_candidates) - b_pos - 1 < 3:
                break
            c_candidates = intersect_sorted(b_candidates[b_pos + 1:], neighbors_after(neighbors[b], b))
            if len(c_candidates) < 3:
                continue

            for c_pos, c in enumerate(c_candidates):
                if len(c_candidates) - c_pos - 1 < 2:
                    break
                d_candidates = intersect_sorted(c_candidates[c_pos + 1:], neighbors_after(neighbors[c], c))
                if len(d_candidates) < 2:
                    continue

                for d_pos, d in enumerate(d_candidates):
                    e_candidates = intersect_sorted(d_candidates[d_pos + 1:], neighbors_after(neighbors[d], d))
                    for e in e_candidates:
                        yield (a, b, c, d, e)


def find_five_cliques(neighbors: Sequence[Sequence[int]]) -> List[Clique5]:
    return list(iter_five_cliques(neighbors))
