"""Visiting-order optimization for dispensing routes."""
from __future__ import annotations
import logging
from typing import Optional, Sequence

import numpy as np
from scipy.spatial.distance import cdist

from rpt2paste.config import MAX_TWO_OPT_PASSES
from rpt2paste.pcb.models import Pad, Point

logger = logging.getLogger(__name__)

# Minimum length gain for a 2-opt move to count as an improvement
IMPROVEMENT_EPSILON = 1e-9


def path_length(points: Sequence[Point], order: Optional[Sequence[int]] = None) -> float:
    """Total length of the open path visiting points in the given order."""
    if order is None:
        order = range(len(points))
    order = list(order)
    return sum(
        points[a].distance_to(points[b])
        for a, b in zip(order, order[1:])
    )


def apply_route(pads: Sequence[Pad], route: Sequence[int]) -> list[Pad]:
    """Reorder pads by a route."""
    return [pads[i] for i in route]


class RouteOptimizer:
    """
    Finds a short open path through all pads.

    Passes:
    1. Nearest-neighbour construction from the lowest (y, x) pad
    2. Keep the input order instead if it is already shorter
    3. 2-opt segment reversal until no move improves or the pass cap is hit

    All tie-breaks favour the lowest index, so equal inputs give equal routes.
    """

    def __init__(self, max_passes: int = MAX_TWO_OPT_PASSES):
        """
        Initialize route optimizer.

        Args:
            max_passes: Upper bound on full 2-opt scans over the route
        """
        self.max_passes = max_passes
        self.passes_used = 0

    def optimize(self, pads: Sequence[Pad]) -> list[int]:
        """
        Compute a visiting order.

        Args:
            pads: Pads to visit

        Returns:
            Permutation of pad indices
        """
        n = len(pads)
        self.passes_used = 0
        if n < 2:
            return list(range(n))

        coords = np.array([[p.position.x, p.position.y] for p in pads], dtype=float)
        dist = cdist(coords, coords)

        # Pass 1: Greedy construction
        route = self._nearest_neighbor(coords, dist)

        # Pass 2: Never start from something worse than the file order
        identity = list(range(n))
        if self._route_length(identity, dist) < self._route_length(route, dist):
            route = identity

        # Pass 3: Local improvement
        if n >= 3:
            route = self._two_opt(route, dist.tolist())

        logger.debug(
            "Optimized route over %d pads: length %.3f after %d 2-opt passes",
            n, self._route_length(route, dist), self.passes_used
        )
        return route

    @staticmethod
    def _route_length(route: Sequence[int], dist: np.ndarray) -> float:
        idx = np.asarray(route)
        return float(dist[idx[:-1], idx[1:]].sum())

    @staticmethod
    def _start_index(coords: np.ndarray) -> int:
        """Lowest y, then lowest x, then lowest index."""
        order = np.lexsort((np.arange(len(coords)), coords[:, 0], coords[:, 1]))
        return int(order[0])

    def _nearest_neighbor(self, coords: np.ndarray, dist: np.ndarray) -> list[int]:
        """Repeatedly append the closest unvisited pad to the path end."""
        n = len(coords)
        visited = np.zeros(n, dtype=bool)

        current = self._start_index(coords)
        route = [current]
        visited[current] = True

        for _ in range(n - 1):
            candidates = np.where(visited, np.inf, dist[current])
            # argmin returns the first minimum, i.e. the lowest index on ties
            current = int(np.argmin(candidates))
            route.append(current)
            visited[current] = True

        return route

    def _two_opt(self, route: list[int], dist: list[list[float]]) -> list[int]:
        """
        Reverse route[i..j] whenever that shortens the open path.

        The path has no closing edge, so reversing a prefix or suffix only
        changes the one edge at its inner end.
        """
        n = len(route)
        route = list(route)

        while self.passes_used < self.max_passes:
            self.passes_used += 1
            improved = False

            for i in range(n - 1):
                for j in range(i + 1, n):
                    if i == 0 and j == n - 1:
                        continue  # Reversing everything changes nothing

                    b, c = route[i], route[j]
                    before = after = 0.0
                    if i > 0:
                        a = route[i - 1]
                        before += dist[a][b]
                        after += dist[a][c]
                    if j < n - 1:
                        d = route[j + 1]
                        before += dist[c][d]
                        after += dist[b][d]

                    if before - after > IMPROVEMENT_EPSILON:
                        route[i:j + 1] = route[i:j + 1][::-1]
                        improved = True

            if not improved:
                break
        else:
            logger.debug("2-opt stopped at pass cap (%d)", self.max_passes)

        return route
