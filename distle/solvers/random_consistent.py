"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Notes:
  - Candidates are sorted before sampling, so the pick depends only on the
    seed and the set contents, never on hash order.
  - A baseline for comparison; it makes no attempt to split the candidates
    evenly.
"""

from __future__ import annotations

from typing import List, Set
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def choose(self, candidates: Set[str]) -> str:
        """Pick any candidate uniformly at random (seeded RNG)."""
        pool: List[str] = sorted(candidates)
        i = self.rng.randrange(len(pool))
        return pool[i]
