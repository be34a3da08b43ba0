"""
First Candidate solver.

Strategy:
  - Guess the lexicographically smallest word still consistent with all
    feedback so far.

Notes:
  - Fully deterministic, independent of set iteration order and seed.
  - This is the baseline: pruning does all the work, the pick is arbitrary.
"""

from __future__ import annotations

from typing import Set
from .base import BaseSolver, register


@register
class FirstCandidateSolver(BaseSolver):
    id = "first_candidate"
    name = "First Candidate"
    version = "1.0.0"

    def choose(self, candidates: Set[str]) -> str:
        return min(candidates)
