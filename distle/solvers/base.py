from __future__ import annotations
import random
from typing import Dict, Iterable, List, Set, Type, Union

from distle.engine import Op, apply_feedback
from distle.exceptions import CandidatesExhaustedError
from distle.logger import get_logger

logger = get_logger(__name__)

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    One game session: the candidate set plus the policy that picks from it.

    The harness calls start_session once per game, then alternates
    next_guess / report_feedback until it declares the game over.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.max_guesses: int = 0
        self.guesses_left: int = 0
        self._candidates: Set[str] = set()
        self.rng = random.Random()

    def start_session(self, dictionary: Iterable[str], max_guesses: int,
                      seed: int | None = None) -> None:
        self._candidates = set(dictionary)
        self.max_guesses = int(max_guesses)
        self.guesses_left = self.max_guesses
        if seed is not None:
            self.rng.seed(seed)
        logger.debug("%s: session start, %d words, %d guesses",
                     self.id, len(self._candidates), self.max_guesses)

    @property
    def candidates(self) -> List[str]:
        """Sorted snapshot of the words still consistent with all feedback."""
        return sorted(self._candidates)

    def next_guess(self) -> str:
        if not self._candidates:
            raise CandidatesExhaustedError(
                "no candidates left; the reported feedback is inconsistent with the dictionary")
        guess = self.choose(self._candidates)
        self.guesses_left -= 1
        return guess

    def report_feedback(self, guess: str, edit_distance: int,
                        transforms: Iterable[Union[Op, str]]) -> None:
        apply_feedback(self._candidates, guess, edit_distance, transforms)

    def choose(self, candidates: Set[str]) -> str:
        raise NotImplementedError("Override in subclass")
