"""
Candidate filtering given game feedback.

Given:
  - a pool of words (the dictionary, or what is left of it)
  - feedback (guess, distance, transforms) reported by the game

Return:
  - words that would have produced exactly the same canonical transforms
    against the guess.

Matching the full sequence is stricter than matching the distance: "cot"
and "cart" are both one edit away from "cat", but the first needs [R] and
the second [I], so feedback for either rules the other out.
"""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple, Union

from distle.logger import get_logger
from .distance import Op, transformation_list

logger = get_logger(__name__)

# Feedback history entries: (guess, distance, transforms)
History = Iterable[Tuple[str, int, Iterable[Union[Op, str]]]]


def normalize_transforms(transforms: Iterable[Union[Op, str]]) -> List[Op]:
    """
    Coerce a sequence of Op members or one-letter tags into a list of Op.

    Raises ValueError on an unknown tag.
    """
    out: List[Op] = []
    for t in transforms:
        try:
            out.append(Op(t))
        except ValueError as e:
            raise ValueError(f"Unknown transform tag: {t!r}") from e
    return out


def is_consistent(word: str, guess: str, transforms: Iterable[Union[Op, str]]) -> bool:
    """True if `word` as the secret would yield exactly `transforms` for `guess`."""
    return transformation_list(guess, word) == normalize_transforms(transforms)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with every (guess, distance, transforms) in
    `history`. Order is preserved as in `words`.
    """
    checks = [(g, normalize_transforms(ts)) for g, _dist, ts in history]

    out: List[str] = []
    for w in words:
        if all(transformation_list(g, w) == ts for g, ts in checks):
            out.append(w)
    return out


def apply_feedback(
        candidates: Set[str],
        guess: str,
        distance: int,
        transforms: Iterable[Union[Op, str]],
) -> Set[str]:
    """
    Prune `candidates` in place to the words consistent with one feedback event.

    Every word is judged first; the set is then rebuilt from the survivors,
    so it is never mutated while being iterated. `distance` is trusted as
    reported and only used for logging.

    Returns the same set object.
    """
    expected = normalize_transforms(transforms)
    keep = [w for w in candidates if transformation_list(guess, w) == expected]

    before = len(candidates)
    candidates.clear()
    candidates.update(keep)

    logger.debug(
        "feedback guess=%r distance=%d transforms=%s: %d -> %d candidates",
        guess, distance, "".join(op.value for op in expected), before, len(candidates),
    )
    return candidates
