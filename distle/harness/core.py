"""
Game harness core primitives.

- feedback:  what the game tells the player about one guess.
- run_case:  play a single game (one hidden secret) with a given solver.
- run_batch: play many games in sequence (optionally a sample prefix).
- Enforces the guess budget at the harness layer; solvers only track it.

These functions are UI-agnostic so they can be reused from tests, a
notebook, or an experiment script without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Tuple

from distle.engine import edit_distance, transformation_list
from distle.exceptions import CandidatesExhaustedError
from distle.logger import get_logger

logger = get_logger(__name__)

# Guess budget used when the caller does not give one.
DEFAULT_MAX_GUESSES = 10


def _check_budget(max_guesses: int) -> None:
    """Guardrail: reject budgets that would end the game before the first guess."""
    if max_guesses < 1:
        raise ValueError(f"max_guesses must be a positive integer; got {max_guesses}")


def feedback(guess: str, secret: str) -> Tuple[int, List[str]]:
    """
    Score `guess` against `secret` the way the game does.

    Returns:
      (edit distance, canonical transforms as one-letter tags)
    """
    return edit_distance(guess, secret), [op.value for op in transformation_list(guess, secret)]


def run_case(
        solver,
        secret: str,
        *,
        dictionary: Iterable[str],
        max_guesses: int = DEFAULT_MAX_GUESSES,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver finds the secret or runs out of guesses.

    Args:
        solver:       a BaseSolver (start_session / next_guess / report_feedback)
        secret:       the hidden word for this case
        dictionary:   all words the secret and guesses are drawn from
        max_guesses:  guess budget (must be >= 1)
        seed:         RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            secret (str), solver_id (str), success (bool), exhausted (bool),
            guesses (int), time_ms (float),
            history (list[(guess, distance, transforms)])
    """
    _check_budget(max_guesses)

    solver.start_session(dictionary, max_guesses, seed=seed)

    history: List[Tuple[str, int, List[str]]] = []
    success = False
    exhausted = False

    t0 = time.time()
    for _turn in range(1, max_guesses + 1):
        try:
            guess = solver.next_guess()
        except CandidatesExhaustedError:
            # Only reachable if the secret is missing from the dictionary.
            logger.warning("%s ran out of candidates for secret %r", solver.id, secret)
            exhausted = True
            break

        distance, transforms = feedback(guess, secret)
        history.append((guess, distance, transforms))

        if guess == secret:
            success = True
            break

        solver.report_feedback(guess, distance, transforms)

    dt = (time.time() - t0) * 1000.0
    logger.info("%s: secret=%r success=%s guesses=%d", solver.id, secret, success, len(history))
    return {
        "secret": secret, "solver_id": solver.id, "success": success,
        "exhausted": exhausted, "guesses": len(history), "time_ms": dt,
        "history": history,
    }


def run_batch(
        solver,
        secrets: List[str],
        *,
        dictionary: Iterable[str],
        max_guesses: int = DEFAULT_MAX_GUESSES,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are played.

    Each case's seed is derived from the base seed (seed + index) so runs are
    reproducible but not identical across cases.
    """
    _check_budget(max_guesses)

    words = list(dictionary)
    pool = list(secrets) if sample is None else list(secrets)[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, dictionary=words,
                            max_guesses=max_guesses, seed=case_seed))
    return out
