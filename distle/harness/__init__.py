from .core import DEFAULT_MAX_GUESSES, feedback, run_case, run_batch

__all__ = ["DEFAULT_MAX_GUESSES", "feedback", "run_case", "run_batch"]
