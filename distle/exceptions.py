"""Exception hierarchy for distle.

Argument problems (bad tags, non-positive budgets) raise the builtin
``ValueError``; the classes below cover failures specific to the game.
"""

from __future__ import annotations


class DistleError(Exception):
    """Base exception for all distle errors."""


class TableInvariantError(DistleError):
    """Reconstruction hit a table cell that no recurrence branch explains."""


class CandidatesExhaustedError(DistleError, LookupError):
    """A guess was requested but no candidate is consistent with the feedback."""
