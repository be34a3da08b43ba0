"""
Edit distance with adjacent transpositions, plus canonical path reconstruction.

Operations (each costs 1):
  - 'R' : replace one character
  - 'T' : transpose two adjacent characters
  - 'I' : insert one character
  - 'D' : delete one character

Table layout:
  table[r, c] = minimal number of operations turning s0[:r] into s1[:c].
  Row 0 is 0..len(s1) (insertions), column 0 is 0..len(s0) (deletions).

Reconstruction walks from (len(s0), len(s1)) back to (0, 0) and emits one
operation per unit of cost. When several branches explain a cell, the first
one in this order wins:

    Replace > (free match) > Transpose > Insert > Delete

The order is part of the contract: the game reports the canonical sequence
and candidates are kept only if they reproduce it exactly, so a different
tie-break would change which words survive filtering.
"""

from __future__ import annotations

from enum import Enum
from typing import List

import numpy as np

from distle.exceptions import TableInvariantError


class Op(str, Enum):
    """One edit operation; the value is the game's one-letter tag."""
    REPLACE = "R"
    TRANSPOSE = "T"
    INSERT = "I"
    DELETE = "D"

    def __str__(self) -> str:
        return self.value


def _transposable(s0: str, s1: str, r: int, c: int) -> bool:
    """True if the last two characters of s0[:r] and s1[:c] mirror each other."""
    return (
            r >= 2 and c >= 2
            and s0[r - 1] == s1[c - 2]
            and s0[r - 2] == s1[c - 1]
    )


def build_table(s0: str, s1: str) -> np.ndarray:
    """
    Build the (len(s0)+1) x (len(s1)+1) cost table for turning s0 into s1.

    The returned array is read-only.

    Examples:
      build_table("ab", "ba")[2, 2] -> 1   (one transposition)
      build_table("", "abc")[0, 3]  -> 3   (three insertions)
    """
    m, n = len(s0), len(s1)
    table = np.zeros((m + 1, n + 1), dtype=np.int64)
    table[:, 0] = np.arange(m + 1)
    table[0, :] = np.arange(n + 1)

    for r in range(1, m + 1):
        for c in range(1, n + 1):
            branches = [
                table[r - 1, c] + 1,                                   # delete
                table[r, c - 1] + 1,                                   # insert
                table[r - 1, c - 1] + (s0[r - 1] != s1[c - 1]),        # replace / match
            ]
            if _transposable(s0, s1, r, c):
                branches.append(table[r - 2, c - 2] + 1)               # transpose
            table[r, c] = min(branches)

    table.setflags(write=False)
    return table


def edit_distance(s0: str, s1: str) -> int:
    """Minimal number of R/T/I/D operations turning s0 into s1."""
    if s0 == s1:
        return 0
    return int(build_table(s0, s1)[len(s0), len(s1)])


def reconstruct(s0: str, s1: str, table: np.ndarray) -> List[Op]:
    """
    Return the canonical top-down operation sequence turning s0 into s1.

    Args:
      s0    : string being transformed
      s1    : target string
      table : cost table from build_table(s0, s1)

    Returns:
      List[Op] starting from the full-string subproblem, e.g. [R, R, T, I].
      Free matches emit nothing, so len(result) == table[-1, -1].

    Raises:
      TableInvariantError if the table has the wrong shape or a cell cannot be
      explained by any branch, which means the table was not built by
      build_table for this pair.
    """
    if table.shape != (len(s0) + 1, len(s1) + 1):
        raise TableInvariantError(
            f"table shape {table.shape} does not fit {s0!r} -> {s1!r}"
        )

    ops: List[Op] = []
    r, c = len(s0), len(s1)

    while r > 0 or c > 0:
        cur = int(table[r, c])

        if r >= 1 and c >= 1:
            diag = int(table[r - 1, c - 1])
            if s0[r - 1] != s1[c - 1]:
                if diag + 1 == cur:
                    ops.append(Op.REPLACE)
                    r, c = r - 1, c - 1
                    continue
            elif diag == cur:
                r, c = r - 1, c - 1
                continue

        if _transposable(s0, s1, r, c) and int(table[r - 2, c - 2]) + 1 == cur:
            ops.append(Op.TRANSPOSE)
            r, c = r - 2, c - 2
            continue

        if c >= 1 and int(table[r, c - 1]) + 1 == cur:
            ops.append(Op.INSERT)
            c -= 1
            continue

        if r >= 1 and int(table[r - 1, c]) + 1 == cur:
            ops.append(Op.DELETE)
            r -= 1
            continue

        raise TableInvariantError(
            f"no branch explains table[{r}, {c}] = {cur} for {s0!r} -> {s1!r}"
        )

    return ops


def transformation_list(s0: str, s1: str) -> List[Op]:
    """Build the table for (s0, s1) and return its canonical sequence."""
    if s0 == s1:
        return []
    return reconstruct(s0, s1, build_table(s0, s1))
