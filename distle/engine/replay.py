"""
Replay a top-down operation sequence against the source string.

The sequence carries tags only, so characters that an Insert or Replace
introduces are taken from the target. Transpositions swap the two source
characters under the cursor. Equal characters under the cursor are consumed
as free matches before the next operation is applied, mirroring how the
canonical reconstruction prefers a free match whenever one is available.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from .distance import Op


def replay(s0: str, s1: str, transforms: Iterable[Union[Op, str]]) -> str:
    """
    Apply `transforms` to `s0` from the tail and return the resulting string.

    Raises:
      ValueError if an operation runs past either string, or if characters
      remain that the sequence does not account for.
    """
    out: List[str] = []  # built back-to-front
    r, c = len(s0), len(s1)

    def skip_matches() -> None:
        nonlocal r, c
        while r > 0 and c > 0 and s0[r - 1] == s1[c - 1]:
            out.append(s0[r - 1])
            r, c = r - 1, c - 1

    for t in transforms:
        op = Op(t)
        skip_matches()
        if op is Op.REPLACE:
            if r < 1 or c < 1:
                raise ValueError(f"replace past end at ({r}, {c})")
            out.append(s1[c - 1])
            r, c = r - 1, c - 1
        elif op is Op.TRANSPOSE:
            if r < 2 or c < 2:
                raise ValueError(f"transpose past end at ({r}, {c})")
            out.append(s0[r - 2])
            out.append(s0[r - 1])
            r, c = r - 2, c - 2
        elif op is Op.INSERT:
            if c < 1:
                raise ValueError(f"insert past end at ({r}, {c})")
            out.append(s1[c - 1])
            c -= 1
        else:
            if r < 1:
                raise ValueError(f"delete past end at ({r}, {c})")
            r -= 1

    skip_matches()
    if r or c:
        raise ValueError(f"sequence leaves {r} source and {c} target characters unmatched")

    return "".join(reversed(out))
