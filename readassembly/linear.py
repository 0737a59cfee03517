"""Approximate pattern search by scanning every offset of the reference."""

from __future__ import annotations

from itertools import islice


def brute_force_locate(reference: str, pattern: str, max_err: int) -> list[int]:
    """Return every offset where ``pattern`` matches with at most ``max_err`` mismatches."""
    m = len(pattern)
    if m == 0 or len(reference) < m:
        return []
    limit = max(max_err + 1, 0)
    positions = []
    for start in range(len(reference) - m + 1):
        mismatches = (
            1 for ref_char, pat_char in zip(reference[start : start + m], pattern)
            if ref_char != pat_char
        )
        if sum(islice(mismatches, limit)) <= max_err:
            positions.append(start)
    return positions