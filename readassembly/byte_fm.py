"""FM-index over arbitrary bytes, one symbol per byte."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

SENTINEL = 0


def _as_bytes(data: str | bytes | Iterable[int]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class ByteFMIndex:
    """Approximate pattern search over any byte string."""

    def __init__(self, text: str | bytes | Iterable[int]) -> None:
        data = _as_bytes(text) + bytes([SENTINEL])
        self._length = len(data)
        self._sa = sorted(range(self._length), key=lambda start: data[start:])
        bwt = bytes(data[start - 1] for start in self._sa)
        table = []
        total = 0
        for symbol in sorted(set(bwt)):
            occ = list(accumulate((entry == symbol for entry in bwt), initial=0))
            table.append((symbol, total, occ))
            total += occ[-1]
        self._table = tuple(table)

    def locate(self, pattern: str | bytes | Iterable[int], max_err: int) -> list[int]:
        """Return the sorted offsets where ``pattern`` matches with at most ``max_err`` mismatches.

        The sentinel takes part in the search like any other symbol.
        """
        targets = _as_bytes(pattern)
        hits: set[int] = set()
        stack = [(len(targets) - 1, 0, self._length, 0)]
        while stack:
            idx, left, right, errs = stack.pop()
            if idx < 0:
                hits.update(self._sa[left:right])
                continue
            target = targets[idx]
            for symbol, base, occ in self._table:
                next_err = errs + (symbol != target)
                if next_err > max_err:
                    continue
                new_left = base + occ[left]
                new_right = base + occ[right]
                if new_left < new_right:
                    stack.append((idx - 1, new_left, new_right, next_err))
        return sorted(hits)