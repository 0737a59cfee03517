"""FM-index over a DNA sequence packed two bases per byte.

The index searches whole base pairs, so a hit always starts at an even
offset and a mismatch is counted once for each pair that differs.
"""

from __future__ import annotations

from itertools import accumulate

from readassembly.paircode import alphabet, byte_to_idx, pack_pairs

_SYMBOL_COUNT = 17


class PairFMIndex:
    """Approximate pattern search over pair-packed DNA."""

    def __init__(self, reference: str) -> None:
        text = pack_pairs(reference)
        self._length = len(text)
        self._sa = sorted(range(self._length), key=lambda start: text[start:])
        # text[-1] is the sentinel byte, which precedes the suffix at offset 0.
        bwt = [byte_to_idx(text[start - 1]) for start in self._sa]
        counts = [bwt.count(symbol) for symbol in range(_SYMBOL_COUNT)]
        self._first = list(accumulate(counts, initial=0))[:_SYMBOL_COUNT]
        self._occ = [
            list(accumulate((entry == symbol for entry in bwt), initial=0))
            for symbol in range(_SYMBOL_COUNT)
        ]
        self._symbols = tuple((byte, byte_to_idx(byte)) for byte in alphabet())

    def locate(self, pattern: str, max_err: int) -> list[int]:
        """Return the sorted base offsets where ``pattern`` matches.

        At most ``max_err`` base pairs may differ. With an odd length the
        last base of the pattern is ignored.
        """
        targets = pack_pairs(pattern)[:-1]
        hits: set[int] = set()
        stack = [(len(targets) - 1, 0, self._length, max_err)]
        while stack:
            idx, left, right, errs = stack.pop()
            if errs < 0 or left >= right:
                continue
            if idx < 0:
                hits.update(2 * start for start in self._sa[left:right])
                continue
            target = targets[idx]
            for byte, symbol in self._symbols:
                base = self._first[symbol]
                occ = self._occ[symbol]
                new_left = base + occ[left]
                new_right = base + occ[right]
                if new_left < new_right:
                    stack.append((idx - 1, new_left, new_right, errs - (byte != target)))
        return sorted(hits)