"""FM-index over a DNA sequence with one 4-bit code per base."""

from __future__ import annotations

from itertools import accumulate

from readassembly.nibblecode import code_to_idx, encode_base, pack_codes, unpack_codes

_SYMBOL_COUNT = 5
_ALPHABET = (0x1, 0x5, 0x9, 0xD)


class NibbleFMIndex:
    """Approximate pattern search with per-base mismatches."""

    def __init__(self, reference: str) -> None:
        codes = bytes(encode_base(c) for c in reference + "$")
        self._length = len(codes)
        self._sa = sorted(range(self._length), key=lambda start: codes[start:])
        # codes[-1] is the sentinel, which precedes the suffix at offset 0.
        bwt = [code_to_idx(codes[start - 1]) for start in self._sa]
        counts = [bwt.count(symbol) for symbol in range(_SYMBOL_COUNT)]
        self._first = list(accumulate(counts, initial=0))[:_SYMBOL_COUNT]
        self._occ = [
            list(accumulate((entry == symbol for entry in bwt), initial=0))
            for symbol in range(_SYMBOL_COUNT)
        ]
        self._symbols = tuple((code, code_to_idx(code)) for code in _ALPHABET)

    def locate(self, pattern: str, max_err: int) -> list[int]:
        """Return the sorted offsets where ``pattern`` matches with at most ``max_err`` mismatches."""
        targets = unpack_codes(pack_codes(pattern))[: len(pattern)]
        hits: set[int] = set()
        stack = [(len(targets) - 1, 0, self._length, max_err)]
        while stack:
            idx, left, right, errs = stack.pop()
            if errs < 0 or left >= right:
                continue
            if idx < 0:
                hits.update(self._sa[left:right])
                continue
            target = targets[idx]
            for code, symbol in self._symbols:
                base = self._first[symbol]
                occ = self._occ[symbol]
                new_left = base + occ[left]
                new_right = base + occ[right]
                if new_left < new_right:
                    stack.append((idx - 1, new_left, new_right, errs - (code != target)))
        return sorted(hits)