"""Encoding of base pairs into single bytes, one 4-bit code per base.

A packed sequence ends with the sentinel byte ``SENT_PAIR``.
"""

from __future__ import annotations

from functools import lru_cache

SENT_PAIR = 0x00

_ENCODE = {"A": 0x1, "C": 0x5, "G": 0x9, "T": 0xD, "$": 0x0}
_DECODE = {code: base for base, code in _ENCODE.items()}
_NIBBLE_INDEX = {0x1: 0, 0x5: 1, 0x9: 2, 0xD: 3}


def encode_base(c: str) -> int:
    """Return the 4-bit code of a base or of the sentinel ``$``."""
    try:
        return _ENCODE[c]
    except KeyError:
        raise ValueError(f"encode_base: invalid base {c!r}") from None


def decode_base(code: int) -> str:
    """Return the base for the low four bits of ``code``."""
    try:
        return _DECODE[code & 0xF]
    except KeyError:
        raise ValueError(f"decode_base: invalid code {code:#x}") from None


def nibble_to_idx(n: int) -> int:
    """Return the alphabet index (A=0, C=1, G=2, T=3) of a base code."""
    try:
        return _NIBBLE_INDEX[n & 0xF]
    except KeyError:
        raise ValueError(f"nibble_to_idx: invalid code {n:#x}") from None


def pack_pairs(seq: str) -> bytes:
    """Pack a sequence two bases per byte and append the sentinel byte.

    With an odd length the last base is dropped.
    """
    pairs = (
        (encode_base(high) << 4) | encode_base(low)
        for high, low in zip(seq[0::2], seq[1::2])
    )
    return bytes(pairs) + bytes([SENT_PAIR])


def byte_to_idx(b: int) -> int:
    """Return the symbol index of a packed byte: 0 for the sentinel, 1..16 otherwise."""
    if b == SENT_PAIR:
        return 0
    return 1 + (nibble_to_idx(b >> 4) << 2) + nibble_to_idx(b & 0xF)


@lru_cache(maxsize=None)
def alphabet() -> tuple[int, ...]:
    """Return the 16 base-pair bytes in lexicographic order."""
    codes = (0x1, 0x5, 0x9, 0xD)
    return tuple((high << 4) | low for high in codes for low in codes)


def to_string(packed: bytes) -> str:
    """Unpack bytes into bases, ending with ``$`` at the first sentinel byte."""
    parts = []
    for byte in packed:
        if byte == SENT_PAIR:
            parts.append("$")
            break
        parts.append(decode_base(byte >> 4))
        parts.append(decode_base(byte & 0xF))
    return "".join(parts)