"""Encoding of bases as 4-bit codes packed two per byte, with ``N`` as padding."""

from __future__ import annotations

SENT_CODE = 0x0
PAD_CODE = 0xF

_ENCODE = {"A": 0x1, "C": 0x5, "G": 0x9, "T": 0xD, "$": SENT_CODE, "N": PAD_CODE}
_DECODE = {code: base for base, code in _ENCODE.items()}
_CODE_INDEX = {SENT_CODE: 0, 0x1: 1, 0x5: 2, 0x9: 3, 0xD: 4}


def encode_base(c: str) -> int:
    """Return the 4-bit code of a base, the sentinel ``$`` or padding ``N``."""
    try:
        return _ENCODE[c]
    except KeyError:
        raise ValueError(f"encode_base: invalid base {c!r}") from None


def decode_base(code: int) -> str:
    """Return the symbol for the low four bits of ``code``."""
    try:
        return _DECODE[code & 0xF]
    except KeyError:
        raise ValueError(f"decode_base: invalid code {code:#x}") from None


def code_to_idx(code: int) -> int:
    """Return the symbol index: ``$``=0, A=1, C=2, G=3, T=4."""
    try:
        return _CODE_INDEX[code & 0xF]
    except KeyError:
        raise ValueError(f"code_to_idx: invalid code {code:#x}") from None


def pack_codes(seq: str) -> bytes:
    """Pack a sequence two codes per byte; an odd length is padded with ``N``."""
    codes = [encode_base(c) for c in seq]
    if len(codes) % 2:
        codes.append(PAD_CODE)
    return bytes((high << 4) | low for high, low in zip(codes[0::2], codes[1::2]))


def unpack_codes(packed: bytes) -> bytes:
    """Split every packed byte into its high and low 4-bit codes."""
    return bytes(
        nibble for byte in packed for nibble in ((byte >> 4) & 0xF, byte & 0xF)
    )


def to_string(packed: bytes) -> str:
    """Decode every code of a packed sequence, padding included."""
    return "".join(decode_base(code) for code in unpack_codes(packed))