import pytest

from readassembly.nibblecode import (
    PAD_CODE,
    SENT_CODE,
    code_to_idx,
    decode_base,
    encode_base,
    pack_codes,
    to_string,
    unpack_codes,
)


@pytest.mark.parametrize(
    "base, code",
    [("A", 0x1), ("C", 0x5), ("G", 0x9), ("T", 0xD), ("$", 0x0), ("N", 0xF)],
)
def test_encode_base_codes(base, code):
    assert encode_base(base) == code


def test_encode_base_rejects_unknown():
    with pytest.raises(ValueError):
        encode_base("X")


@pytest.mark.parametrize("base", list("ACGT$N"))
def test_decode_inverts_encode(base):
    assert decode_base(encode_base(base)) == base


def test_decode_rejects_unknown_code():
    with pytest.raises(ValueError):
        decode_base(0x3)


def test_code_to_idx_order():
    assert [code_to_idx(encode_base(b)) for b in "$ACGT"] == [0, 1, 2, 3, 4]


def test_code_to_idx_rejects_padding():
    with pytest.raises(ValueError):
        code_to_idx(PAD_CODE)


@pytest.mark.parametrize("seq", ["", "A", "ACG", "ACGT", "TGCA$"])
def test_pack_length(seq):
    assert len(pack_codes(seq)) == (len(seq) + 1) // 2


@pytest.mark.parametrize("seq", ["ACGT", "TTGACA", "$A"])
def test_round_trip_even_length(seq):
    assert to_string(pack_codes(seq)) == seq


def test_odd_length_is_padded_with_n():
    assert to_string(pack_codes("ACG")) == "ACGN"
    assert unpack_codes(pack_codes("ACG"))[-1] == PAD_CODE


@pytest.mark.parametrize("seq", ["GATTACA", "CC", "T$"])
def test_unpack_returns_codes_in_order(seq):
    codes = unpack_codes(pack_codes(seq))
    assert codes[: len(seq)] == bytes(encode_base(c) for c in seq)
    assert len(codes) == 2 * len(pack_codes(seq))


def test_pack_known_bytes():
    assert pack_codes("A$") == bytes([(encode_base("A") << 4) | SENT_CODE])