import pytest

from credits_query.decoder import MAX_UINT64, decode_uint64, encode_uint64_arg
from credits_query.errors import ValueOutOfRangeError


def test_decode_empty_sequence_is_zero():
    assert decode_uint64([]) == 0


def test_decode_big_endian_value():
    assert decode_uint64([b"\x00\x64"]) == 100


def test_decode_uses_only_first_item():
    assert decode_uint64([b"\x01", b"\xff\xff"]) == 1


def test_decode_empty_first_item_is_zero():
    assert decode_uint64([b""]) == 0


def test_decode_max_uint64():
    assert decode_uint64([b"\xff" * 8]) == MAX_UINT64


def test_decode_leading_zeros_beyond_eight_bytes():
    assert decode_uint64([b"\x00" * 4 + b"\x00\x00\x00\x00\x00\x00\x00\x2a"]) == 42


def test_decode_overflow_raises():
    with pytest.raises(ValueOutOfRangeError, match="is not a uint64"):
        decode_uint64([(2**64).to_bytes(9, "big")])


def test_decode_high_bit_is_not_a_sign():
    assert decode_uint64([b"\x80"]) == 128


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "00"),
        (1, "01"),
        (15, "0f"),
        (16, "10"),
        (255, "ff"),
        (256, "0100"),
        (4096, "1000"),
        (MAX_UINT64, "ff" * 8),
    ],
)
def test_encode_arg_is_even_length_hex(value, expected):
    assert encode_uint64_arg(value) == expected


@pytest.mark.parametrize("value", [0, 7, 300, 65535, 1 << 33, 123456789012345, MAX_UINT64])
def test_encode_arg_decodes_back_to_value(value):
    encoded = encode_uint64_arg(value)
    assert len(encoded) % 2 == 0
    assert int.from_bytes(bytes.fromhex(encoded), "big") == value


@pytest.mark.parametrize("value", [-1, 2**64])
def test_encode_arg_rejects_out_of_range(value):
    with pytest.raises(ValueOutOfRangeError):
        encode_uint64_arg(value)
