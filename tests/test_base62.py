import os

import pytest

from oneworkloc.codec.base62 import ALPHABET, decode, encode
from oneworkloc.errors import DecodeError


def test_alphabet_order():
    assert ALPHABET[:10] == "0123456789"
    assert ALPHABET[10] == "A"
    assert ALPHABET[36] == "a"
    assert len(ALPHABET) == 62


def test_zero_encodes_to_single_zero_char():
    assert encode(b"") == "0"
    assert encode(b"\x00\x00") == "0"


def test_small_values():
    assert encode(b"\x01") == "1"
    assert encode(b"\x3d") == "z"
    assert encode(b"\x3e") == "10"
    assert encode(b"\xff") == "47"
    assert decode("47") == b"\xff"


def test_round_trip_text():
    data = b'{"meta":{"type":"text"},"data":"hi"}'
    encoded = encode(data)
    assert set(encoded) <= set(ALPHABET)
    assert decode(encoded) == data


def test_leading_zero_bytes_are_dropped():
    assert decode(encode(b"\x00\x00abc")) == b"abc"


def test_decode_zero_is_empty():
    assert decode("0") == b""


@pytest.mark.parametrize("size", [1, 100, 400, 3000, 10000])
def test_round_trip_random(size):
    data = b"\x01" + os.urandom(size)
    assert decode(encode(data)) == data


def test_large_input_matches_schoolbook_conversion():
    data = b"\x7f" + os.urandom(2000)
    num = int.from_bytes(data, "big")
    chars = []
    while num:
        num, rem = divmod(num, 62)
        chars.append(ALPHABET[rem])
    assert encode(data) == "".join(reversed(chars))


def test_large_input_with_inner_zero_digits():
    data = b"\x01" + b"\x00" * 3000 + b"\x01"
    assert decode(encode(data)) == data


@pytest.mark.parametrize("text", ["abc-def", "a b", "é", "abc/"])
def test_invalid_character(text):
    with pytest.raises(DecodeError) as exc_info:
        decode(text)
    assert exc_info.value.details["position"] == next(i for i, c in enumerate(text) if c not in ALPHABET)


def test_empty_string_rejected():
    with pytest.raises(DecodeError):
        decode("")


def test_power_cache_stays_small_across_input_sizes():
    from oneworkloc.codec import base62

    base62._power.cache_clear()
    for size in range(3200, 3400, 7):
        data = b"\x01" + os.urandom(size)
        assert decode(encode(data)) == data
    # Only the split ladder 512, 1024, 2048, 4096 digits is ever needed here.
    assert base62._power.cache_info().currsize <= 4
