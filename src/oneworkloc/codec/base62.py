"""
Arbitrary-precision base-62 codec.

The byte string is read as one big-endian unsigned integer and rendered in
the alphabet ``0-9A-Za-z``. Leading zero bytes carry no numeric value and are
therefore lost on a round trip; existing tokens depend on this, so it stays.

Repeated division is quadratic in the input length. Past ``_SPLIT_DIGITS``
digits both directions switch to divide-and-conquer, splitting at widths of
``_SPLIT_DIGITS * 2**k`` so only a handful of powers of 62 are ever cached. This
gives the same output.
"""

from functools import lru_cache

from oneworkloc.errors import DecodeError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)

_INDEX = {char: value for value, char in enumerate(ALPHABET)}
_SPLIT_DIGITS = 512
# log2(62) is just under 6, so a digit holds at most 6 bits.
_SPLIT_BITS = _SPLIT_DIGITS * 6


@lru_cache(maxsize=32)
def _power(rung: int) -> int:
    """62 raised to ``_SPLIT_DIGITS * 2**rung``; only these exponents are ever cached."""
    return BASE ** (_SPLIT_DIGITS << rung)


def _digits(num: int, width: int = 0) -> str:
    """Render ``num`` left-padded with zero digits to ``width``; 0 renders as ''."""
    if num.bit_length() <= _SPLIT_BITS:
        chars = []
        while num > 0:
            num, rem = divmod(num, BASE)
            chars.append(ALPHABET[rem])
        return "".join(reversed(chars)).rjust(width, ALPHABET[0])
    # Largest rung whose low part holds at most half the bits; the high part stays non-zero.
    rung = 0
    while (_SPLIT_BITS << (rung + 1)) * 2 <= num.bit_length():
        rung += 1
    low_width = _SPLIT_DIGITS << rung
    high, low = divmod(num, _power(rung))
    return _digits(high, max(width - low_width, 0)) + _digits(low, low_width)


def _value(text: str) -> int:
    if len(text) <= _SPLIT_DIGITS:
        num = 0
        for char in text:
            num = num * BASE + _INDEX[char]
        return num
    rung = 0
    while (_SPLIT_DIGITS << (rung + 1)) < len(text):
        rung += 1
    low_width = _SPLIT_DIGITS << rung
    return _value(text[:-low_width]) * _power(rung) + _value(text[-low_width:])


def encode(data: bytes) -> str:
    num = int.from_bytes(data, "big")
    if num == 0:
        return ALPHABET[0]
    return _digits(num)


def decode(text: str) -> bytes:
    if not text:
        raise DecodeError("Cannot decode an empty base62 string")
    for position, char in enumerate(text):
        if char not in _INDEX:
            raise DecodeError(
                f"Invalid base62 character {char!r} at position {position}",
                details={"character": char, "position": position},
            )
    num = _value(text)
    return num.to_bytes((num.bit_length() + 7) // 8, "big")
