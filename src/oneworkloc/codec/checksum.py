"""
CRC-32 (IEEE, reflected) truncated to five hex digits for display in tokens.

This detects corruption only; collisions between envelopes are expected.
"""

from typing import Union

POLYNOMIAL = 0xEDB88320
CHECKSUM_LENGTH = 5


def crc32(data: bytes) -> int:
    crc = 0xFFFFFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ (POLYNOMIAL if crc & 1 else 0)
    return ~crc & 0xFFFFFFFF


def checksum(data: Union[bytes, str]) -> str:
    """Last five hex digits of the CRC-32, upper-cased. Strings are hashed as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return f"{crc32(data):08x}"[-CHECKSUM_LENGTH:].upper()
