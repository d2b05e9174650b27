"""
Run-length compressor with an escape-coded triple.

A run of more than three identical bytes becomes ``ESCAPE, count, value``;
shorter runs are copied literally. Runs are capped at 255 so the count fits
in one byte.
"""

from oneworkloc.errors import TruncatedEscapeError

ESCAPE = 0xFF
MAX_RUN = 255
MIN_RUN = 4


def compress(data: bytes) -> bytes:
    out = bytearray()
    i = 0
    n = len(data)
    while i < n:
        current = data[i]
        count = 1
        while i + count < n and data[i + count] == current and count < MAX_RUN:
            count += 1
        # The marker byte is always escaped, or a literal one would read as an escape.
        if count >= MIN_RUN or current == ESCAPE:
            out += bytes((ESCAPE, count, current))
        else:
            out += bytes((current,)) * count
        i += count
    return bytes(out)


def decompress(data: bytes) -> bytes:
    out = bytearray()
    i = 0
    n = len(data)
    while i < n:
        if data[i] == ESCAPE:
            if i + 2 >= n:
                raise TruncatedEscapeError(
                    f"Escape marker at offset {i} is missing its count/value pair",
                    details={"offset": i, "length": n},
                )
            out += bytes((data[i + 2],)) * data[i + 1]
            i += 3
        else:
            out.append(data[i])
            i += 1
    return bytes(out)
