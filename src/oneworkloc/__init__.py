"""
oneworkloc — shareable workstate tokens.

Packs a text payload and its metadata into a compact, URL-safe token and
restores it exactly, detecting corruption on the way back.
"""

from oneworkloc.encoder import encode, decode, decode_token
from oneworkloc.errors import (
    OneWorkLocError,
    FormatError,
    DecodeError,
    TruncatedEscapeError,
    IntegrityError,
    EncodeError,
)
from oneworkloc.models.envelope import CURRENT_VERSION, DecodedContent, Envelope, Metadata, new_metadata
from oneworkloc.token import DEFAULT_HOST, TokenParts, build_token, parse_path, parse_token

__version__ = "0.1.0"
__all__ = [
    "encode",
    "decode",
    "decode_token",
    "OneWorkLocError",
    "FormatError",
    "DecodeError",
    "TruncatedEscapeError",
    "IntegrityError",
    "EncodeError",
    "CURRENT_VERSION",
    "DecodedContent",
    "Envelope",
    "Metadata",
    "new_metadata",
    "DEFAULT_HOST",
    "TokenParts",
    "build_token",
    "parse_path",
    "parse_token",
]
