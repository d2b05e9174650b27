"""
OneWorkLoc error types — one class per failure kind of encode/decode.
"""

from typing import Any, Optional


class OneWorkLocError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class FormatError(OneWorkLocError):
    """Structurally invalid envelope or token."""

    def __init__(self, message: str, code: str = "format_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class DecodeError(OneWorkLocError):
    """Invalid base-62 input or undecodable compressed stream."""

    def __init__(self, message: str, code: str = "decode_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)


class TruncatedEscapeError(DecodeError, FormatError):
    """Run-length escape marker not followed by a (count, value) pair."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        OneWorkLocError.__init__(self, "truncated_escape", message, details)


class IntegrityError(OneWorkLocError):
    def __init__(self, expected: str, actual: str):
        super().__init__(
            "integrity_error",
            f"Checksum verification failed: expected {expected}, got {actual}",
            {"expected": expected, "actual": actual},
        )


class EncodeError(OneWorkLocError):
    def __init__(self, message: str):
        super().__init__("encode_error", message)
