"""
Token assembly and parsing.

Token format: ``{host}/v{version}/{type}/{checksum}/{encoded_data}``. The data
tail is kept intact even if it contains further ``/`` separators.
"""

from typing import Optional

from pydantic import BaseModel

from oneworkloc.errors import FormatError
from oneworkloc.models.envelope import Metadata

DEFAULT_HOST = "OneWorkLoc.app"
VERSION_PREFIX = "v"


class TokenParts(BaseModel):
    host: Optional[str] = None
    version: int
    type: str
    checksum: str
    encoded_data: str

    @property
    def path(self) -> str:
        return f"{VERSION_PREFIX}{self.version}/{self.type}/{self.checksum}/{self.encoded_data}"

    def __str__(self) -> str:
        return f"{self.host}/{self.path}" if self.host else self.path


def build_token(metadata: Metadata, checksum: str, encoded_data: str, host: str = DEFAULT_HOST) -> str:
    host = host.rstrip("/")
    host_path = host.split("://", 1)[-1].split("/")[1:]
    if any(_is_version_tag(segment) for segment in host_path):
        raise FormatError(f"Host {host!r} has a path segment that reads as a version tag")
    return str(TokenParts(
        host=host,
        version=metadata.version,
        type=metadata.type,
        checksum=checksum,
        encoded_data=encoded_data,
    ))


def parse_path(path: str, host: Optional[str] = None) -> TokenParts:
    """Split ``v{n}/{type}/{checksum}/{data}`` into its parts."""
    segments = path.lstrip("/").split("/", 3)
    if len(segments) < 4:
        raise FormatError(
            f"Invalid token format: expected 4 path segments, got {len(segments)}",
            details={"path": path},
        )
    version_tag, content_type, checksum, encoded_data = segments
    if not version_tag.startswith(VERSION_PREFIX):
        raise FormatError(f"Invalid token structure: version segment {version_tag!r} must start with 'v'")
    digits = version_tag[len(VERSION_PREFIX):]
    if not (digits.isascii() and digits.isdigit()) or int(digits) < 1:
        raise FormatError(f"Invalid token structure: bad version number in {version_tag!r}")
    if not encoded_data:
        raise FormatError("Invalid token structure: encoded data segment is empty")
    return TokenParts(
        host=host,
        version=int(digits),
        type=content_type,
        checksum=checksum,
        encoded_data=encoded_data,
    )


def _is_version_tag(segment: str) -> bool:
    digits = segment[len(VERSION_PREFIX):]
    return segment.startswith(VERSION_PREFIX) and digits.isascii() and digits.isdigit()


def parse_token(token: str) -> TokenParts:
    """Parse a full token; a ``scheme://`` prefix is ignored.

    The host runs up to the first ``v{n}`` segment that has at least three
    segments after it, so hosts may carry a path such as ``localhost:3000/share``.
    """
    token = token.strip()
    if "://" in token:
        token = token.split("://", 1)[1]
    segments = token.split("/")
    if len(segments) < 2:
        raise FormatError("Invalid token format: no path after host", details={"token": token})
    split_at = 1
    for index in range(1, len(segments) - 3):
        if _is_version_tag(segments[index]):
            split_at = index
            break
    host = "/".join(segments[:split_at])
    return parse_path("/".join(segments[split_at:]), host=host or None)
