"""
Envelope models — the {meta, data} unit that is serialized, checksummed and compressed.
"""

import json
import re
import time
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from oneworkloc.errors import FormatError

CURRENT_VERSION = 3

_SURROGATE = re.compile("[\ud800-\udfff]")

ContentType = Literal["text", "code", "json", "diagram"]


class Metadata(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    # Field order is the serialization order.
    type: ContentType
    language: Optional[str] = None   # Only for type == "code"
    timestamp: int                   # Milliseconds since epoch
    version: int = Field(default=CURRENT_VERSION, ge=1)

    @model_validator(mode="after")
    def _language_only_for_code(self) -> "Metadata":
        if self.type == "code" and not self.language:
            raise ValueError("language is required when type is 'code'")
        if self.type != "code" and self.language is not None:
            raise ValueError(f"language must not be set when type is {self.type!r}")
        return self


class Envelope(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    meta: Metadata
    data: str

    @field_validator("data")
    @classmethod
    def _no_lone_surrogates(cls, value: str) -> str:
        # Lone surrogates have no UTF-8 form.
        match = _SURROGATE.search(value)
        if match:
            raise ValueError(f"data contains a lone surrogate U+{ord(match.group()):04X} at index {match.start()}")
        return value


class DecodedContent(BaseModel):
    """Result of decoding a token."""
    content: str
    metadata: Metadata


def new_metadata(
    content_type: ContentType,
    language: Optional[str] = None,
    version: int = CURRENT_VERSION,
    timestamp: Optional[int] = None,
) -> Metadata:
    """Build metadata stamped with the current time in milliseconds."""
    if timestamp is None:
        timestamp = time.time_ns() // 1_000_000
    return Metadata(type=content_type, language=language, timestamp=timestamp, version=version)


def serialize(envelope: Envelope) -> bytes:
    """Compact, key-ordered JSON as UTF-8. Unset language is omitted."""
    payload = envelope.model_dump(exclude_none=True)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def deserialize(raw: Union[bytes, str]) -> Envelope:
    try:
        return Envelope.model_validate_json(raw)
    except ValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or "envelope"
        raise FormatError(
            f"Invalid envelope at {location}: {first.get('msg', 'validation failed')}",
            details={"errors": errors},
        ) from e
