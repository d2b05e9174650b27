"""
Encode/decode operations: serialize -> compress -> checksum -> base62, and back.
"""

import logging

from oneworkloc.codec import base62, rle
from oneworkloc.codec.checksum import checksum as compute_checksum
from oneworkloc.errors import EncodeError, FormatError, IntegrityError, OneWorkLocError
from oneworkloc.models.envelope import DecodedContent, Envelope, Metadata, deserialize, serialize
from oneworkloc.token import DEFAULT_HOST, build_token, parse_token

logger = logging.getLogger(__name__)


def encode(content: str, metadata: Metadata, host: str = DEFAULT_HOST) -> str:
    """Encode content and metadata into a shareable token."""
    try:
        serialized = serialize(Envelope(meta=metadata, data=content))
        compressed = rle.compress(serialized)
        encoded = base62.encode(compressed)
        token = build_token(metadata, compute_checksum(serialized), encoded, host=host)
    except Exception as e:
        logger.error(f"Encoding failed: {e}")
        raise EncodeError(f"Failed to encode content: {e}") from e
    logger.debug(f"Encoded {len(serialized)} bytes -> {len(compressed)} compressed, {len(encoded)} base62 chars")
    return token


def decode(encoded_data: str, checksum: str) -> DecodedContent:
    """Decode the data segment of a token and verify it against its checksum."""
    try:
        compressed = base62.decode(encoded_data)
        raw = rle.decompress(compressed)
        actual = compute_checksum(raw)
        if actual != checksum:
            logger.warning(f"Checksum mismatch: token says {checksum}, payload hashes to {actual}")
            raise IntegrityError(expected=checksum, actual=actual)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError(f"Envelope is not valid UTF-8: {e}") from e
        envelope = deserialize(text)
    except OneWorkLocError as e:
        logger.error(f"Decoding failed: {e}")
        raise
    return DecodedContent(content=envelope.data, metadata=envelope.meta)


def decode_token(token: str) -> DecodedContent:
    """Parse a full token and decode it."""
    parts = parse_token(token)
    result = decode(parts.encoded_data, parts.checksum)
    meta = result.metadata
    if meta.type != parts.type or meta.version != parts.version:
        logger.warning(
            f"Token path says v{parts.version}/{parts.type} but payload is v{meta.version}/{meta.type}"
        )
    return result
