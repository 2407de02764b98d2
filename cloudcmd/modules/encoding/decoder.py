"""
Content Decoder for cloudcmd.

Resolves a write_files encoding label into a chain of transformations
and applies it to the declared file content.
"""

import base64
import binascii
import gzip
import logging
import zlib
from enum import Enum
from typing import Callable, Dict, List, Optional

from cloudcmd.config.provider import DecoderConfig
from cloudcmd.errors import ContentDecodeError

logger = logging.getLogger("cloudcmd.encoding")


class ContentEncoding(str, Enum):
    """Content transformations, named after their MIME types."""

    BASE64 = "application/base64"
    GZIP = "application/x-gzip"
    TEXT = "text/plain"


# Combined labels list their steps in application order
ENCODING_LABELS: Dict[str, List[ContentEncoding]] = {
    "": [ContentEncoding.TEXT],
    "text/plain": [ContentEncoding.TEXT],
    "gz": [ContentEncoding.GZIP],
    "gzip": [ContentEncoding.GZIP],
    "gz+base64": [ContentEncoding.BASE64, ContentEncoding.GZIP],
    "gzip+base64": [ContentEncoding.BASE64, ContentEncoding.GZIP],
    "gz+b64": [ContentEncoding.BASE64, ContentEncoding.GZIP],
    "gzip+b64": [ContentEncoding.BASE64, ContentEncoding.GZIP],
    "base64": [ContentEncoding.BASE64],
    "b64": [ContentEncoding.BASE64],
}


def resolve_encodings(label: Optional[str], strict: bool = False) -> List[ContentEncoding]:
    """
    Map a raw encoding label to the transformations it names.

    Args:
        label: Encoding label as written in the document (case-insensitive)
        strict: Reject unrecognized labels instead of treating them as plain text

    Returns:
        Transformations in application order

    Raises:
        ContentDecodeError: If strict and the label is not recognized
    """
    normalized = (label or "").lower().strip()
    encodings = ENCODING_LABELS.get(normalized)
    if encodings is not None:
        return list(encodings)

    if strict:
        raise ContentDecodeError(f"unknown content encoding: {label!r}")

    logger.warning(f"Unknown content encoding {label!r}, treating content as plain text")
    return [ContentEncoding.TEXT]


def _b64decode(data: bytes) -> bytes:
    # Line breaks from multi-line YAML scalars are not part of the payload
    data = data.replace(b"\r", b"").replace(b"\n", b"")
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as e:
        raise ContentDecodeError(f"invalid base64 content: {e}") from e


def _gunzip(data: bytes) -> bytes:
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise ContentDecodeError(f"invalid gzip content: {e}") from e


TRANSFORMS: Dict[ContentEncoding, Callable[[bytes], bytes]] = {
    ContentEncoding.BASE64: _b64decode,
    ContentEncoding.GZIP: _gunzip,
    ContentEncoding.TEXT: lambda data: data,
}


class ContentDecoder:
    """Decodes file content according to its declared encoding."""

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()

    def decode(self, content: str, label: Optional[str]) -> str:
        """
        Decode content declared with the given encoding label.

        Raises:
            ContentDecodeError: If the content cannot be decoded
        """
        chain = resolve_encodings(label, strict=self.config.strict_encodings)
        if not self.config.chain_encodings:
            # Legacy behavior: stop after the first transformation
            chain = chain[:1]

        if chain == [ContentEncoding.TEXT]:
            return content

        data = content.encode("utf-8", errors="surrogateescape")
        for encoding in chain:
            data = TRANSFORMS[encoding](data)
        return data.decode("utf-8", errors="surrogateescape")


def decode(content: str, label: Optional[str], config: Optional[DecoderConfig] = None) -> str:
    """Decode content with a one-off decoder."""
    return ContentDecoder(config).decode(content, label)
