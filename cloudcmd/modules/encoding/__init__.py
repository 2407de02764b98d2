"""
Encoding Module - Black Box Interface

Purpose: Turn declared file content into the bytes to write on the node
Interface: decode(), resolve_encodings(), ContentDecoder, ContentEncoding
Hidden: base64 and gzip handling, label aliases
"""

from .decoder import ENCODING_LABELS, ContentDecoder, ContentEncoding, decode, resolve_encodings

__all__ = [
    "ENCODING_LABELS",
    "ContentDecoder",
    "ContentEncoding",
    "decode",
    "resolve_encodings",
]
