"""
Document Module - Black Box Interface

Purpose: Validate a raw cloud-config payload and carve it into ordered blocks
Interface: validate(), split(), Block
Hidden: YAML loading, line scanning rules

Validation always runs before scanning so malformed input never reaches
the line-oriented scanner.
"""

from .scanner import Block, split
from .validator import validate

__all__ = ["Block", "split", "validate"]
