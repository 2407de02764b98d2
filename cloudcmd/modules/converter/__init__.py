"""
Converter Module - Black Box Interface

Purpose: Convert a raw cloud-config payload into ordered provisioning commands
Interface: convert(), get_actions()
Hidden: Validate-then-scan pipeline, action dispatch

Pure function of its input: no I/O, no shared state, safe to call concurrently.
"""

from .converter import convert, get_actions

__all__ = ["convert", "get_actions"]
