"""
cloudcmd - cloud-config to provisioning commands

Converts a cloud-config document into the ordered shell commands that
replicate it on a freshly provisioned node, without cloud-init installed.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- No module knows the internals of another
- All communication through defined interfaces

Modules:
- document: YAML validation and ordered block scanning
- command: Command model and runcmd item decoding
- encoding: write_files content decoding
- actions: Per-module parsing and command generation
- converter: The convert() entry point
- api: HTTP request/response models
"""

from cloudcmd.errors import ContentDecodeError, ConversionError, DecodeError, DocumentSyntaxError
from cloudcmd.modules.command import Cmd
from cloudcmd.modules.converter import convert

__version__ = "1.0.0"

__all__ = [
    "Cmd",
    "ContentDecodeError",
    "ConversionError",
    "DecodeError",
    "DocumentSyntaxError",
    "convert",
]
