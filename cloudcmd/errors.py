"""
Error types raised while converting a cloud-config document.

Every error carries the commands that were safely generated before the
failure point, so callers can decide whether to run that prefix.
"""

from typing import Any, List, Optional


class ConversionError(ValueError):
    """Base class for all conversion failures."""

    kind = "conversion_error"

    def __init__(self, message: str, commands: Optional[List[Any]] = None):
        super().__init__(message)
        self.message = message
        self.commands: List[Any] = list(commands or [])

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {"kind": self.kind, "message": self.message}


class DocumentSyntaxError(ConversionError):
    """The payload is not a well-formed YAML mapping."""

    kind = "syntax_error"


class DecodeError(ConversionError):
    """A command or action field has a wire shape the parser does not accept."""

    kind = "decode_error"

    def __init__(
        self,
        message: str,
        node: Any = None,
        module: Optional[str] = None,
        commands: Optional[List[Any]] = None,
    ):
        super().__init__(message, commands)
        self.node = node
        self.module = module

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.module:
            data["module"] = self.module
        return data


class ContentDecodeError(ConversionError):
    """A file's declared content encoding could not be applied."""

    kind = "content_decode_error"

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        commands: Optional[List[Any]] = None,
    ):
        super().__init__(message, commands)
        self.path = path

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.path is not None:
            data["path"] = self.path
        return data
