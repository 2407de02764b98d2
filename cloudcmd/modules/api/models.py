"""
cloudcmd API data models.

These models define the JSON returned by the HTTP conversion endpoint.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from cloudcmd.errors import ConversionError
from cloudcmd.modules.command import Cmd


class ConversionErrorInfo(BaseModel):
    """Why a conversion stopped."""

    kind: str = Field(..., description="syntax_error, decode_error or content_decode_error")
    message: str = Field(..., description="Human readable error")
    path: Optional[str] = Field(None, description="File whose content failed to decode")
    module: Optional[str] = Field(None, description="Module whose block failed to parse")

    @classmethod
    def from_error(cls, error: ConversionError) -> "ConversionErrorInfo":
        return cls(**error.to_dict())


class ConvertResponse(BaseModel):
    """Commands generated from a cloud-config payload."""

    commands: List[Cmd] = Field(default_factory=list, description="Commands, in execution order")
    count: int = Field(0, description="Number of commands")
    error: Optional[ConversionErrorInfo] = Field(
        None, description="Set when conversion failed; commands then hold the safe prefix"
    )

    @classmethod
    def from_commands(
        cls, commands: List[Cmd], error: Optional[ConversionError] = None
    ) -> "ConvertResponse":
        return cls(
            commands=commands,
            count=len(commands),
            error=ConversionErrorInfo.from_error(error) if error else None,
        )
