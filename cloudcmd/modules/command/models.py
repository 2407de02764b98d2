"""
Command model for cloudcmd.

A command is one step to run on the provisioned node: a program, its
arguments, and optional data piped to its standard input.
"""

import base64
import shlex
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, computed_field, field_serializer

from cloudcmd.errors import DecodeError

SHELL = "/bin/sh"

# Marks a stdin that is not valid UTF-8 and travels base64-encoded
STDIN_BASE64 = "base64"


class CmdForm(str, Enum):
    """Wire shape a command was decoded from."""

    LIST = "list"
    SHELL = "shell"


class Cmd(BaseModel):
    """A shell command to run on the node."""

    program: str = Field(..., description="Executable to run")
    args: List[str] = Field(default_factory=list, description="Arguments, passed verbatim")
    stdin: Optional[str] = Field(None, description="Data fed to the process standard input")

    @property
    def argv(self) -> List[str]:
        return [self.program, *self.args]

    @property
    def stdin_bytes(self) -> Optional[bytes]:
        """Exact bytes to feed the process, binary content included."""
        if self.stdin is None:
            return None
        return self.stdin.encode("utf-8", errors="surrogateescape")

    @computed_field
    @property
    def stdin_encoding(self) -> Optional[str]:
        """None for text stdin, "base64" when the serialized stdin is base64."""
        if self.stdin is None:
            return None
        try:
            self.stdin.encode("utf-8")
        except UnicodeEncodeError:
            return STDIN_BASE64
        return None

    @field_serializer("stdin")
    def serialize_stdin(self, stdin: Optional[str]) -> Optional[str]:
        if self.stdin_encoding == STDIN_BASE64:
            return base64.b64encode(self.stdin_bytes).decode("ascii")
        return stdin

    def to_shell(self) -> str:
        """Render as a single POSIX shell line."""
        line = shlex.join(self.argv)
        if self.stdin is None:
            return line
        if self.stdin_encoding == STDIN_BASE64:
            encoded = base64.b64encode(self.stdin_bytes).decode("ascii")
            return f"printf '%s' {encoded} | base64 -d | {line}"
        return f"printf '%s' {shlex.quote(self.stdin)} | {line}"

    def __str__(self) -> str:
        return self.to_shell()


def cmd_from_list(node: List[Any]) -> Cmd:
    """Head of the list is the program, the tail are its arguments."""
    if not node:
        raise DecodeError("command list is empty", node=node)
    if not all(isinstance(item, str) for item in node):
        raise DecodeError(f"command list must contain only strings: {node!r}", node=node)
    return Cmd(program=node[0], args=list(node[1:]))


def cmd_from_string(node: str) -> Cmd:
    """The whole string is one shell command line, wrapped in /bin/sh -c."""
    return Cmd(program=SHELL, args=["-c", node])


def decode_cmd(node: Any) -> Tuple[CmdForm, Cmd]:
    """
    Decode a runcmd item, reporting which wire shape it used.

    Raises:
        DecodeError: If the item is neither a list nor a string
    """
    if isinstance(node, list):
        return CmdForm.LIST, cmd_from_list(node)
    if isinstance(node, str):
        return CmdForm.SHELL, cmd_from_string(node)
    raise DecodeError(
        f"command must be a list or a string, got {type(node).__name__}: {node!r}",
        node=node,
    )


def parse_cmd(node: Any) -> Cmd:
    """Decode a runcmd item into a Cmd."""
    _, cmd = decode_cmd(node)
    return cmd
