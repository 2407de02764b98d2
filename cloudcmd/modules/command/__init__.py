"""
Command Module - Black Box Interface

Purpose: Normalized representation of one executable step
Interface: Cmd, parse_cmd(), decode_cmd(), cmd_from_list(), cmd_from_string()
Hidden: Wire shape detection

Commands are only described here, never executed.
"""

from .models import SHELL, STDIN_BASE64, Cmd, CmdForm, cmd_from_list, cmd_from_string, decode_cmd, parse_cmd

__all__ = [
    "SHELL",
    "STDIN_BASE64",
    "Cmd",
    "CmdForm",
    "cmd_from_list",
    "cmd_from_string",
    "decode_cmd",
    "parse_cmd",
]
