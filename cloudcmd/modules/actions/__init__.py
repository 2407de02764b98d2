"""
Actions Module - Black Box Interface

Purpose: Turn one cloud-config module block into commands
Interface: resolve_action(), WriteFiles, RunCmd, Unknown, FileSpec
Hidden: Block parsing, write_files defaults, command generation

Unknown modules are accepted and never contribute commands.
"""

from .actions import (
    DEFAULT_OWNER,
    DEFAULT_PERMISSIONS,
    RUNCMD,
    WRITE_FILES,
    Action,
    FileSpec,
    RunCmd,
    Unknown,
    WriteFiles,
)
from .registry import ACTION_REGISTRY, resolve_action

__all__ = [
    "ACTION_REGISTRY",
    "DEFAULT_OWNER",
    "DEFAULT_PERMISSIONS",
    "RUNCMD",
    "WRITE_FILES",
    "Action",
    "FileSpec",
    "RunCmd",
    "Unknown",
    "WriteFiles",
    "resolve_action",
]
