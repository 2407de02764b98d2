"""
Action registry for cloudcmd.

Maps a cloud-config module name to the constructor that parses its block.
The set of implemented modules is closed; anything else resolves to Unknown.
"""

from functools import partial
from typing import Callable, Dict

from cloudcmd.modules.document import Block

from .actions import RUNCMD, WRITE_FILES, Action, RunCmd, Unknown, WriteFiles

ActionConstructor = Callable[[Block], Action]

ACTION_REGISTRY: Dict[str, ActionConstructor] = {
    WRITE_FILES: WriteFiles.from_block,
    RUNCMD: RunCmd.from_block,
}


def resolve_action(name: str) -> ActionConstructor:
    """Return the constructor for a module, or an Unknown constructor bound to its name."""
    constructor = ACTION_REGISTRY.get(name)
    if constructor is not None:
        return constructor
    return partial(Unknown.from_block, name=name)
