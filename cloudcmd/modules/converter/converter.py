"""
Cloud-config to provisioning commands converter.

Turns a raw cloud-config payload into the ordered list of commands to run
on a node, without installing cloud-init on it. The pipeline has two
distinct phases: the whole document is validated as YAML first, then it
is scanned line by line so module order is preserved.
"""

import logging
from typing import List, Optional

from cloudcmd.config.provider import DecoderConfig
from cloudcmd.errors import ContentDecodeError
from cloudcmd.modules.actions import Action, resolve_action
from cloudcmd.modules.command import Cmd
from cloudcmd.modules.document import split, validate
from cloudcmd.modules.encoding import ContentDecoder

logger = logging.getLogger("cloudcmd.converter")


def get_actions(raw: bytes) -> List[Action]:
    """
    Parse the payload into actions, in module order.

    Every block is parsed before any command is generated, so a malformed
    module fails the conversion with no commands.
    """
    actions: List[Action] = []
    for block in split(raw):
        logger.debug(f"Parsing block {block.key} ({len(block.lines)} lines)")
        actions.append(resolve_action(block.key)(block))
    return actions


def convert(raw: bytes, decoder_config: Optional[DecoderConfig] = None) -> List[Cmd]:
    """
    Convert a cloud-config payload into commands to run in sequence on the node.

    Args:
        raw: Raw cloud-config bytes
        decoder_config: Content decoding options (defaults apply when omitted)

    Returns:
        Commands of all modules, concatenated in source order

    Raises:
        DocumentSyntaxError: The payload is not a YAML mapping
        DecodeError: A module has a shape that cannot be parsed
        ContentDecodeError: A file's content could not be decoded; the
            error's ``commands`` hold everything generated before it
    """
    validate(raw)
    actions = get_actions(raw)

    decoder = ContentDecoder(decoder_config)
    commands: List[Cmd] = []
    for action in actions:
        try:
            commands.extend(action.commands(decoder))
        except ContentDecodeError as e:
            e.commands = commands + e.commands
            raise

    logger.info(f"Converted cloud-config into {len(commands)} commands")
    return commands
