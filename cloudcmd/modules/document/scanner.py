"""
Ordered Block Scanner for cloudcmd.

Splits a cloud-config payload into one block per top-level module, in
source order. A generic YAML load does not keep module order, and module
order decides the order of the generated commands.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

logger = logging.getLogger("cloudcmd.document.scanner")

# A module key starts at column zero and is made of letters and underscores.
BLOCK_START = re.compile(r"^([a-zA-Z_]+):")


@dataclass
class Block:
    """Raw text belonging to one top-level module."""

    key: str
    lines: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def iter_blocks(raw: bytes) -> Iterator[Block]:
    """Yield blocks as soon as the next block start (or end of input) is seen."""
    current: Optional[Block] = None

    text = raw.decode("utf-8", errors="surrogateescape")
    if text.endswith("\n"):
        text = text[:-1]

    for line in text.split("\n"):
        line = line.rstrip("\r")
        match = BLOCK_START.match(line)
        if match:
            if current is not None:
                yield current
            current = Block(key=match.group(1))

        # Lines before the first module key belong to no block
        if current is not None:
            current.lines.append(line)

    if current is not None:
        yield current


def split(raw: bytes) -> List[Block]:
    """
    Split the payload into ordered blocks.

    Args:
        raw: Raw cloud-config bytes

    Returns:
        Blocks in the order their keys appear in the source
    """
    blocks = list(iter_blocks(raw))
    logger.debug(f"Scanned {len(blocks)} blocks: {[b.key for b in blocks]}")
    return blocks
