"""
Cloud-config actions for cloudcmd.

Each action parses the raw block of one cloud-config module and turns it
into the commands that replicate that module on the node. Only write_files
and runcmd produce commands; every other module is captured and ignored.
"""

import logging
import posixpath
from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cloudcmd.errors import ContentDecodeError, DecodeError
from cloudcmd.modules.command import SHELL, Cmd, parse_cmd
from cloudcmd.modules.document import Block
from cloudcmd.modules.encoding import ContentDecoder

logger = logging.getLogger("cloudcmd.actions")

# Supported cloud-config modules
WRITE_FILES = "write_files"
RUNCMD = "runcmd"

DEFAULT_OWNER = "root:root"
DEFAULT_PERMISSIONS = "0644"


def load_module_value(block: Block, module: str) -> Any:
    """Parse a block as YAML and return the value stored under its module key."""
    try:
        data = yaml.safe_load(block.text)
    except yaml.YAMLError as e:
        raise DecodeError(
            f"error parsing {module} action: {e}", node=block.text, module=module
        ) from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"error parsing {module} action: block is not a mapping", node=block.text, module=module
        )
    return data.get(module)


class FileSpec(BaseModel):
    """One entry of the write_files module."""

    model_config = ConfigDict(extra="ignore")

    path: str = Field(..., description="Destination path on the node")
    encoding: str = Field("", description="Content encoding label")
    owner: str = Field("", description="user:group owning the file")
    permissions: str = Field("", description="Octal file mode")
    content: str = Field("", description="File content, possibly encoded")
    append: bool = Field(False, description="Append instead of overwrite")

    @field_validator("encoding", "owner", "content", mode="before")
    @classmethod
    def scalar_as_string(cls, v):
        """Numbers such as owner: 1000 or content: 123 are written as text."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("permissions", mode="before")
    @classmethod
    def permissions_as_octal(cls, v):
        """An unquoted YAML 0600 arrives as the integer 384."""
        if v is None:
            return ""
        if isinstance(v, int) and not isinstance(v, bool):
            return f"{v:04o}"
        return v

    @property
    def normalized_path(self) -> str:
        # NB. cloud-init makes the path absolute; the node's cwd is unknown here
        return self.path.strip()

    @property
    def normalized_owner(self) -> str:
        return self.owner.strip() or DEFAULT_OWNER

    @property
    def normalized_permissions(self) -> str:
        return self.permissions.strip() or DEFAULT_PERMISSIONS


@dataclass
class WriteFiles:
    """Files that should be written to the node."""

    name: ClassVar[str] = WRITE_FILES
    files: List[FileSpec] = field(default_factory=list)

    @classmethod
    def from_block(cls, block: Block) -> "WriteFiles":
        value = load_module_value(block, cls.name)
        if value is None:
            return cls()
        if not isinstance(value, list):
            raise DecodeError(
                f"error parsing {cls.name} action: expected a list, got {type(value).__name__}",
                node=value,
                module=cls.name,
            )

        files = []
        for item in value:
            if not isinstance(item, dict):
                raise DecodeError(
                    f"error parsing {cls.name} action: file entry must be a mapping: {item!r}",
                    node=item,
                    module=cls.name,
                )
            try:
                files.append(FileSpec.model_validate(item))
            except ValidationError as e:
                raise DecodeError(
                    f"error parsing {cls.name} action: {e}", node=item, module=cls.name
                ) from e
        return cls(files=files)

    def commands(self, decoder: Optional[ContentDecoder] = None) -> List[Cmd]:
        """
        Generate the commands replicating the write_files module.

        Per file: mkdir of the parent directory, a cat fed through stdin,
        then chmod and chown when they differ from the defaults.

        Raises:
            ContentDecodeError: With the commands of earlier files attached
        """
        decoder = decoder or ContentDecoder()
        commands: List[Cmd] = []

        for spec in self.files:
            path = spec.normalized_path
            owner = spec.normalized_owner
            permissions = spec.normalized_permissions
            try:
                content = decoder.decode(spec.content, spec.encoding)
            except ContentDecodeError as e:
                logger.warning(f"Error decoding content for {path}: {e.message}")
                raise ContentDecodeError(
                    f"error decoding content for {path}: {e.message}",
                    path=path,
                    commands=commands,
                ) from e

            # cat with redirection needs the directory to exist
            directory = posixpath.dirname(posixpath.normpath(path)) or "."
            commands.append(Cmd(program="mkdir", args=["-p", directory]))

            redirect = ">>" if spec.append else ">"
            commands.append(
                Cmd(
                    program=SHELL,
                    args=["-c", f"cat {redirect} {path} /dev/stdin"],
                    stdin=content,
                )
            )

            if permissions != DEFAULT_PERMISSIONS:
                commands.append(Cmd(program="chmod", args=[permissions, path]))

            if owner != DEFAULT_OWNER:
                commands.append(Cmd(program="chown", args=[owner, path]))

        return commands


@dataclass
class RunCmd:
    """Commands from the runcmd module, in declaration order."""

    name: ClassVar[str] = RUNCMD
    cmds: List[Cmd] = field(default_factory=list)

    @classmethod
    def from_block(cls, block: Block) -> "RunCmd":
        value = load_module_value(block, cls.name)
        if value is None:
            return cls()
        if not isinstance(value, list):
            raise DecodeError(
                f"error parsing {cls.name} action: expected a list, got {type(value).__name__}",
                node=value,
                module=cls.name,
            )

        cmds = []
        for item in value:
            try:
                cmds.append(parse_cmd(item))
            except DecodeError as e:
                raise DecodeError(
                    f"error parsing {cls.name} action: {e.message}", node=e.node, module=cls.name
                ) from e
        return cls(cmds=cmds)

    def commands(self, decoder: Optional[ContentDecoder] = None) -> List[Cmd]:
        return list(self.cmds)


@dataclass
class Unknown:
    """A module this converter does not implement. Produces no commands."""

    name: str
    lines: List[str] = field(default_factory=list)

    @classmethod
    def from_block(cls, block: Block, name: Optional[str] = None) -> "Unknown":
        name = name or block.key
        logger.info(f"Ignoring unsupported cloud-config module: {name}")

        try:
            value = yaml.safe_load(block.text)
        except yaml.YAMLError:
            value = None
        if isinstance(value, dict):
            value = value.get(name)

        # Keep the value when it is a list of strings or a string, else the raw lines
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return cls(name=name, lines=list(value))
        if isinstance(value, str):
            return cls(name=name, lines=[value])
        return cls(name=name, lines=list(block.lines))

    def commands(self, decoder: Optional[ContentDecoder] = None) -> List[Cmd]:
        return []


Action = Union[WriteFiles, RunCmd, Unknown]
