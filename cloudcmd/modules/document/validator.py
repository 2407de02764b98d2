"""
Document Validator for cloudcmd.

Confirms a raw cloud-config payload is a well-formed YAML mapping before
the line-oriented scanner ever sees it.
"""

import logging
from typing import Any, Dict

import yaml

from cloudcmd.errors import DocumentSyntaxError

logger = logging.getLogger("cloudcmd.document.validator")


def validate(raw: bytes) -> Dict[str, Any]:
    """
    Parse the whole payload as YAML and require a top-level mapping.

    Args:
        raw: Raw cloud-config bytes

    Returns:
        The parsed mapping (empty for an empty document)

    Raises:
        DocumentSyntaxError: If the payload is not valid YAML or not a mapping
    """
    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        logger.warning(f"cloud-config is not valid yaml: {e}")
        raise DocumentSyntaxError(f"cloud-config is not valid yaml: {e}") from e

    if document is None:
        return {}

    if not isinstance(document, dict):
        raise DocumentSyntaxError(
            f"cloud-config must be a mapping, got {type(document).__name__}"
        )

    return document
