"""YAML frontmatter for result files.

A result file starts with::

    ---
    type: review
    timestamp: '2024-01-01T00:00:00.000Z'
    person: jane-doe
    ---

Blocks are written with ``yaml.safe_dump`` so values containing colons,
newlines or YAML-special characters are quoted. They are read with
``yaml.BaseLoader``, which keeps every scalar a string (timestamps are not
coerced to datetimes). Blocks that are not valid YAML, or that hold an
unquoted value containing ``" #"``, are read line by line as ``key: value``
pairs, splitting on the first colon.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import yaml
from pydantic import ValidationError

from resume_reviewer.results.models import ResultMetadata

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"

_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<block>.*?)\r?\n---[ \t]*(?:\r?\n|\Z)",
    re.DOTALL,
)

# A top-level unquoted value containing " #", which YAML would cut off as a
# comment. safe_dump always quotes such values.
_LEGACY_COMMENT_VALUE = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*:[ \t]+[^'\"\s][^\n]*?[ \t]#",
    re.MULTILINE,
)


def render_frontmatter(metadata: ResultMetadata) -> str:
    """Render metadata as a ``---``-delimited YAML block ending in a newline."""
    block = yaml.safe_dump(
        metadata.frontmatter_fields(),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
        width=4096,
    )
    return f"{FRONTMATTER_DELIMITER}\n{block}{FRONTMATTER_DELIMITER}\n"


def split_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """Split a document into its frontmatter mapping and markdown body.

    Returns:
        ``(fields, body)``. ``fields`` is None when the document has no
        frontmatter envelope or the block is not a mapping; the body is then
        the whole document.
    """
    match = _FRONTMATTER_PATTERN.match(content)
    if match is None:
        return None, content

    block = match.group("block")
    body = content[match.end() :]

    if _LEGACY_COMMENT_VALUE.search(block):
        fields = _parse_lines(block)
    else:
        try:
            fields = yaml.load(block, Loader=yaml.BaseLoader)
        except yaml.YAMLError:
            fields = _parse_lines(block)

    if not isinstance(fields, dict):
        return None, body
    return fields, body


def parse_metadata(content: str) -> ResultMetadata | None:
    """Parse result metadata from a document.

    Returns None if the frontmatter is missing, unparsable, lacks ``type`` or
    ``timestamp``, or names an unknown result type.
    """
    fields, _ = split_frontmatter(content)
    if fields is None:
        return None

    try:
        return ResultMetadata.model_validate(fields)
    except ValidationError as e:
        logger.debug(f"Invalid result frontmatter: {e.error_count()} error(s)")
        return None


def _parse_lines(block: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in block.splitlines():
        key, _, value = line.partition(":")
        key = key.strip()
        value = value.strip()
        if key and value:
            fields[key] = value
    return fields
