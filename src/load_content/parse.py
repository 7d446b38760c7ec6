"""Front-matter parsing for content documents."""

import re
from typing import Any

import yaml

from load_content.errors import ContentParseError

# Opening fence, YAML block, closing fence; the body follows.
FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def parse_document(text: str, path=None) -> tuple[dict[str, Any], str]:
    """Split a document into its front-matter mapping and body text.

    A document without a front-matter block yields an empty mapping and the
    whole text as body.
    """
    text = text.lstrip("\ufeff")
    match = FRONTMATTER_RE.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise ContentParseError(path, f"invalid YAML front-matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ContentParseError(path, f"front-matter must be a mapping, got {type(data).__name__}")

    return data, text[match.end():]
