"""Data models for locally authored content."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ContentItem:
    """A review or guide read from the content store."""
    slug: str
    metadata: dict[str, Any] = field(default_factory=dict)
    body: str = ""
