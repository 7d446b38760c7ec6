"""Data models for normalized catalog entries."""

from dataclasses import dataclass, field
from typing import Optional

SOURCE_LOCAL = "local"
SOURCE_REMOTE = "remote"


@dataclass
class NormalizedEntry:
    """A review in the common shape shared by local and remote content."""
    slug: str
    title: str
    date: str
    description: str
    category: str
    body: str = ""
    source: str = SOURCE_LOCAL
    product_id: Optional[str] = None
    brand: Optional[str] = None
    rating: Optional[float] = None
    image_url: Optional[str] = None
    external_url: Optional[str] = None
    updated_date: Optional[str] = None
    price: Optional[float] = None
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
