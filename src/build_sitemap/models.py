"""Data models for sitemap generation."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float
