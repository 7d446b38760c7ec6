"""Review collection: content/reviews."""

from pathlib import Path

from load_content.load_content import REVIEW_FIELDS, get_item, load_items
from load_content.models import ContentItem

REVIEWS_SUBDIR = "reviews"


def get_all_reviews(content_dir: Path | str) -> list[ContentItem]:
    return load_items(Path(content_dir) / REVIEWS_SUBDIR, REVIEW_FIELDS)


def get_review(content_dir: Path | str, slug: str) -> ContentItem | None:
    return get_item(Path(content_dir) / REVIEWS_SUBDIR, slug, REVIEW_FIELDS)
