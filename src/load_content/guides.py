"""Guide collection: content/guides, plus category and search filtering."""

from pathlib import Path

from load_content.load_content import GUIDE_FIELDS, get_item, load_items
from load_content.models import ContentItem

GUIDES_SUBDIR = "guides"
ALL_CATEGORIES = "all"


def get_all_guides(content_dir: Path | str) -> list[ContentItem]:
    return load_items(Path(content_dir) / GUIDES_SUBDIR, GUIDE_FIELDS)


def get_guide(content_dir: Path | str, slug: str) -> ContentItem | None:
    return get_item(Path(content_dir) / GUIDES_SUBDIR, slug, GUIDE_FIELDS)


def get_guides_by_category(guides: list[ContentItem], category: str) -> list[ContentItem]:
    if category == ALL_CATEGORIES:
        return list(guides)
    return [guide for guide in guides if guide.metadata.get("category") == category]


def get_guide_categories(guides: list[ContentItem]) -> list[str]:
    """Sorted, de-duplicated categories used by the given guides."""
    return sorted({guide.metadata["category"] for guide in guides if guide.metadata.get("category")})


def filter_guides(
    guides: list[ContentItem],
    category: str = ALL_CATEGORIES,
    query: str = "",
) -> list[ContentItem]:
    """Filter guides by category, then by a case-insensitive search query.

    The query matches against title, description, category and tags.
    """
    result = get_guides_by_category(guides, category)

    query = query.strip().lower()
    if not query:
        return result

    return [guide for guide in result if _matches(guide, query)]


def _matches(guide: ContentItem, query: str) -> bool:
    metadata = guide.metadata
    fields = [
        str(metadata.get("title", "")),
        str(metadata.get("description", "")),
        str(metadata.get("category", "")),
    ]
    tags = metadata.get("tags") or []
    if isinstance(tags, str):
        tags = [tags]
    fields.extend(str(tag) for tag in tags)
    return any(query in value.lower() for value in fields)
