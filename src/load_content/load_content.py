"""Read reviews and guides from the local content store."""

import logging
from pathlib import Path
from typing import Iterable

from common.datetime import OLDEST, parse_content_date
from load_content.errors import ContentNotFoundError, ContentParseError
from load_content.models import ContentItem
from load_content.parse import parse_document

logger = logging.getLogger(__name__)

# Earlier extensions win when two files share a slug.
CONTENT_EXTENSIONS = (".mdx", ".md")

REVIEW_FIELDS = ("title", "date", "description")
GUIDE_FIELDS = ("title", "date", "description", "category")


def list_slugs(collection_dir: Path | str) -> list[str]:
    """List the slugs of every document in a collection directory."""
    return sorted(_index_collection(Path(collection_dir)))


def load_item(
    collection_dir: Path | str,
    slug: str,
    required_fields: Iterable[str] = REVIEW_FIELDS,
) -> ContentItem:
    """Load and parse a single document.

    Raises:
        ContentNotFoundError: No document exists for the slug.
        ContentParseError: The front-matter is malformed or incomplete.
    """
    collection_dir = Path(collection_dir)
    path = _index_collection(collection_dir).get(slug)
    if path is None:
        raise ContentNotFoundError(collection_dir, slug)
    return _read_item(path, slug, required_fields)


def get_item(
    collection_dir: Path | str,
    slug: str,
    required_fields: Iterable[str] = REVIEW_FIELDS,
) -> ContentItem | None:
    """Like load_item, but an absent document returns None."""
    try:
        return load_item(collection_dir, slug, required_fields)
    except ContentNotFoundError:
        return None


def load_items(
    collection_dir: Path | str,
    required_fields: Iterable[str] = REVIEW_FIELDS,
) -> list[ContentItem]:
    """Load every document in a collection, newest first.

    Documents that fail to parse are logged and skipped.
    """
    collection_dir = Path(collection_dir)
    required_fields = tuple(required_fields)

    items = []
    skipped = 0
    for slug, path in sorted(_index_collection(collection_dir).items()):
        try:
            items.append(_read_item(path, slug, required_fields))
        except ContentParseError as e:
            logger.warning("Skipping %s: %s", path, e.reason)
            skipped += 1

    items.sort(key=lambda item: parse_content_date(item.metadata.get("date")) or OLDEST, reverse=True)

    logger.info("Loaded %d items from %s (%d skipped)", len(items), collection_dir, skipped)
    return items


def _index_collection(collection_dir: Path) -> dict[str, Path]:
    """Map slug -> file path for a collection directory."""
    if not collection_dir.is_dir():
        logger.warning("Content directory not found: %s", collection_dir)
        return {}

    index: dict[str, Path] = {}
    for extension in CONTENT_EXTENSIONS:
        for path in sorted(collection_dir.glob(f"*{extension}")):
            if not path.is_file():
                continue
            slug = path.stem
            if slug in index:
                logger.warning("Duplicate slug '%s': keeping %s, ignoring %s", slug, index[slug].name, path.name)
                continue
            index[slug] = path
    return index


def _read_item(path: Path, slug: str, required_fields: Iterable[str]) -> ContentItem:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ContentParseError(path, f"not valid UTF-8: {e}") from e
    except OSError as e:
        raise ContentParseError(path, f"unreadable: {e}") from e

    metadata, body = parse_document(text, path)

    missing = [name for name in required_fields if metadata.get(name) in (None, "")]
    if missing:
        raise ContentParseError(path, f"missing required fields: {', '.join(missing)}")

    return ContentItem(slug=slug, metadata=metadata, body=body)
