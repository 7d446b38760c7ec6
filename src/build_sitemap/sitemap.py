"""Build sitemap.xml and robots.txt from the review catalog and guides."""

import logging
from datetime import datetime, timezone
from typing import Iterable

from lxml import etree

from build_sitemap.models import SitemapEntry
from common.config import DEFAULT_SITE_URL
from common.datetime import OLDEST, effective_date
from load_content.models import ContentItem
from normalize_products.models import NormalizedEntry

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, change frequency, priority)
STATIC_PAGES = (
    ("", "daily", 1.0),
    ("/reviews", "daily", 0.9),
    ("/guides", "weekly", 0.9),
    ("/about", "monthly", 0.5),
    ("/contact", "monthly", 0.4),
)

DISALLOWED_PATHS = ("/api/", "/admin/")


def normalize_site_url(site_url: str | None) -> str:
    return (site_url or DEFAULT_SITE_URL).rstrip("/")


def build_sitemap(
    site_url: str | None,
    reviews: Iterable[NormalizedEntry],
    guides: Iterable[ContentItem],
    product_ids: Iterable[str],
    categories: Iterable[dict],
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """Collect sitemap entries: static pages, reviews, products, guides, categories."""
    base_url = normalize_site_url(site_url)
    now = now or datetime.now(timezone.utc)

    entries = [
        SitemapEntry(f"{base_url}{path}", now, frequency, priority)
        for path, frequency, priority in STATIC_PAGES
    ]

    entries.extend(
        SitemapEntry(
            f"{base_url}/review/{review.slug}",
            _last_modified(review.date, review.updated_date, now),
            "monthly",
            0.8,
        )
        for review in reviews
    )

    entries.extend(
        SitemapEntry(f"{base_url}/product/{product_id}", now, "weekly", 0.85)
        for product_id in dict.fromkeys(product_ids)
        if product_id
    )

    entries.extend(
        SitemapEntry(
            f"{base_url}/guides/{guide.slug}",
            _last_modified(guide.metadata.get("date"), guide.metadata.get("updatedDate"), now),
            "monthly",
            0.7,
        )
        for guide in guides
    )

    entries.extend(
        SitemapEntry(f"{base_url}/category/{category['slug']}", now, "weekly", 0.7)
        for category in categories
    )

    logger.info("Built sitemap with %d URLs", len(entries))
    return entries


def _last_modified(published, updated, fallback: datetime) -> datetime:
    value = effective_date(published, updated)
    return fallback if value == OLDEST else value


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> bytes:
    """Serialize entries as a sitemaps.org urlset document."""
    urlset = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap={None: SITEMAP_NS})
    for entry in entries:
        url = etree.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
        etree.SubElement(url, f"{{{SITEMAP_NS}}}loc").text = entry.url
        etree.SubElement(url, f"{{{SITEMAP_NS}}}lastmod").text = entry.last_modified.isoformat()
        etree.SubElement(url, f"{{{SITEMAP_NS}}}changefreq").text = entry.change_frequency
        etree.SubElement(url, f"{{{SITEMAP_NS}}}priority").text = f"{entry.priority:g}"
    return etree.tostring(urlset, xml_declaration=True, encoding="UTF-8", pretty_print=True)


def render_robots_txt(site_url: str | None) -> str:
    base_url = normalize_site_url(site_url)
    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {path}" for path in DISALLOWED_PATHS)
    lines.append("")
    lines.append(f"Sitemap: {base_url}/sitemap.xml")
    return "\n".join(lines) + "\n"
