"""CLI for writing sitemap.xml and robots.txt."""

from __future__ import annotations

import argparse
import logging

from dotenv import load_dotenv

from aggregate_reviews.aggregate import build_catalog
from build_sitemap.sitemap import build_sitemap, render_robots_txt, render_sitemap_xml
from common.cli_helpers import setup_logging
from common.config import load_config
from common.local_io import write_text_local
from fetch_products.client import ProductApiClient
from load_content.guides import get_all_guides
from normalize_products.categories import build_rules, get_all_categories

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def parse_build_sitemap_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write sitemap.xml and robots.txt.")
    parser.add_argument("--config", default=None, help="Config name under configs/")
    parser.add_argument("--content-dir", default=None, help="Content root (default: from config)")
    parser.add_argument("--site-url", default=None, help="Public site URL (default: from config)")
    parser.add_argument("--local-only", action="store_true", help="Skip the remote product API")
    parser.add_argument("--output-dir", default="public", help="Directory to write into (default: public)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_build_sitemap_args(argv)
    config = load_config(args.config)

    content_dir = args.content_dir or config.content.content_dir
    site_url = args.site_url or config.site.site_url
    rules = build_rules(config.category_rules)

    client = None if args.local_only else ProductApiClient.from_config(config)
    reviews = build_catalog(
        content_dir=content_dir,
        client=client,
        limit=config.remote.limit,
        remote_timeout=config.remote.deadline,
        rules=rules,
        affiliate_tag=config.site.affiliate_tag,
    )
    guides = get_all_guides(content_dir)

    entries = build_sitemap(
        site_url=site_url,
        reviews=reviews,
        guides=guides,
        product_ids=[review.product_id for review in reviews if review.product_id],
        categories=get_all_categories(rules),
    )

    write_text_local(render_sitemap_xml(entries), "sitemap.xml", args.output_dir)
    write_text_local(render_robots_txt(site_url), "robots.txt", args.output_dir)
    logger.info("Wrote %d sitemap URLs to %s", len(entries), args.output_dir)


if __name__ == "__main__":
    main()
