"""CLI for building the review catalog."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from aggregate_reviews.aggregate import build_catalog
from aggregate_reviews.helpers import parse_aggregate_reviews_args
from common.cli_helpers import setup_logging
from common.config import load_config
from common.local_io import save_jsonl_records_local
from fetch_products.client import ProductApiClient
from normalize_products.categories import build_rules

load_dotenv()

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_aggregate_reviews_args(argv)
    config = load_config(args.config)

    client = None if args.local_only else ProductApiClient.from_config(config)
    catalog = build_catalog(
        content_dir=args.content_dir or config.content.content_dir,
        client=client,
        limit=args.limit or config.remote.limit,
        remote_timeout=args.remote_timeout or config.remote.deadline,
        rules=build_rules(config.category_rules),
        affiliate_tag=config.site.affiliate_tag,
    )

    if not catalog:
        logger.warning("Catalog is empty")
        return

    for entry in catalog:
        logger.info("  %s | %s | %s | %s", entry.date, entry.source, entry.category, entry.slug)

    if args.load_local:
        save_jsonl_records_local(catalog, "review_catalog", args.output_dir)


if __name__ == "__main__":
    main()
