"""Helper functions for aggregate_reviews CLI."""

from __future__ import annotations

import argparse

from common.cli_helpers import positive_float


def parse_aggregate_reviews_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for aggregate_reviews.'''

    parser = argparse.ArgumentParser(description="Build the review catalog from local and remote content.")

    # Input options
    parser.add_argument(
        "--config",
        default=None,
        help="Config name under configs/ (default: $CONFIG_ENV or prod)",
    )
    parser.add_argument(
        "--content-dir",
        default=None,
        help="Content root holding reviews/ and guides/ (default: from config)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of remote products to fetch (default: from config)",
    )
    parser.add_argument(
        "--remote-timeout",
        type=positive_float,
        default=None,
        help="Overall deadline for the remote fetch in seconds (default: from config)",
    )
    parser.add_argument(
        "--local-only",
        action="store_true",
        help="Skip the remote product API",
    )

    # Output options
    parser.add_argument("--load-local", action="store_true", help="Save the catalog as JSONL under output/")
    parser.add_argument("--output-dir", default="output", help="Directory for --load-local (default: output)")
    return parser.parse_args(argv)
