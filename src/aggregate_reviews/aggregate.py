"""Merge local reviews and remote products into one ordered catalog."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from pathlib import Path
from typing import Iterable

from common.datetime import effective_date
from fetch_products.client import ProductApiClient
from fetch_products.errors import RemoteServiceError
from fetch_products.models import RemoteProduct
from load_content.models import ContentItem
from load_content.reviews import get_all_reviews
from normalize_products.categories import CATEGORY_RULES
from normalize_products.models import NormalizedEntry
from normalize_products.normalize import normalize_item, normalize_product

logger = logging.getLogger(__name__)


def aggregate(
    local_items: Iterable[ContentItem],
    remote_products: Iterable[RemoteProduct],
    rules=CATEGORY_RULES,
    affiliate_tag: str | None = None,
) -> list[NormalizedEntry]:
    """Combine local and remote reviews into a de-duplicated catalog.

    A local review always wins over a remote product with the same product
    id; the remote record is dropped, not merged. The result is sorted
    newest first by effective date, with unparsable dates last.
    """
    local_entries = _dedupe_local([normalize_item(item, rules) for item in local_items])

    taken_ids = {_product_key(e.product_id) for e in local_entries if e.product_id}
    taken_slugs = {e.slug for e in local_entries}

    remote_entries = []
    overridden = 0
    for product in remote_products:
        entry = normalize_product(product, rules, affiliate_tag)
        key = _product_key(entry.product_id)
        if key in taken_ids or entry.slug in taken_slugs:
            overridden += 1
            continue
        taken_ids.add(key)
        taken_slugs.add(entry.slug)
        remote_entries.append(entry)

    catalog = local_entries + remote_entries
    catalog.sort(key=lambda e: effective_date(e.date, e.updated_date), reverse=True)

    logger.info(
        "Aggregated %d entries (%d local, %d remote, %d remote skipped)",
        len(catalog),
        len(local_entries),
        len(remote_entries),
        overridden,
    )
    return catalog


def build_catalog(
    content_dir: Path | str,
    client: ProductApiClient | None,
    limit: int | None = 100,
    remote_timeout: float | None = None,
    rules=CATEGORY_RULES,
    affiliate_tag: str | None = None,
) -> list[NormalizedEntry]:
    """Load local reviews and fetch remote products concurrently, then aggregate.

    The remote fetch may fail or exceed ``remote_timeout`` seconds; either
    way the catalog is built from local reviews alone. Pass ``client=None``
    to skip the remote source entirely.

    An in-flight request cannot be cancelled. After the deadline the worker
    thread keeps running until its own read timeout, and the interpreter
    joins it at exit. ``ProductApiClient.from_config`` caps the read timeout
    at the configured deadline to bound that overrun.
    """
    started = time.monotonic()
    executor = ThreadPoolExecutor(max_workers=2)
    try:
        local_future = executor.submit(get_all_reviews, content_dir)
        remote_future = executor.submit(client.list_products, limit=limit) if client is not None else None

        local_items = local_future.result()
        remaining = None if remote_timeout is None else max(0.0, remote_timeout - (time.monotonic() - started))
        remote_products = _collect_remote(remote_future, remaining, remote_timeout)
    finally:
        executor.shutdown(wait=False, cancel_futures=True)

    return aggregate(local_items, remote_products, rules, affiliate_tag)


def _collect_remote(future, timeout: float | None, deadline: float | None) -> list[RemoteProduct]:
    if future is None:
        logger.info("Remote source disabled, building from local content only")
        return []
    try:
        return future.result(timeout=timeout)
    except FutureTimeoutError:
        logger.error("Remote fetch exceeded %.1fs, continuing with local content only", deadline)
    except RemoteServiceError as e:
        logger.error("Failed to fetch remote products, continuing with local content only: %s", e)
    except Exception as e:
        logger.exception("Unexpected error fetching remote products, continuing with local content only: %s", e)
    return []


def _dedupe_local(entries: list[NormalizedEntry]) -> list[NormalizedEntry]:
    """Keep the first local review per product id.

    Entries arrive newest first from the loader, so the newest review of a
    product is the one kept.
    """
    seen = set()
    result = []
    for entry in entries:
        if entry.product_id:
            key = _product_key(entry.product_id)
            if key in seen:
                logger.warning("Duplicate local review for product %s: skipping %s", entry.product_id, entry.slug)
                continue
            seen.add(key)
        result.append(entry)
    return result


def _product_key(product_id: str | None) -> str:
    return (product_id or "").strip().casefold()
