"""Normalize local reviews and remote products into NormalizedEntry."""

from urllib.parse import quote, urlencode

from common.datetime import format_date, parse_content_date
from common.utils import first_value, to_float
from fetch_products.models import RemoteProduct
from load_content.models import ContentItem
from normalize_products.categories import CATEGORY_RULES, infer_category
from normalize_products.models import SOURCE_LOCAL, SOURCE_REMOTE, NormalizedEntry


PRODUCT_PAGE_URL = "https://www.amazon.com/dp/{asin}"


def normalize_product(
    product: RemoteProduct,
    rules=CATEGORY_RULES,
    affiliate_tag: str | None = None,
) -> NormalizedEntry:
    """Map a remote product onto the review shape."""
    category = infer_category(product.title, product.category, rules)

    created_at = parse_content_date(product.created_at)
    date = created_at.isoformat() if created_at else str(product.created_at or "")

    return NormalizedEntry(
        slug=product.product_id.lower(),
        title=product.title,
        date=date,
        description=product.summary or f"Expert review of {product.title}",
        category=category,
        body="",
        source=SOURCE_REMOTE,
        product_id=product.product_id,
        brand=product.brand,
        rating=product.rating,
        image_url=product.image_url,
        external_url=product.affiliate_url or build_product_url(product.product_id, affiliate_tag),
        price=product.price,
    )


def normalize_item(item: ContentItem, rules=CATEGORY_RULES) -> NormalizedEntry:
    """Map a locally authored review onto the common shape.

    Metadata passes through unchanged apart from key aliases; a review
    without a category gets one inferred from its title.
    """
    metadata = item.metadata
    title = str(metadata.get("title", ""))
    product_id = first_value(metadata, "productId", "asin")
    updated = first_value(metadata, "updatedDate", "updated_date")

    return NormalizedEntry(
        slug=item.slug,
        title=title,
        date=format_date(metadata.get("date")),
        description=str(metadata.get("description", "")),
        category=infer_category(title, metadata.get("category"), rules),
        body=item.body,
        source=SOURCE_LOCAL,
        product_id=str(product_id) if product_id is not None else None,
        brand=metadata.get("brand"),
        rating=to_float(metadata.get("rating")),
        image_url=first_value(metadata, "imageUrl", "image"),
        external_url=first_value(metadata, "externalUrl", "amazonUrl"),
        updated_date=format_date(updated) if updated is not None else None,
        price=to_float(metadata.get("price")),
        pros=_as_list(first_value(metadata, "prosList", "pros")),
        cons=_as_list(first_value(metadata, "consList", "cons")),
    )


def build_product_url(asin: str, affiliate_tag: str | None = None) -> str:
    url = PRODUCT_PAGE_URL.format(asin=quote(asin, safe=""))
    if affiliate_tag:
        url = f"{url}?{urlencode({'tag': affiliate_tag})}"
    return url


def _as_list(value) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]
