"""Data models for records fetched from the product API."""

from dataclasses import dataclass, field
from typing import Any, Optional

from common.utils import to_float


@dataclass
class RemoteProduct:
    """A product record as returned by the product API."""
    product_id: str
    title: str
    created_at: str
    status: str
    category: Optional[str] = None
    updated_at: Optional[str] = None
    brand: Optional[str] = None
    summary: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    image_url: Optional[str] = None
    affiliate_url: Optional[str] = None
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "RemoteProduct":
        """Build a RemoteProduct from an API record.

        Raises:
            ValueError: The record has no ``asin`` or no ``title``.
        """
        if not isinstance(record, dict):
            raise ValueError(f"Product record must be an object, got {type(record).__name__}")

        asin = str(record.get("asin") or "").strip()
        title = str(record.get("title") or "").strip()
        if not asin:
            raise ValueError("Product record has no asin")
        if not title:
            raise ValueError(f"Product record {asin} has no title")

        review_count = record.get("review_count")
        return cls(
            product_id=asin,
            title=title,
            created_at=record.get("date_created") or "",
            status=record.get("status") or "",
            category=record.get("category") or None,
            updated_at=record.get("date_updated") or None,
            brand=record.get("brand") or None,
            summary=record.get("summary") or None,
            rating=to_float(record.get("rating")),
            review_count=int(review_count) if isinstance(review_count, (int, float)) else None,
            price=to_float(record.get("price")),
            currency=record.get("currency") or None,
            image_url=record.get("image_url") or None,
            affiliate_url=record.get("affiliate_url") or None,
            raw=dict(record),
        )
