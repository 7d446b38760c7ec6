"""Tests for normalize_products.normalize module."""

from datetime import date

from fetch_products.models import RemoteProduct
from load_content.models import ContentItem
from normalize_products.normalize import build_product_url, normalize_item, normalize_product


def _product(**overrides):
    fields = dict(
        product_id="B07XYZTENT",
        title="Backcountry Dome Tent",
        created_at="2024-05-01T12:00:00Z",
        status="fetched",
    )
    fields.update(overrides)
    return RemoteProduct(**fields)


class TestNormalizeProduct:
    def test_slug_is_lowercased_product_id(self) -> None:
        entry = normalize_product(_product())
        assert entry.slug == "b07xyztent"
        assert entry.product_id == "B07XYZTENT"
        assert entry.source == "remote"

    def test_infers_category_from_title(self) -> None:
        assert normalize_product(_product()).category == "camping-gear"

    def test_explicit_category_kept(self) -> None:
        assert normalize_product(_product(category="shelters")).category == "shelters"

    def test_default_description(self) -> None:
        entry = normalize_product(_product())
        assert entry.description == "Expert review of Backcountry Dome Tent"

    def test_summary_used_as_description(self) -> None:
        assert normalize_product(_product(summary="Roomy.")).description == "Roomy."

    def test_date_from_created_at(self) -> None:
        assert normalize_product(_product()).date == "2024-05-01T12:00:00+00:00"

    def test_unparsable_created_at_kept_raw(self) -> None:
        assert normalize_product(_product(created_at="unknown")).date == "unknown"

    def test_external_url_prefers_affiliate_url(self) -> None:
        entry = normalize_product(_product(affiliate_url="https://aff.example/tent"))
        assert entry.external_url == "https://aff.example/tent"

    def test_external_url_built_with_tag(self) -> None:
        entry = normalize_product(_product(), affiliate_tag="site-20")
        assert entry.external_url == "https://www.amazon.com/dp/B07XYZTENT?tag=site-20"

    def test_carries_product_fields(self) -> None:
        entry = normalize_product(_product(brand="Acme", rating=4.2, price=129.0, image_url="img.jpg"))
        assert (entry.brand, entry.rating, entry.price, entry.image_url) == ("Acme", 4.2, 129.0, "img.jpg")
        assert entry.body == ""


class TestNormalizeItem:
    def test_passes_metadata_through(self) -> None:
        item = ContentItem(
            slug="sundome",
            metadata={
                "title": "Coleman Sundome Review",
                "date": date(2024, 3, 12),
                "updatedDate": "2024-08-02",
                "description": "Budget dome tent.",
                "productId": "B004J2GUOU",
                "brand": "Coleman",
                "category": "camping-gear",
                "rating": 4.4,
                "imageUrl": "/img.jpg",
                "externalUrl": "https://www.amazon.com/dp/B004J2GUOU",
                "prosList": ["Quick setup"],
                "consList": ["Short rainfly"],
            },
            body="Body",
        )

        entry = normalize_item(item)

        assert entry.slug == "sundome"
        assert entry.date == "2024-03-12"
        assert entry.updated_date == "2024-08-02"
        assert entry.product_id == "B004J2GUOU"
        assert entry.rating == 4.4
        assert entry.image_url == "/img.jpg"
        assert entry.pros == ["Quick setup"]
        assert entry.cons == ["Short rainfly"]
        assert entry.body == "Body"
        assert entry.source == "local"

    def test_reads_aliased_keys(self) -> None:
        item = ContentItem(
            slug="fryer",
            metadata={
                "title": "Air Fryer Review",
                "date": "2024-05-20",
                "description": "d",
                "asin": "B07FDJMC9Q",
                "image": "/fryer.jpg",
                "amazonUrl": "https://amzn.example/fryer",
                "pros": "Crisp",
            },
        )

        entry = normalize_item(item)

        assert entry.product_id == "B07FDJMC9Q"
        assert entry.image_url == "/fryer.jpg"
        assert entry.external_url == "https://amzn.example/fryer"
        assert entry.pros == ["Crisp"]
        assert entry.updated_date is None

    def test_missing_category_inferred(self) -> None:
        item = ContentItem(slug="fryer", metadata={"title": "Air Fryer Review", "date": "2024-05-20", "description": "d"})
        assert normalize_item(item).category == "kitchen"


class TestBuildProductUrl:
    def test_without_tag(self) -> None:
        assert build_product_url("B01") == "https://www.amazon.com/dp/B01"
