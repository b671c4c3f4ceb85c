"""Response Serializer - tests for the entity → wire record projection.

Tests cover:
    - Record exposes exactly the wire field names
    - url emitted as canonical string; nullable fields emitted as None
    - Order preserved; empty input gives empty data list
    - Serializing the same entity twice gives equal records
"""

from datetime import datetime, timezone

from recommendations.core.domain_types import RecommendationId
from recommendations.core.recommendation import Recommendation, parse_url
from recommendations.core.serialize_recommendations import (
    serialize_recommendations, to_record,
)

CREATED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _make(id_: str, url: str = "https://a.com", **fields) -> Recommendation:
    return Recommendation(
        id=RecommendationId(id_), title=fields.pop("title", "Blog"),
        url=parse_url(url), created_at=CREATED, **fields,
    )


def test_record_has_wire_field_names():
    record = to_record(_make("r1"))
    assert set(record) == {
        "id", "title", "reason", "excerpt", "featured_image", "favicon",
        "url", "one_click_subscribe", "created_at", "updated_at",
    }


def test_record_values():
    r = _make(
        "r1", "https://a.com/feed", reason="Why", featured_image="img.png",
        one_click_subscribe=True,
    )
    record = to_record(r)
    assert record["id"] == "r1"
    assert record["url"] == "https://a.com/feed"
    assert record["reason"] == "Why"
    assert record["excerpt"] is None
    assert record["featured_image"] == "img.png"
    assert record["favicon"] is None
    assert record["one_click_subscribe"] is True
    assert record["created_at"] == CREATED
    assert record["updated_at"] is None


def test_url_is_stringified():
    record = to_record(_make("r1", "https://a.com"))
    assert isinstance(record["url"], str)
    assert record["url"] == "https://a.com/"


def test_serialize_preserves_order():
    items = [_make("b"), _make("a"), _make("c")]
    response = serialize_recommendations(items)
    assert [r["id"] for r in response["data"]] == ["b", "a", "c"]


def test_serialize_empty():
    assert serialize_recommendations([]) == {"data": []}


def test_serialize_is_idempotent():
    r = _make("r1", reason="Why")
    assert serialize_recommendations([r]) == serialize_recommendations([r])
    assert to_record(r) == to_record(r)
