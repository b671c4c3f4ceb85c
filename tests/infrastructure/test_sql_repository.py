"""SQL Recommendation Repository - tests against in-memory SQLite.

Tests cover:
    - save inserts, then updates the same row on a second save
    - get_by_id round-trips every field and re-parses url
    - delete removes the row; unknown ids are a no-op
    - get_all returns newest first
"""

from datetime import datetime, timedelta, timezone

from recommendations.core.domain_types import RecommendationId
from recommendations.core.recommendation import Recommendation, parse_url
from recommendations.infrastructure.sql_repository import SqlRecommendationRepository

CREATED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _make(id_: str, created_at: datetime = CREATED, **fields) -> Recommendation:
    return Recommendation(
        id=RecommendationId(id_),
        title=fields.pop("title", "Blog"),
        url=parse_url(fields.pop("url", "https://a.com/feed")),
        created_at=created_at,
        **fields,
    )


async def test_save_and_get_round_trip(test_db):
    repo = SqlRecommendationRepository(test_db)
    await repo.save(_make(
        "r1", reason="Why", excerpt="Text", featured_image="img.png",
        favicon="fav.ico", one_click_subscribe=True,
    ))

    loaded = await repo.get_by_id(RecommendationId("r1"))

    assert loaded is not None
    assert loaded.title == "Blog"
    assert str(loaded.url) == "https://a.com/feed"
    assert loaded.reason == "Why"
    assert loaded.excerpt == "Text"
    assert loaded.featured_image == "img.png"
    assert loaded.favicon == "fav.ico"
    assert loaded.one_click_subscribe is True
    assert loaded.updated_at is None


async def test_save_twice_updates_row(test_db):
    repo = SqlRecommendationRepository(test_db)
    recommendation = _make("r1", reason="Why")
    await repo.save(recommendation)

    recommendation.title = "Renamed"
    recommendation.reason = None
    await repo.save(recommendation)

    all_rows = await repo.get_all()
    assert len(all_rows) == 1
    assert all_rows[0].title == "Renamed"
    assert all_rows[0].reason is None


async def test_get_unknown_returns_none(test_db):
    repo = SqlRecommendationRepository(test_db)
    assert await repo.get_by_id(RecommendationId("missing")) is None


async def test_delete(test_db):
    repo = SqlRecommendationRepository(test_db)
    await repo.save(_make("r1"))

    await repo.delete(RecommendationId("r1"))
    await repo.delete(RecommendationId("missing"))

    assert await repo.get_by_id(RecommendationId("r1")) is None


async def test_get_all_newest_first(test_db):
    repo = SqlRecommendationRepository(test_db)
    await repo.save(_make("old", created_at=CREATED))
    await repo.save(_make("new", created_at=CREATED + timedelta(days=1)))

    listed = await repo.get_all()

    assert [r.id for r in listed] == ["new", "old"]


async def test_loaded_timestamps_keep_utc_offset(test_db):
    repo = SqlRecommendationRepository(test_db)
    original = _make("r1", updated_at=CREATED + timedelta(hours=2))
    await repo.save(original)
    test_db.expunge_all()

    loaded = await repo.get_by_id(RecommendationId("r1"))

    assert loaded.created_at == original.created_at
    assert loaded.created_at.tzinfo is not None
    assert loaded.updated_at == original.updated_at
    assert loaded.updated_at.tzinfo is not None


async def test_listed_timestamps_keep_utc_offset(test_db):
    repo = SqlRecommendationRepository(test_db)
    await repo.save(_make("r1"))
    test_db.expunge_all()

    listed = await repo.get_all()

    assert listed[0].created_at == CREATED
    assert listed[0].updated_at is None
