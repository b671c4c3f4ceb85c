"""SQL Recommendation Repository - RecommendationRepository over an AsyncSession.

Invariants:
    - save() is an upsert keyed on id and commits immediately
    - get_all() returns rows newest first
    - Rows are converted to detached Recommendation entities; callers never see ORM objects

Design Decisions:
    - session.get() for primary-key lookups: uses the identity map, no hand-written SELECT
    - url re-parsed on load so entities always carry AnyUrl
    - Naive timestamps from the driver are read back as UTC: entities always carry aware datetimes
"""

from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from recommendations.core.domain_types import RecommendationId
from recommendations.core.recommendation import Recommendation, parse_url
from recommendations.models.recommendation import RecommendationModel


class SqlRecommendationRepository:
    """Recommendation persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, recommendation: Recommendation) -> None:
        row = await self.db.get(RecommendationModel, str(recommendation.id))
        if row is None:
            row = RecommendationModel(id=str(recommendation.id))
            self.db.add(row)
        _copy_onto(row, recommendation)
        await self.db.commit()

    async def get_by_id(
        self, recommendation_id: RecommendationId,
    ) -> Recommendation | None:
        row = await self.db.get(RecommendationModel, str(recommendation_id))
        return _to_entity(row) if row else None

    async def delete(self, recommendation_id: RecommendationId) -> None:
        await self.db.execute(
            delete(RecommendationModel)
            .where(RecommendationModel.id == str(recommendation_id)),
        )
        await self.db.commit()

    async def get_all(self) -> list[Recommendation]:
        result = await self.db.execute(
            select(RecommendationModel)
            .order_by(RecommendationModel.created_at.desc()),
        )
        return [_to_entity(row) for row in result.scalars().all()]


def _copy_onto(row: RecommendationModel, recommendation: Recommendation) -> None:
    row.title = recommendation.title
    row.url = str(recommendation.url)
    row.reason = recommendation.reason
    row.excerpt = recommendation.excerpt
    row.featured_image = recommendation.featured_image
    row.favicon = recommendation.favicon
    row.one_click_subscribe = recommendation.one_click_subscribe
    row.created_at = recommendation.created_at
    row.updated_at = recommendation.updated_at


def _to_entity(row: RecommendationModel) -> Recommendation:
    return Recommendation(
        id=RecommendationId(row.id),
        title=row.title,
        url=parse_url(row.url),
        reason=row.reason,
        excerpt=row.excerpt,
        featured_image=row.featured_image,
        favicon=row.favicon,
        one_click_subscribe=row.one_click_subscribe,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _as_utc(value: datetime | None) -> datetime | None:
    """SQLite drops the offset on DateTime(timezone=True); stored values are UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
