"""Recommendation Service - assigns identity and timestamps, enforces existence.

Invariants:
    - New recommendations get a uuid4 string id and created_at from the injected clock
    - Edit/delete of an unknown id raises ResourceNotFoundError (404)
    - Edit only persists when a value actually changed
    - list_recommendations returns newest first; ties keep repository order

Design Decisions:
    - Clock injected (defaults to UTC now): deterministic tests without patching datetime
    - Repository is a Protocol: SQL in production, in-memory in tests
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from recommendations.core.domain_types import RecommendationId
from recommendations.core.errors import ErrorContext, ResourceNotFoundError
from recommendations.core.recommendation import (
    Recommendation, RecommendationCreate, RecommendationEdit,
)
from recommendations.core.repository_protocols import RecommendationRepository

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecommendationService:
    """Persistence-backed implementation of RecommendationServiceLike."""

    def __init__(
        self,
        repository: RecommendationRepository,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.repository = repository
        self._clock = clock

    async def add_recommendation(
        self, recommendation: RecommendationCreate,
    ) -> Recommendation:
        entity = Recommendation.create(
            recommendation, RecommendationId(str(uuid.uuid4())), self._clock(),
        )
        await self.repository.save(entity)
        logger.info(
            f"Stored recommendation for {entity.url}",
            extra={"recommendation_id": entity.id},
        )
        return entity

    async def edit_recommendation(
        self, recommendation_id: RecommendationId, edit: RecommendationEdit,
    ) -> Recommendation:
        entity = await self._get_or_404(recommendation_id, "edit")
        if entity.edit(edit, self._clock()):
            await self.repository.save(entity)
            logger.info(
                f"Updated fields {sorted(edit.changes())}",
                extra={"recommendation_id": recommendation_id},
            )
        return entity

    async def delete_recommendation(self, recommendation_id: RecommendationId) -> None:
        await self._get_or_404(recommendation_id, "delete")
        await self.repository.delete(recommendation_id)

    async def list_recommendations(self) -> list[Recommendation]:
        recommendations = await self.repository.get_all()
        return sorted(recommendations, key=lambda r: r.created_at, reverse=True)

    async def _get_or_404(
        self, recommendation_id: RecommendationId, operation: str,
    ) -> Recommendation:
        entity = await self.repository.get_by_id(recommendation_id)
        if entity is None:
            raise ResourceNotFoundError(
                "Recommendation", str(recommendation_id),
                context=ErrorContext(
                    recommendation_id=str(recommendation_id), operation=operation,
                ),
            )
        return entity
