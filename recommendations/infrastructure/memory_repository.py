"""In-Memory Recommendation Repository - dict-backed RecommendationRepository.

Invariants:
    - Insertion order preserved by get_all()
    - Stored and returned entities are copies: mutating a returned entity
      does not change the store until save() is called

Design Decisions:
    - Backs the service tests; swaps in for SqlRecommendationRepository with no other change
"""

from dataclasses import replace

from recommendations.core.domain_types import RecommendationId
from recommendations.core.recommendation import Recommendation


class InMemoryRecommendationRepository:
    """Recommendation persistence in a process-local dict."""

    def __init__(self, recommendations: list[Recommendation] | None = None):
        self._store: dict[RecommendationId, Recommendation] = {}
        for recommendation in recommendations or []:
            self._store[recommendation.id] = replace(recommendation)

    async def save(self, recommendation: Recommendation) -> None:
        self._store[recommendation.id] = replace(recommendation)

    async def get_by_id(
        self, recommendation_id: RecommendationId,
    ) -> Recommendation | None:
        stored = self._store.get(recommendation_id)
        return replace(stored) if stored else None

    async def delete(self, recommendation_id: RecommendationId) -> None:
        self._store.pop(recommendation_id, None)

    async def get_all(self) -> list[Recommendation]:
        return [replace(r) for r in self._store.values()]
