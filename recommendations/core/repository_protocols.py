"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell - dependency arrows point inward only
    - Persistence and id/timestamp assignment live behind these Protocols
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Async in Protocol: implementations do IO; core functions stay sync
"""

from typing import Protocol

from recommendations.core.domain_types import RecommendationId
from recommendations.core.recommendation import (
    Recommendation, RecommendationCreate, RecommendationEdit,
)


class RecommendationServiceLike(Protocol):
    """Contract the controller delegates to - persistence, ordering, not-found."""
    async def add_recommendation(
        self, recommendation: RecommendationCreate,
    ) -> Recommendation: ...
    async def edit_recommendation(
        self, recommendation_id: RecommendationId, edit: RecommendationEdit,
    ) -> Recommendation: ...
    async def delete_recommendation(self, recommendation_id: RecommendationId) -> None: ...
    async def list_recommendations(self) -> list[Recommendation]: ...


class RecommendationRepository(Protocol):
    """Contract for recommendation persistence - implemented by shell."""
    async def save(self, recommendation: Recommendation) -> None: ...
    async def get_by_id(
        self, recommendation_id: RecommendationId,
    ) -> Recommendation | None: ...
    async def delete(self, recommendation_id: RecommendationId) -> None: ...
    async def get_all(self) -> list[Recommendation]: ...
