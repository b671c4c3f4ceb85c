"""Recommendation Controller - extract → delegate to service → serialize.

Invariants:
    - Every operation is a straight pipeline; the only branch is a failed extraction
    - Failed extraction raises MalformedRequestError before the service is touched
    - Service errors are never caught or reinterpreted here
    - No retries, no caching, no shared mutable state between calls

Design Decisions:
    - Controller owns the raise: core extractors return results, the shell decides
      that a failed result is terminal for the request
    - Edit extracts the id before the payload so a missing id is reported first
"""

import logging

from recommendations.core.errors import ErrorContext, MalformedRequestError
from recommendations.core.extract_frame import (
    Frame, extract_id, extract_recommendation, extract_recommendation_edit,
)
from recommendations.core.repository_protocols import RecommendationServiceLike
from recommendations.core.serialize_recommendations import serialize_recommendations
from recommendations.core.validate_fields import FieldResult

logger = logging.getLogger(__name__)


class RecommendationController:
    """Request boundary for the four recommendation operations."""

    def __init__(self, service: RecommendationServiceLike):
        self.service = service

    async def add_recommendation(self, frame: Frame) -> dict:
        payload = _unwrap(extract_recommendation(frame), "add")
        recommendation = await self.service.add_recommendation(payload)
        logger.info(
            "Recommendation added",
            extra={"recommendation_id": recommendation.id, "operation": "add"},
        )
        return serialize_recommendations([recommendation])

    async def edit_recommendation(self, frame: Frame) -> dict:
        recommendation_id = _unwrap(extract_id(frame), "edit")
        edit = _unwrap(extract_recommendation_edit(frame), "edit")
        recommendation = await self.service.edit_recommendation(
            recommendation_id, edit,
        )
        logger.info(
            "Recommendation edited",
            extra={"recommendation_id": recommendation_id, "operation": "edit"},
        )
        return serialize_recommendations([recommendation])

    async def delete_recommendation(self, frame: Frame) -> None:
        recommendation_id = _unwrap(extract_id(frame), "delete")
        await self.service.delete_recommendation(recommendation_id)
        logger.info(
            "Recommendation deleted",
            extra={"recommendation_id": recommendation_id, "operation": "delete"},
        )

    async def list_recommendations(self) -> dict:
        recommendations = await self.service.list_recommendations()
        logger.info(
            "Recommendations listed",
            extra={"operation": "list", "count": len(recommendations)},
        )
        return serialize_recommendations(recommendations)


def _unwrap(result: FieldResult, operation: str):
    """Return the extracted value or raise the first validation error."""
    if not result.ok:
        logger.warning(
            f"Rejected {operation} request: {result.error}",
            extra={"operation": operation},
        )
        raise MalformedRequestError(
            result.error, field=result.field,
            context=ErrorContext(operation=operation),
        )
    return result.value
