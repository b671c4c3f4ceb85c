"""Recommendation Routes - HTTP transport for add, edit, delete, list.

Invariants:
    - Request bodies are taken as raw JSON and passed through as Frame.data
    - Path id goes into Frame.options["id"]; nothing is validated here
    - Controller wired per request: get_db → SqlRecommendationRepository → RecommendationService

Design Decisions:
    - Body(None) typed Any instead of a Pydantic request model: field errors must carry
      the boundary's own messages, so FastAPI must not reject bodies first
    - get_controller is a dependency so tests can override the whole chain
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from recommendations.core.extract_frame import Frame
from recommendations.infrastructure.database import get_db
from recommendations.infrastructure.sql_repository import SqlRecommendationRepository
from recommendations.services.recommendation_controller import RecommendationController
from recommendations.services.recommendation_service import RecommendationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/recommendations", tags=["recommendations"])


async def get_controller(
    db: AsyncSession = Depends(get_db),
) -> RecommendationController:
    return RecommendationController(
        RecommendationService(SqlRecommendationRepository(db)),
    )


@router.get("/")
async def list_recommendations(
    controller: RecommendationController = Depends(get_controller),
):
    """List all recommendations, newest first."""
    return await controller.list_recommendations()


@router.post("/", status_code=status.HTTP_201_CREATED)
async def add_recommendation(
    body: Any = Body(None),
    controller: RecommendationController = Depends(get_controller),
):
    """Create a recommendation from body.recommendations[0]."""
    return await controller.add_recommendation(Frame(data=body, options={}))


@router.put("/{recommendation_id}")
async def edit_recommendation(
    recommendation_id: str,
    body: Any = Body(None),
    controller: RecommendationController = Depends(get_controller),
):
    """Apply the fields present in body.recommendations[0]."""
    return await controller.edit_recommendation(
        Frame(data=body, options={"id": recommendation_id}),
    )


@router.delete("/{recommendation_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recommendation(
    recommendation_id: str,
    controller: RecommendationController = Depends(get_controller),
):
    """Delete a recommendation. No response body."""
    await controller.delete_recommendation(
        Frame(options={"id": recommendation_id}),
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
