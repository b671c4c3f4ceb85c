"""Response Serializer - project entities onto the wire record shape.

Invariants:
    - Order preserved; no filtering, no recomputation
    - url always emitted as its canonical string
    - Nullable fields emitted as None (JSON null) when unset
    - Same entity in → equal record out (no clocks, no ids generated here)
"""

from typing import Iterable

from recommendations.core.recommendation import Recommendation


def to_record(recommendation: Recommendation) -> dict:
    """Single entity → wire record."""
    return {
        "id": recommendation.id,
        "title": recommendation.title,
        "reason": recommendation.reason,
        "excerpt": recommendation.excerpt,
        "featured_image": recommendation.featured_image,
        "favicon": recommendation.favicon,
        "url": str(recommendation.url),
        "one_click_subscribe": recommendation.one_click_subscribe,
        "created_at": recommendation.created_at,
        "updated_at": recommendation.updated_at,
    }


def serialize_recommendations(recommendations: Iterable[Recommendation]) -> dict:
    """Entities → {"data": [record, ...]} response body."""
    return {"data": [to_record(r) for r in recommendations]}
