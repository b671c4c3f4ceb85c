"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - RecommendationId wraps the opaque string id assigned by the service
    - UNSET is the only "keep existing value" marker; None always means an explicit null
    - Field names are the wire names (snake_case) so records need no renaming table

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Single-member Enum for the sentinel: typing.Literal[Unset.UNSET] narrows cleanly,
      and the value survives copy/pickle as the same object
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RecommendationId = NewType("RecommendationId", str)


# ─── Sentinels ───────────────────────────────────────────────────

class Unset(Enum):
    """Marks a field that was omitted from the request (do not change)."""
    UNSET = "unset"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset.UNSET


# ─── Field Names ─────────────────────────────────────────────────

class RecommendationField(str, Enum):
    """Request fields accepted for a recommendation, in validation order."""
    TITLE = "title"
    URL = "url"
    ONE_CLICK_SUBSCRIBE = "one_click_subscribe"
    REASON = "reason"
    EXCERPT = "excerpt"
    FEATURED_IMAGE = "featured_image"
    FAVICON = "favicon"


NULLABLE_FIELDS = frozenset({
    RecommendationField.REASON,
    RecommendationField.EXCERPT,
    RecommendationField.FEATURED_IMAGE,
    RecommendationField.FAVICON,
})
