"""Recommendation Entity - domain representation plus its create/edit payloads.

Invariants:
    - title is never None (defaults to "" on create)
    - url is always a parsed absolute URL (pydantic AnyUrl), never a bare string
    - id and created_at are assigned by the service, never by the caller
    - updated_at is None until an edit actually changes a value
    - RecommendationEdit fields default to UNSET; None only appears on nullable fields

Design Decisions:
    - Two payload shapes (create vs edit) instead of one Optional-everything struct:
      create is always complete, edit is sparse with an explicit keep/set/clear state
    - AnyUrl via TypeAdapter: same parser the HTTP layer uses, canonical str() form
"""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone

from pydantic import AnyUrl, TypeAdapter

from recommendations.core.domain_types import RecommendationId, Unset, UNSET

_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_url(raw: str) -> AnyUrl:
    """Parse an absolute URL. Raises pydantic.ValidationError on failure."""
    return _URL_ADAPTER.validate_python(raw)


@dataclass(frozen=True)
class RecommendationCreate:
    """Complete construction payload - every field except id and timestamps."""
    title: str
    url: AnyUrl
    one_click_subscribe: bool = False
    reason: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    favicon: str | None = None


@dataclass(frozen=True)
class RecommendationEdit:
    """Sparse update payload - UNSET keeps the stored value, None clears it."""
    title: str | Unset = UNSET
    url: AnyUrl | Unset = UNSET
    one_click_subscribe: bool | Unset = UNSET
    reason: str | None | Unset = UNSET
    excerpt: str | None | Unset = UNSET
    featured_image: str | None | Unset = UNSET
    favicon: str | None | Unset = UNSET

    def changes(self) -> dict[str, object]:
        """Only the fields the caller explicitly supplied."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }


@dataclass
class Recommendation:
    """A site recommended by the publication."""
    id: RecommendationId
    title: str
    url: AnyUrl
    reason: str | None = None
    excerpt: str | None = None
    featured_image: str | None = None
    favicon: str | None = None
    one_click_subscribe: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    @classmethod
    def create(
        cls,
        payload: RecommendationCreate,
        recommendation_id: RecommendationId,
        now: datetime,
    ) -> "Recommendation":
        return cls(
            id=recommendation_id,
            title=payload.title,
            url=payload.url,
            reason=payload.reason,
            excerpt=payload.excerpt,
            featured_image=payload.featured_image,
            favicon=payload.favicon,
            one_click_subscribe=payload.one_click_subscribe,
            created_at=now,
            updated_at=None,
        )

    def edit(self, edit: RecommendationEdit, now: datetime) -> bool:
        """Apply the supplied fields. Returns True if anything changed."""
        changed = False
        for name, value in edit.changes().items():
            if _differs(getattr(self, name), value):
                setattr(self, name, value)
                changed = True
        if changed:
            self.updated_at = now
        return changed


def _differs(current: object, new: object) -> bool:
    if isinstance(current, AnyUrl) or isinstance(new, AnyUrl):
        return str(current) != str(new)
    return current != new
