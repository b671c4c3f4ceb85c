"""Envelope Extractors - turn an untrusted request frame into typed payloads.

Invariants:
    - All functions are PURE and never raise: they return a FieldResult
    - Only data.recommendations[0] is read; extra elements are ignored
    - Fields are validated in a fixed order and the first failure wins
    - Create applies defaults; edit leaves omitted fields UNSET and keeps explicit nulls

Design Decisions:
    - Frame is a plain dataclass: the transport fills it, nothing here mutates it
    - One ordered validator table shared by create and edit: both shapes see the
      same field set and the same error messages
"""

from dataclasses import dataclass
from typing import Any, Callable

from recommendations.core.domain_types import (
    NULLABLE_FIELDS, RecommendationField, RecommendationId, UNSET,
)
from recommendations.core.recommendation import RecommendationCreate, RecommendationEdit
from recommendations.core.validate_fields import (
    FieldResult, fail, validate_boolean, validate_string, validate_url,
)


@dataclass(frozen=True)
class Frame:
    """Per-request envelope: body payload, query/path options, caller identity."""
    data: Any = None
    options: Any = None
    user: Any = None


_VALIDATORS: dict[RecommendationField, Callable[..., FieldResult]] = {
    RecommendationField.TITLE: validate_string,
    RecommendationField.URL: validate_url,
    RecommendationField.ONE_CLICK_SUBSCRIBE: validate_boolean,
    RecommendationField.REASON: validate_string,
    RecommendationField.EXCERPT: validate_string,
    RecommendationField.FEATURED_IMAGE: validate_string,
    RecommendationField.FAVICON: validate_string,
}

_REQUIRED_ON_CREATE = frozenset({RecommendationField.URL})


def extract_id(frame: Frame) -> FieldResult:
    """options.id must be present and truthy; returned verbatim."""
    options = frame.options
    if not isinstance(options, dict) or not options.get("id"):
        return fail("id", "is required")
    return FieldResult(RecommendationId(options["id"]), field="id")


def extract_recommendation(frame: Frame) -> FieldResult:
    """Full construction payload for create, with defaults applied."""
    checked = _validate_first(frame, _REQUIRED_ON_CREATE)
    if not checked.ok:
        return checked
    values = checked.value
    payload = RecommendationCreate(
        title=_default(values["title"], ""),
        url=values["url"],
        one_click_subscribe=_default(values["one_click_subscribe"], False),
        reason=_default(values["reason"], None),
        excerpt=_default(values["excerpt"], None),
        featured_image=_default(values["featured_image"], None),
        favicon=_default(values["favicon"], None),
    )
    return FieldResult(payload, field="recommendations")


def extract_recommendation_edit(frame: Frame) -> FieldResult:
    """Sparse payload for edit - nothing required, nothing defaulted."""
    checked = _validate_first(frame, frozenset())
    if not checked.ok:
        return checked
    return FieldResult(RecommendationEdit(**checked.value), field="recommendations")


def _validate_first(
    frame: Frame, required: frozenset[RecommendationField],
) -> FieldResult:
    item = _first_recommendation(frame)
    if not item.ok:
        return item

    values: dict[str, Any] = {}
    for name, validator in _VALIDATORS.items():
        result = validator(
            item.value, name.value,
            required=name in required,
            nullable=name in NULLABLE_FIELDS,
        )
        if not result.ok:
            return result
        values[name.value] = result.value
    return FieldResult(values, field="recommendations")


def _first_recommendation(frame: Frame) -> FieldResult:
    data = frame.data
    recommendations = data.get("recommendations") if isinstance(data, dict) else None
    if (
        not isinstance(recommendations, (list, tuple))
        or not recommendations
        or recommendations[0] is None
    ):
        return fail("recommendations", "is required")
    return FieldResult(recommendations[0], field="recommendations")


def _default(value: Any, default: Any) -> Any:
    return default if value is UNSET else value
