"""Field Validators - presence, type and shape checks for one field of an untyped object.

Invariants:
    - All functions are PURE: no IO, no side effects, deterministic for a given input
    - Never raise: return a FieldResult with error set on violation
    - Absent (or null on a non-nullable field) + required → "<key> is required"
    - Absent + not required → FieldResult.value is UNSET (caller applies its own default)
    - Explicit null on a nullable field → value None (distinct from UNSET)

Design Decisions:
    - Result objects over exceptions: extraction chains checks and the first error wins,
      keeping the error path identical to the success path
    - Messages name the field by its wire key so clients can map them back
"""

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from recommendations.core.domain_types import UNSET
from recommendations.core.recommendation import parse_url


@dataclass(frozen=True)
class FieldResult:
    """Outcome of a check - value on success, error message on failure."""
    value: Any = UNSET
    error: str | None = None
    field: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fail(key: str, message: str) -> FieldResult:
    return FieldResult(error=f"{key} {message}", field=key)


def _lookup(
    obj: Any, key: str, required: bool, nullable: bool,
) -> FieldResult | None:
    """Shared presence rules. Returns a final result, or None when a value must be type-checked."""
    if not isinstance(obj, dict):
        return fail(key, "must be an object")

    value = obj.get(key, UNSET)
    if value is None and nullable:
        return FieldResult(None, field=key)
    if value is UNSET or value is None:
        if required:
            return fail(key, "is required")
        return FieldResult(UNSET, field=key)
    return None


def validate_string(
    obj: Any, key: str, *, required: bool = True, nullable: bool = False,
) -> FieldResult:
    """Check obj[key] is a string."""
    settled = _lookup(obj, key, required, nullable)
    if settled is not None:
        return settled
    value = obj[key]
    if not isinstance(value, str):
        return fail(key, "must be a string")
    return FieldResult(value, field=key)


def validate_boolean(
    obj: Any, key: str, *, required: bool = True, nullable: bool = False,
) -> FieldResult:
    """Check obj[key] is a boolean (ints are rejected)."""
    settled = _lookup(obj, key, required, nullable)
    if settled is not None:
        return settled
    value = obj[key]
    if not isinstance(value, bool):
        return fail(key, "must be a boolean")
    return FieldResult(value, field=key)


def validate_url(
    obj: Any, key: str, *, required: bool = True, nullable: bool = False,
) -> FieldResult:
    """Check obj[key] is a string that parses as an absolute URL."""
    result = validate_string(obj, key, required=required, nullable=nullable)
    if not result.ok or not isinstance(result.value, str):
        return result
    try:
        return FieldResult(parse_url(result.value), field=key)
    except ValidationError:
        return fail(key, "must be a valid URL")
