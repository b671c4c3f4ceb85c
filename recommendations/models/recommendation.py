"""Recommendation ORM - one row per recommended site.

Invariants:
    - id is the service-assigned string id (primary key)
    - url stored as its canonical string; parsed back to AnyUrl on load
    - title and one_click_subscribe are non-nullable; the four descriptive fields are nullable
    - updated_at is NULL until the first effective edit

Design Decisions:
    - String id over UUID column: ids are opaque to the wire and arrive as path strings
    - Row <-> entity mapping lives in the repository, not on the model
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from recommendations.db.base import Base


class RecommendationModel(Base):
    """Persisted recommendation."""
    __tablename__ = "recommendations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(2000), nullable=False, default="")
    url: Mapped[str] = mapped_column(String(2000), nullable=False)
    reason: Mapped[str | None] = mapped_column(Text, nullable=True)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    featured_image: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    favicon: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    one_click_subscribe: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
