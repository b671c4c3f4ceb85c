"""ORM Models - SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata knows every table before create_all runs
"""

from recommendations.models.recommendation import RecommendationModel  # noqa: F401
