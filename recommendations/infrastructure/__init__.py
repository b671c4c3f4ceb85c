"""Infrastructure Layer - database session management, repositories, logging setup.

Invariants:
    - Only this layer talks to SQLAlchemy engines directly
    - Repository implementations satisfy core.repository_protocols.RecommendationRepository
"""
