"""Services Layer - imperative shell: orchestration, IO, persistence calls.

Invariants:
    - Services may import from core/ but core/ never imports from services/
    - Request validation results are turned into exceptions here, not in core/

Design Decisions:
    - One class per concern (controller vs service) so the controller can be tested
      against any object satisfying RecommendationServiceLike
"""
