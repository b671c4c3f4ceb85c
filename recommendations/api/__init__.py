"""API Layer - FastAPI routers and global error handlers.

Invariants:
    - Routes translate HTTP into a Frame and back; no validation or business logic here
"""
