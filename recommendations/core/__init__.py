"""Core Layer - pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock and ids passed in or generated at the edge)

Design Decisions:
    - Functional core separated from imperative shell: validation returns results,
      the shell decides whether to raise
"""
