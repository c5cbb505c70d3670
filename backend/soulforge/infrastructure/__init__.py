"""Infrastructure Layer — persistence, value movement, and cross-cutting concerns.

Invariants:
    - Infrastructure never decides business rules; it maps core state to IO
    - All external failures mapped to typed errors from core/errors.py

Design Decisions:
    - Thin adapters behind core/repository_protocols.py (ADR: single responsibility)
"""
