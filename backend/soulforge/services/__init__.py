"""Services Layer — the imperative shell around the pure core.

Invariants:
    - Every state-changing entry point goes through CollectionService._execute
    - Services never re-implement a rule that lives in core/

Design Decisions:
    - One service class per aggregate (ADR: the collection is the only aggregate)
"""
