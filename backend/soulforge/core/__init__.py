"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Every operation takes the CollectionState explicitly (no module-level state)
    - Every operation validates before it mutates; a raised error means nothing changed

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
    - Collaborators (ledger, roles, pause, royalty, rental) are plain modules over the
      same state, composed by the engines rather than inherited
"""
