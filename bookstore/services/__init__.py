"""Services Layer — imperative shell around the catalog core.

Invariants:
    - Services log and re-raise; they never swallow a core error
    - Configuration is read here, never inside core/

Design Decisions:
    - One service module per use case for locality
"""
