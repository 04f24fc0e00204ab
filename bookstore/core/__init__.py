"""Core Layer — pure domain logic, no IO, no logging, no config.

Invariants:
    - No module in core/ imports from schemas/, services/, or infrastructure/
    - Validators are pure and deterministic; CatalogItem only mutates itself

Design Decisions:
    - Functional core separated from imperative shell
"""
