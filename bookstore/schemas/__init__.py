"""Pydantic Schemas — data shapes crossing the package boundary.

Invariants:
    - Schemas coerce types only; domain rules are enforced by core/

Design Decisions:
    - Separate from core: schemas are caller contracts, core is the entity
"""
