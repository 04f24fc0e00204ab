"""Infrastructure Layer — cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
