"""ORM Models — SQLAlchemy table mappings.

Invariants:
    - Models never leave infrastructure/repositories; callers receive core.domain_types.Order
"""
