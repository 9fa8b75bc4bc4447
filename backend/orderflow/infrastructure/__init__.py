"""Infrastructure Layer — storage adapters and cross-cutting concerns.

Invariants:
    - Library exceptions (SQLAlchemy, redis) never cross this layer; they become StoreError
    - Adapters implement the Protocols in core/repository_protocols.py

Design Decisions:
    - Thin wrappers over raw clients, one per backend
"""
