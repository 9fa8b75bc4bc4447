"""Services Layer — orchestration between routes and storage adapters.

Invariants:
    - Services receive their collaborators through __init__; no global lookups
    - Every backend call runs under a deadline (services/deadlines.py)
"""
