"""OrderFlow Application Package — session-gated order record service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
