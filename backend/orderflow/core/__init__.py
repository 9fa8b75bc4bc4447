"""Core Layer — domain types, error taxonomy and boundary protocols.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO happens here; protocols describe IO that the shell provides

Design Decisions:
    - Functional core separated from imperative shell
"""
