"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata

Design Decisions:
    - Separate file for Base: models and the session manager import it without cycles
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all OrderFlow ORM models."""
    pass
