"""Database Package — SQLAlchemy declarative Base shared by all ORM models.

Invariants:
    - All sessions are async (AsyncSession)
    - Engine lifecycle owned by infrastructure/database.py

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local runs and tests
"""
