"""Root conftest — shared test configuration.

Runs before orderflow.main is imported, so the module-level settings pick up
in-process backends and no test reaches Postgres or Redis by accident.
"""

import os

os.environ.setdefault("REPOSITORY_BACKEND", "memory")
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("LOG_FORMAT", "text")
