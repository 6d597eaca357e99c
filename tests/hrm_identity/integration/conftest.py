"""
Pytest configuration for hrm_identity integration tests.

Integration tests run the SQLAlchemy repositories against in-memory
SQLite. Import the shared fixtures to make them available.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
)

__all__ = [
    "async_engine",
    "db_session",
]
