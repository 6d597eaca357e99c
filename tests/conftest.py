"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # hrm_auth and hrm_config
    ├── hrm_identity/          # Identity domain tests (users, companies, auth)
    │   ├── unit/
    │   └── integration/       # Repositories against in-memory SQLite
    ├── integration/api/       # HTTP endpoints through the ASGI app
    └── shared/                # Shared fixtures and utilities

Every test runs against in-memory SQLite (aiosqlite), so nothing is
skipped by default.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from hrm_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load a local test env file when present (same layout as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that verify database/persistence behavior",
    )


@pytest.fixture(autouse=True)
def _fresh_settings_cache():
    """Never leak cached settings between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()
