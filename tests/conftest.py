"""Root pytest configuration for test discovery and auto-skip behavior.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    ├── integration/       # Tests against a real database
    │   └── persistence/   # SQLite by default, PostgreSQL when enabled
    └── shared/            # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests (Testcontainers)

Pytest Options:
    --run-integration    Run integration tests
"""

import os

import pytest

from tollgate_auth import JWTService, PasswordHashingService

# Re-export shared database fixtures
from tests.shared.fixtures.database import (  # noqa: F401
    postgres_engine,
    postgres_container,
    session_maker,
    sqlite_engine,
)

TEST_SECRET = "test-secret-key-12345"


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that need a PostgreSQL container (auto-skipped)",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration") or os.environ.get(
        "RUN_INTEGRATION",
        "",
    ).lower() in ("1", "true", "yes")

    if run_integration:
        return

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        item_markers = {mark.name for mark in item.iter_markers()}
        if "integration" in item_markers:
            item.add_marker(skip_integration)


@pytest.fixture
def password_service() -> PasswordHashingService:
    """bcrypt service with a low work factor for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=TEST_SECRET)
