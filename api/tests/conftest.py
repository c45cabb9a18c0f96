"""
Shared pytest configuration for all tests.
Sets up a temporary SQLite database and common fixtures.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load test environment variables before any imports
from dotenv import load_dotenv

_test_dir = tempfile.mkdtemp(prefix="rto-tests-")

# Load test-specific environment variables
test_env_path = Path(__file__).parent.parent / ".env.test"
if test_env_path.exists():
    load_dotenv(test_env_path, override=True)
else:
    # Fallback to hardcoded test values if .env.test doesn't exist
    os.environ["DATABASE_PATH"] = os.path.join(_test_dir, "rto-test.db")
    os.environ["LOG_FILE"] = os.path.join(_test_dir, "api.log")
    os.environ["API_KEY"] = "test-api-key"
    os.environ["SEED_RANDOM_DRIVERS"] = "20"


@pytest.fixture(scope="session", autouse=True)
def seeded_database():
    """Create the schema and seed reference data once per test session"""
    from database import db
    from utils.seed_data import seed_database

    db.initialize_schema()
    seed_database(random_drivers=20)
    yield db


@pytest.fixture
def clean_memos():
    """Remove memos and analytics snapshots before and after a test"""
    from database import BaseRepository

    repo = BaseRepository()
    repo.transaction_write([("DELETE FROM memos", None), ("DELETE FROM analytics", None)])
    yield repo
    repo.transaction_write([("DELETE FROM memos", None), ("DELETE FROM analytics", None)])
