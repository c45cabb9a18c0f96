import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from config import settings

logger = logging.getLogger(__name__)


SCHEMA = [
    """
    CREATE TABLE IF NOT EXISTS drivers (
        id TEXT PRIMARY KEY,
        name TEXT,
        is_driver INTEGER,
        govt_id_type TEXT,
        govt_id_number TEXT,
        license_number TEXT,
        vehicle_number TEXT,
        vehicle_type TEXT,
        father_name TEXT,
        dob TEXT,
        blood_group TEXT,
        address TEXT,
        city TEXT,
        phone TEXT,
        license_expiry TEXT,
        photo TEXT,
        face_descriptor TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS violations (
        id TEXT PRIMARY KEY,
        code TEXT,
        category TEXT,
        violation TEXT,
        fine INTEGER,
        description TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS memos (
        id TEXT PRIMARY KEY,
        driver_id TEXT,
        officer_id TEXT,
        officer_name TEXT,
        location TEXT,
        violations TEXT,
        total_fine INTEGER,
        payment_status TEXT DEFAULT 'pending',
        date TEXT,
        FOREIGN KEY(driver_id) REFERENCES drivers(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS analytics (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        date TEXT,
        total_violations INTEGER,
        total_fines INTEGER,
        active_officers INTEGER,
        violation_breakdown TEXT,
        payment_stats TEXT,
        updated_at TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS districts (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT UNIQUE
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS cities (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        district_id INTEGER,
        name TEXT,
        latitude REAL,
        longitude REAL,
        FOREIGN KEY(district_id) REFERENCES districts(id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS cameras (
        id TEXT PRIMARY KEY,
        name TEXT,
        type TEXT,
        feeds TEXT
    )
    """,
]


class SQLiteConnection:
    """Manages SQLite connections for the record store.

    Every session opens its own connection, commits on success and rolls
    back on error. Foreign keys are declared in the schema but not enforced.
    """

    def __init__(self, database_path: str = None):
        """Initialize the connection factory with settings from config."""
        self.database_path = database_path or settings.database_path

        if not self.database_path:
            raise ValueError("DATABASE_PATH is required in settings")

        if self.database_path != ":memory:":
            Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)

    def close(self):
        """Nothing is held open between sessions."""
        logger.debug(f"Closing database {self.database_path}")

    @contextmanager
    def get_session(self) -> Generator[sqlite3.Connection, None, None]:
        """Get a database connection with automatic commit and cleanup"""
        conn = sqlite3.connect(self.database_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize_schema(self) -> None:
        """Create all tables that do not exist yet."""
        with self.get_session() as session:
            for statement in SCHEMA:
                session.execute(statement)
        logger.info(f"Database schema ready at {self.database_path}")

    def verify_connectivity(self) -> bool:
        """Verify database connectivity.

        Returns:
            bool: True if connected, False otherwise
        """
        try:
            with self.get_session() as session:
                row = session.execute("SELECT 1 AS test").fetchone()
                return row["test"] == 1
        except sqlite3.Error as e:
            logger.error(f"Database connectivity check failed: {e}")
            return False


# Singleton instance
db = SQLiteConnection()


class BaseRepository:
    """Base repository with common SQLite operations.

    Provides common database operations that all specific repositories inherit.
    Handles query execution, transactions, and connection management.
    """

    def __init__(self):
        self.db = db

    def execute_query(self, query: str, parameters=None) -> list:
        """Execute a read query and return results.

        Args:
            query: SQL query string
            parameters: Optional query parameters (sequence or mapping)

        Returns:
            list: Query results as list of dictionaries
        """
        with self.db.get_session() as session:
            cursor = session.execute(query, parameters or ())
            return [dict(row) for row in cursor.fetchall()]

    def execute_write(self, query: str, parameters=None) -> dict:
        """Execute a write query and return summary.

        Args:
            query: SQL statement
            parameters: Optional query parameters (sequence or mapping)

        Returns:
            dict: Summary of changes made to the database
        """
        with self.db.get_session() as session:
            cursor = session.execute(query, parameters or ())
            return {
                "rows_affected": cursor.rowcount,
                "last_row_id": cursor.lastrowid,
            }

    def transaction_write(self, queries: list) -> dict:
        """Execute multiple write queries in a transaction.

        Args:
            queries: List of tuples (query, parameters)

        Returns:
            dict: Success status
        """
        with self.db.get_session() as session:
            for query, params in queries:
                session.execute(query, params or ())
            return {"success": True}

    def count(self, table: str) -> int:
        """Count rows of a table owned by this store."""
        result = self.execute_query(f"SELECT count(*) AS count FROM {table}")
        return result[0]["count"] if result else 0
