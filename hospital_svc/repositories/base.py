"""
Base database connection and initialization.

This module handles database connection management and schema initialization.
Each repository call asks for a fresh connection and closes it before
returning; nothing is pooled or held across calls.

IMPORTANT: Database instantiation should be done through the DI layer.
Use core.dependencies.get_database() instead of instantiating directly.
"""
import sqlite3
import logging
from typing import Optional
from pathlib import Path

from core.config import DATABASE_PATH, DATABASE_BUSY_TIMEOUT

logger = logging.getLogger(__name__)

# Backslash escapes LIKE wildcards; pair with "ESCAPE '\\'" in the SQL
LIKE_ESCAPE = "\\"

# Parameters that do not fit SQLite's 64-bit integers fail with OverflowError at bind time
DATABASE_ERRORS = (sqlite3.Error, OverflowError)


def casefold(value: Optional[str]) -> Optional[str]:
    """Unicode case folding, registered on every connection as casefold()."""
    return value.casefold() if value is not None else None


def contains_pattern(term: str) -> str:
    """
    Build a LIKE pattern matching term anywhere in a column.

    % and _ in the term are escaped so they match literally.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class Database:
    """
    SQLite database connection manager.

    Features:
    - WAL mode for better concurrent read/write performance
    - Busy timeout to handle lock contention gracefully
    - Creates the doctors and patients tables on first use

    Usage:
        # Via dependency injection (recommended):
        from core.dependencies import get_database
        db = get_database()

        # Direct instantiation (for testing):
        db = Database(db_path="/tmp/test.db")
    """

    def __init__(self, db_path: Optional[str] = None, busy_timeout: Optional[int] = None):
        """
        Initialize database connection.

        Args:
            db_path: Path to SQLite database file. Defaults to config DATABASE_PATH.
            busy_timeout: SQLite busy timeout in milliseconds. Defaults to config value.
        """
        self.db_path = db_path or DATABASE_PATH
        self.busy_timeout = busy_timeout if busy_timeout is not None else DATABASE_BUSY_TIMEOUT

        # Ensure database directory exists
        db_dir = Path(self.db_path).parent
        db_dir.mkdir(parents=True, exist_ok=True)

        self._init_db()

    def _configure_connection(self, conn: sqlite3.Connection) -> None:
        """
        Configure connection with busy timeout and the casefold() SQL function.

        SQLite's own LOWER() and LIKE only fold ASCII letters, so searches
        compare casefold(column) against a casefolded pattern.

        Args:
            conn: SQLite connection to configure.
        """
        conn.execute(f"PRAGMA busy_timeout = {self.busy_timeout}")
        conn.create_function("casefold", 1, casefold, deterministic=True)

    def _init_db(self) -> None:
        """Initialize database schema and enable WAL mode if not already enabled."""
        conn = sqlite3.connect(self.db_path)
        self._configure_connection(conn)
        cursor = conn.cursor()

        # WAL mode persists in the database file, so this only needs to run once
        cursor.execute("PRAGMA journal_mode = WAL")
        result = cursor.fetchone()
        if result and result[0].lower() == 'wal':
            logger.info(f"SQLite WAL mode enabled for {self.db_path}")
        else:
            logger.warning(f"Failed to enable WAL mode, current mode: {result}")

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS doctors (
                doctor_id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                specialization TEXT NOT NULL,
                phone TEXT,
                email TEXT,
                experience_years INTEGER NOT NULL DEFAULT 0,
                qualification TEXT,
                consultation_fee NUMERIC(10, 2) NOT NULL DEFAULT 0,
                available_days TEXT,
                available_time TEXT
            )
        """)

        # admission_date is an ISO date string; NOT NULL keeps it present on read
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS patients (
                patient_id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                age INTEGER NOT NULL,
                gender TEXT,
                phone TEXT,
                email TEXT,
                address TEXT,
                disease TEXT,
                blood_group TEXT,
                emergency_contact TEXT,
                admission_date TEXT NOT NULL DEFAULT CURRENT_DATE
            )
        """)

        conn.commit()
        conn.close()

        logger.info(
            f"Database initialized: {self.db_path} "
            f"(busy_timeout={self.busy_timeout}ms)"
        )

    def get_connection(self) -> sqlite3.Connection:
        """
        Get a new database connection with busy timeout set.

        Returns:
            sqlite3.Connection: A new database connection. The caller closes it.
        """
        conn = sqlite3.connect(self.db_path)
        self._configure_connection(conn)
        return conn
