"""
Repository for doctor database operations.

Same contract as PatientRepository without pagination: every database error
is logged and converted to [] / False / None.

Architecture:
    DoctorRepository is the data access layer for doctors.
    It should be injected via core.dependencies.get_doctor_repository().
"""
import logging
from typing import List, Optional

from models import Doctor
from repositories.base import DATABASE_ERRORS, Database, contains_pattern
from repositories.mappers import (
    DOCTOR_MUTABLE_COLUMNS,
    DOCTOR_SELECT,
    doctor_from_row,
    doctor_to_params,
)

logger = logging.getLogger(__name__)

_INSERT_SQL = (
    f"INSERT INTO doctors ({', '.join(DOCTOR_MUTABLE_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in DOCTOR_MUTABLE_COLUMNS)})"
)

_UPDATE_SQL = (
    f"UPDATE doctors SET {', '.join(f'{column} = ?' for column in DOCTOR_MUTABLE_COLUMNS)} "
    "WHERE doctor_id = ?"
)


class DoctorRepository:
    """
    Repository for doctor CRUD and search operations.

    It should be instantiated via core.dependencies.get_doctor_repository().
    """

    def __init__(self, db: Database, logger: Optional[logging.Logger] = None):
        """
        Initialize the doctor repository.

        Args:
            db: Database instance for data access.
            logger: Logger used to report database failures. Defaults to
                this module's logger.
        """
        self._db = db
        self._logger = logger or logging.getLogger(__name__)

    def _log_failure(self, operation: str, **context) -> None:
        self._logger.exception(
            f"Database error in DoctorRepository.{operation}",
            extra={"repository": "DoctorRepository", "operation": operation, **context}
        )

    def _fetch_all(self, operation: str, sql: str, params: tuple = ()) -> List[Doctor]:
        conn = None
        try:
            conn = self._db.get_connection()
            rows = conn.execute(sql, params).fetchall()
            return [doctor_from_row(row) for row in rows]
        except DATABASE_ERRORS:
            self._log_failure(operation)
            return []
        finally:
            if conn is not None:
                conn.close()

    def _fetch_one(self, operation: str, sql: str, params: tuple = (), **context) -> Optional[Doctor]:
        conn = None
        try:
            conn = self._db.get_connection()
            row = conn.execute(sql, params).fetchone()
            return doctor_from_row(row) if row else None
        except DATABASE_ERRORS:
            self._log_failure(operation, **context)
            return None
        finally:
            if conn is not None:
                conn.close()

    def _execute(self, operation: str, sql: str, params: tuple, **context) -> Optional[int]:
        """Run a write statement; the affected row count, or None on failure."""
        conn = None
        try:
            conn = self._db.get_connection()
            cursor = conn.execute(sql, params)
            conn.commit()
            return cursor.rowcount
        except DATABASE_ERRORS:
            self._log_failure(operation, **context)
            return None
        finally:
            if conn is not None:
                conn.close()

    def add(self, doctor: Doctor) -> bool:
        """
        Insert a new doctor.

        Returns:
            bool: True if a row was inserted.
        """
        affected = self._execute("add", _INSERT_SQL, doctor_to_params(doctor))
        return bool(affected)

    def list_all(self) -> List[Doctor]:
        """Get all doctors sorted alphabetically by name."""
        return self._fetch_all(
            "list_all",
            f"SELECT {DOCTOR_SELECT} FROM doctors ORDER BY name COLLATE NOCASE ASC, doctor_id ASC"
        )

    def get_by_id(self, doctor_id: int) -> Optional[Doctor]:
        """Get a doctor by ID, or None if not found."""
        return self._fetch_one(
            "get_by_id",
            f"SELECT {DOCTOR_SELECT} FROM doctors WHERE doctor_id = ?",
            (doctor_id,),
            doctor_id=doctor_id
        )

    def get_latest(self) -> Optional[Doctor]:
        """Get the most recently inserted doctor, or None."""
        return self._fetch_one(
            "get_latest",
            f"SELECT {DOCTOR_SELECT} FROM doctors ORDER BY doctor_id DESC LIMIT 1"
        )

    def update(self, doctor: Doctor) -> bool:
        """
        Replace every mutable field of the doctor keyed by doctor.doctor_id.

        Zero matched rows is still success; the miss is logged as a warning.
        """
        affected = self._execute(
            "update",
            _UPDATE_SQL,
            doctor_to_params(doctor) + (doctor.doctor_id,),
            doctor_id=doctor.doctor_id
        )
        if affected is None:
            return False
        if affected == 0:
            self._logger.warning(
                "Doctor update matched no rows",
                extra={"doctor_id": doctor.doctor_id}
            )
        return True

    def delete(self, doctor_id: int) -> bool:
        """
        Delete a doctor.

        Returns:
            bool: True only if a row was removed.
        """
        affected = self._execute(
            "delete",
            "DELETE FROM doctors WHERE doctor_id = ?",
            (doctor_id,),
            doctor_id=doctor_id
        )
        return bool(affected)

    def search(self, term: str) -> List[Doctor]:
        """Find doctors whose name or specialization contains term, ignoring case."""
        pattern = contains_pattern(term.casefold())
        return self._fetch_all(
            "search",
            f"""
            SELECT {DOCTOR_SELECT} FROM doctors
            WHERE casefold(name) LIKE ? ESCAPE '\\'
               OR casefold(specialization) LIKE ? ESCAPE '\\'
            ORDER BY name COLLATE NOCASE ASC, doctor_id ASC
            """,
            (pattern, pattern)
        )

    def list_by_specialization(self, specialization: str) -> List[Doctor]:
        """Get doctors with exactly this specialization, sorted by name."""
        return self._fetch_all(
            "list_by_specialization",
            f"SELECT {DOCTOR_SELECT} FROM doctors WHERE specialization = ? "
            "ORDER BY name COLLATE NOCASE ASC, doctor_id ASC",
            (specialization,)
        )
