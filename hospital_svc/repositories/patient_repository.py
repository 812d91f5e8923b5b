"""
Repository for patient database operations.

This module contains all database access for patient-related operations.

Architecture:
    PatientRepository is the data access layer for patients.
    It should be injected via core.dependencies.get_patient_repository().

All SQL is encapsulated in this repository - no SQL in service or API layers.

Failure handling:
    Every sqlite3.Error (and OverflowError from binding an
    out-of-range integer) is caught here, logged with the operation name and
    turned into a safe default ([] / 0 / False / None). Callers never see
    database exceptions.
"""
import logging
from dataclasses import replace
from typing import List, Optional

from models import Patient
from repositories.base import DATABASE_ERRORS, Database, contains_pattern
from repositories.mappers import (
    PATIENT_MUTABLE_COLUMNS,
    PATIENT_SELECT,
    patient_from_row,
    patient_to_params,
)
from core.datetime_utils import today

logger = logging.getLogger(__name__)

_INSERT_SQL = (
    f"INSERT INTO patients ({', '.join(PATIENT_MUTABLE_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in PATIENT_MUTABLE_COLUMNS)})"
)

# An unset admission date keeps whatever is stored
_UPDATE_SQL = """
    UPDATE patients
    SET name = ?, age = ?, gender = ?, phone = ?, email = ?,
        address = ?, disease = ?, blood_group = ?, emergency_contact = ?,
        admission_date = COALESCE(?, admission_date)
    WHERE patient_id = ?
"""


class PatientRepository:
    """
    Repository for patient CRUD, paging and search operations.

    This repository encapsulates all database operations for patients.
    It should be instantiated via core.dependencies.get_patient_repository().
    """

    def __init__(self, db: Database, logger: Optional[logging.Logger] = None):
        """
        Initialize the patient repository.

        Args:
            db: Database instance for data access.
            logger: Logger used to report database failures. Defaults to
                this module's logger.
        """
        self._db = db
        self._logger = logger or logging.getLogger(__name__)

    def _log_failure(self, operation: str, **context) -> None:
        """Log the exception currently being handled with repository context."""
        self._logger.exception(
            f"Database error in PatientRepository.{operation}",
            extra={"repository": "PatientRepository", "operation": operation, **context}
        )

    def _fetch_all(self, operation: str, sql: str, params: tuple = ()) -> List[Patient]:
        """Run a SELECT and map every row; [] on failure."""
        conn = None
        try:
            conn = self._db.get_connection()
            rows = conn.execute(sql, params).fetchall()
            return [patient_from_row(row) for row in rows]
        except DATABASE_ERRORS:
            self._log_failure(operation)
            return []
        finally:
            if conn is not None:
                conn.close()

    def list_page(self, limit: int, offset: int) -> List[Patient]:
        """
        Get one page of patients, newest first.

        Args:
            limit: Maximum number of patients to return.
            offset: Number of patients to skip.

        Returns:
            List[Patient]: At most `limit` patients ordered by patient_id
                descending. An offset past the end gives an empty list.
        """
        if limit < 0 or offset < 0:
            self._logger.warning(
                "Rejected negative pagination arguments",
                extra={"limit": limit, "offset": offset}
            )
            return []

        return self._fetch_all(
            "list_page",
            f"SELECT {PATIENT_SELECT} FROM patients "
            "ORDER BY patient_id DESC LIMIT ? OFFSET ?",
            (limit, offset)
        )

    def count(self) -> int:
        """
        Get the total number of patients.

        Returns:
            int: Row count, or 0 if the query fails.
        """
        conn = None
        try:
            conn = self._db.get_connection()
            row = conn.execute("SELECT COUNT(*) FROM patients").fetchone()
            return row[0] if row else 0
        except DATABASE_ERRORS:
            self._log_failure("count")
            return 0
        finally:
            if conn is not None:
                conn.close()

    def list_all(self) -> List[Patient]:
        """Get every patient ordered by patient_id descending."""
        return self._fetch_all(
            "list_all",
            f"SELECT {PATIENT_SELECT} FROM patients ORDER BY patient_id DESC"
        )

    def get_by_id(self, patient_id: int) -> Optional[Patient]:
        """
        Get a patient by ID.

        Returns:
            Optional[Patient]: The patient, or None if not found or the query fails.
        """
        conn = None
        try:
            conn = self._db.get_connection()
            row = conn.execute(
                f"SELECT {PATIENT_SELECT} FROM patients WHERE patient_id = ?",
                (patient_id,)
            ).fetchone()
            return patient_from_row(row) if row else None
        except DATABASE_ERRORS:
            self._log_failure("get_by_id", patient_id=patient_id)
            return None
        finally:
            if conn is not None:
                conn.close()

    def get_latest(self) -> Optional[Patient]:
        """Get the most recently inserted patient, or None."""
        page = self.list_page(1, 0)
        return page[0] if page else None

    def add(self, patient: Patient) -> bool:
        """
        Insert a new patient.

        The admission date defaults to today when unset. The generated
        patient_id is not returned; use get_latest() to read the row back.

        Returns:
            bool: True if a row was inserted.
        """
        if patient.admission_date is None:
            patient = replace(patient, admission_date=today())

        conn = None
        try:
            conn = self._db.get_connection()
            cursor = conn.execute(_INSERT_SQL, patient_to_params(patient))
            conn.commit()
            return cursor.rowcount > 0
        except DATABASE_ERRORS:
            self._log_failure("add")
            return False
        finally:
            if conn is not None:
                conn.close()

    def update(self, patient: Patient) -> bool:
        """
        Replace every mutable field of the patient keyed by patient.patient_id.

        A statement that runs but matches no row still counts as success;
        the miss is logged as a warning.

        Returns:
            bool: True if the statement executed, False if it failed.
        """
        conn = None
        try:
            conn = self._db.get_connection()
            cursor = conn.execute(
                _UPDATE_SQL,
                patient_to_params(patient) + (patient.patient_id,)
            )
            conn.commit()
            if cursor.rowcount == 0:
                self._logger.warning(
                    "Patient update matched no rows",
                    extra={"patient_id": patient.patient_id}
                )
            return True
        except DATABASE_ERRORS:
            self._log_failure("update", patient_id=patient.patient_id)
            return False
        finally:
            if conn is not None:
                conn.close()

    def delete(self, patient_id: int) -> bool:
        """
        Delete a patient.

        Returns:
            bool: True only if a row was removed.
        """
        conn = None
        try:
            conn = self._db.get_connection()
            cursor = conn.execute(
                "DELETE FROM patients WHERE patient_id = ?",
                (patient_id,)
            )
            conn.commit()
            return cursor.rowcount > 0
        except DATABASE_ERRORS:
            self._log_failure("delete", patient_id=patient_id)
            return False
        finally:
            if conn is not None:
                conn.close()

    def search(self, term: str) -> List[Patient]:
        """
        Find patients whose name or phone contains term, ignoring case.

        Returns:
            List[Patient]: Matches ordered by name ascending.
        """
        pattern = contains_pattern(term.casefold())
        return self._fetch_all(
            "search",
            f"""
            SELECT {PATIENT_SELECT} FROM patients
            WHERE casefold(name) LIKE ? ESCAPE '\\'
               OR casefold(phone) LIKE ? ESCAPE '\\'
            ORDER BY name COLLATE NOCASE ASC, patient_id ASC
            """,
            (pattern, pattern)
        )
