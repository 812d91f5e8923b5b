"""
Configuration module for the Hospital Records Service.
Uses Pydantic BaseSettings for validation - app fails fast on malformed config.
"""
import sys
import logging
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with validation.
    Values are read from the environment or a local .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database Configuration
    hospital_svc_db_dir: str = Field(default="data", description="Database directory")
    hospital_svc_db_file: str = Field(default="hospital.db", description="Database filename")
    hospital_svc_db_busy_timeout: int = Field(default=5000, description="SQLite busy timeout in milliseconds")

    # API Configuration
    hospital_svc_host: str = Field(default="0.0.0.0", description="API host")
    hospital_svc_port: int = Field(default=8000, description="API port")
    hospital_svc_reload: bool = Field(default=False, description="Enable hot reload")

    # Pagination Configuration
    hospital_svc_page_size: int = Field(default=10, ge=1, description="Default number of patients per page")
    hospital_svc_max_page_size: int = Field(default=100, ge=1, description="Largest page size a client may request")

    # Patient form bounds
    patient_min_age: int = Field(default=0, ge=0, description="Youngest accepted patient age")
    patient_max_age: int = Field(default=120, ge=0, description="Oldest accepted patient age")

    @model_validator(mode="after")
    def validate_bounds(self) -> "Settings":
        """
        Validate cross-field bounds at startup and fail fast with clear error messages.
        """
        errors = []

        if self.patient_min_age > self.patient_max_age:
            errors.append(
                f"PATIENT_MIN_AGE ({self.patient_min_age}) exceeds "
                f"PATIENT_MAX_AGE ({self.patient_max_age})"
            )

        if self.hospital_svc_page_size > self.hospital_svc_max_page_size:
            logger.warning(
                "HOSPITAL_SVC_PAGE_SIZE is larger than HOSPITAL_SVC_MAX_PAGE_SIZE - "
                "default pages will be clamped to the maximum"
            )

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            logger.critical(error_msg)
            sys.exit(1)

        return self

    @property
    def database_path(self) -> str:
        """Get the full database path."""
        return str(Path(self.hospital_svc_db_dir) / self.hospital_svc_db_file)

    @property
    def default_page_size(self) -> int:
        """Default page size clamped to the configured maximum."""
        return min(self.hospital_svc_page_size, self.hospital_svc_max_page_size)

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        Path(self.hospital_svc_db_dir).mkdir(parents=True, exist_ok=True)


# Create global settings instance - fails fast on invalid config
settings = Settings()

# Ensure directories exist on import
settings.ensure_directories()

# Module-level exports for existing code
DATABASE_DIR = settings.hospital_svc_db_dir
DATABASE_FILE = settings.hospital_svc_db_file
DATABASE_PATH = settings.database_path
DATABASE_BUSY_TIMEOUT = settings.hospital_svc_db_busy_timeout

API_HOST = settings.hospital_svc_host
API_PORT = settings.hospital_svc_port
API_RELOAD = settings.hospital_svc_reload

DEFAULT_PAGE_SIZE = settings.default_page_size
MAX_PAGE_SIZE = settings.hospital_svc_max_page_size

PATIENT_MIN_AGE = settings.patient_min_age
PATIENT_MAX_AGE = settings.patient_max_age

# Largest value an SQLite INTEGER PRIMARY KEY can hold
MAX_RECORD_ID = 2**63 - 1
