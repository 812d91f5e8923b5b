"""
Logging setup for the Hospital Records Service.

Every log line is one JSON object on stdout:

    {"timestamp": "2024-01-15T10:30:00.000Z", "level": "ERROR",
     "logger": "repositories.patient_repository",
     "message": "Database error in PatientRepository.count",
     "request_id": "1f3a9c2e",
     "extra": {"repository": "PatientRepository", "operation": "count"}}

LOG_FORMAT=text switches to a plain one-line format for local work.
The request id is set by core.middleware.LoggingMiddleware and read back
here, so repository and service logs carry it without passing it around.
"""
import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Top-level packages of this service; each inherits the root handler
APP_LOGGERS = ("main", "core", "api", "services", "repositories")

# Attributes every LogRecord carries; anything else came in through extra={...}
_STANDARD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message"
}


def get_request_id() -> Optional[str]:
    return request_id_var.get()


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def clear_request_id() -> None:
    request_id_var.set(None)


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields a caller attached with extra={...}."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Formats a record as a single line of JSON with a UTC timestamp."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "timestamp": created.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = get_request_id()
        if request_id:
            entry["request_id"] = request_id

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extra = _extra_fields(record)
        if extra:
            entry["extra"] = extra

        return json.dumps(entry, default=str, ensure_ascii=False)


def _resolve_level(level: str) -> str:
    """
    Normalise a log level name.

    An unknown level is reported on stderr and INFO is used instead;
    a typo in LOG_LEVEL must not stop the service from starting.
    """
    normalised = (level or "").upper()
    if normalised in VALID_LEVELS:
        return normalised
    print(
        f"[WARNING] Unknown log level {level!r}, falling back to INFO",
        file=sys.stderr
    )
    return "INFO"


def _build_handler(json_format: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    include_uvicorn: bool = True
) -> None:
    """
    Install one stdout handler on the root logger.

    Args:
        level: Log level name. LOG_LEVEL overrides it.
        json_format: JSON lines when True, plain text otherwise.
            LOG_FORMAT ("json" or "text") overrides it.
        include_uvicorn: Route uvicorn's loggers through the same handler.
    """
    level = _resolve_level(os.environ.get("LOG_LEVEL", level))
    json_format = os.environ.get("LOG_FORMAT", "json" if json_format else "text").lower() == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [_build_handler(json_format)]

    names = list(APP_LOGGERS)
    if include_uvicorn:
        names += ["uvicorn", "uvicorn.error", "uvicorn.access"]

    for name in names:
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.propagate = True
        if name in APP_LOGGERS:
            logger.setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"level": level, "format": "json" if json_format else "text"}
    )
