"""
Hospital Records Service application.

Serves the patient table (paged, newest first, searchable) and the doctor
directory over HTTP, backed by a single SQLite file.

Request path: LoggingMiddleware, then a router in api/routers/, then a
service, then a repository, then the Database from core.dependencies.

Run locally with:
    python main.py
or:
    uvicorn main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core.config import API_HOST, API_PORT, API_RELOAD
from core.dependencies import get_database
from core.exceptions import setup_exception_handlers
from core.logging_config import setup_logging
from core.middleware import LoggingMiddleware
from api.routers import health_router, patients_router, doctors_router

SERVICE_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and open the database before serving requests."""
    setup_logging(level="INFO", json_format=True)

    logger = logging.getLogger(__name__)
    logger.info("Starting Hospital Records Service", extra={"version": SERVICE_VERSION})

    db = get_database()
    logger.info("Database ready", extra={"db_path": db.db_path})

    yield

    logger.info("Hospital Records Service stopped")


app = FastAPI(
    title="Hospital Records Service",
    description="Patient records with paging and search, the doctor directory, "
                "and validated data entry for both.",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

setup_exception_handlers(app)

# Registered last, so LoggingMiddleware wraps CORS and sees every request
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

app.include_router(health_router)
app.include_router(patients_router)
app.include_router(doctors_router)


if __name__ == "__main__":
    uvicorn.run("main:app", host=API_HOST, port=API_PORT, reload=API_RELOAD)
