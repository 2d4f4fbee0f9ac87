import logging
import time
from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from app import __version__
from app.core.database import Database, get_database
from app.core.exceptions import ServiceUnavailableError
from app.schemas.health import DatabaseHealthResponse, HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_STARTED_AT = time.monotonic()


def uptime_seconds() -> int:
    """Uptime du processus arrondi à la seconde."""
    return round(time.monotonic() - _STARTED_AT)


@router.get("/health", tags=["health"], response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness: le processus répond, sans toucher à la base."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC).isoformat().replace("+00:00", "Z"),
        uptime_seconds=uptime_seconds(),
        version=__version__,
    )


@router.get("/health/db", tags=["health"], response_model=DatabaseHealthResponse)
async def health_db(database: Database = Depends(get_database)) -> DatabaseHealthResponse:
    """Readiness: vérifie la connexion à la base avec `SELECT 1`."""
    try:
        await database.ping()
    except Exception as e:
        logger.error(f"Error checking database health: {e}")
        raise ServiceUnavailableError(detail="Database is unreachable") from None
    return DatabaseHealthResponse(status="healthy", database="ok")
