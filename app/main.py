import os

from opentelemetry.instrumentation import auto_instrumentation

from app.core.config import settings as default_settings

# Les instrumentations ne lisent que os.environ: les valeurs de .env y sont recopiées
for _key, _value in default_settings.otel_environment().items():
    os.environ.setdefault(_key, _value)
auto_instrumentation.initialize()

import logging
import math
import re
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware

from app.api.v1 import api as api_v1
from app.api.v1 import health
from app.core.config import Settings
from app.core.database import Database
from app.core.errors import setup_problem_handlers
from app.core.logging_config import configure_logging
from app.core.middleware import build_request_logging_middleware
from app.core.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def resolve_port(value: Any) -> int:
    """
    Convertit la valeur de PORT en numéro de port.

    - int: tel quel
    - float fini: partie entière
    - chaîne: entier en tête ("8080" -> 8080, "8080abc" -> 8080)
    - autre (None, bool, "abc"): DEFAULT_PORT
    """
    if isinstance(value, bool):
        return DEFAULT_PORT
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else DEFAULT_PORT
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        if match:
            return int(match.group(1))
    return DEFAULT_PORT


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Le client de données appartient au lifespan: il est créé au démarrage
    (ou fourni par l'appelant, ex: tests), exposé via `app.state.database`
    puis fermé à l'arrêt.

    Args:
        settings: Paramètres; par défaut ceux chargés depuis l'environnement
        database: Client de données déjà construit
    """
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("=== Application Startup ===")
        db = database or Database(
            settings.SQLALCHEMY_DATABASE_URI, echo=settings.DATABASE_ECHO
        )
        app.state.database = db
        try:
            if settings.DATABASE_AUTO_CREATE:
                await db.create_all()
            logger.info("=== Application Startup Complete ===")
            yield
        finally:
            logger.info("=== Application Shutdown ===")
            await db.dispose()
            logger.info("=== Application Shutdown Complete ===")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        lifespan=lifespan,
        openapi_url=f"{settings.get_api_prefix()}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.rate_limiter = RateLimiter(
        settings.LOGIN_RATE_LIMIT_MAX, settings.LOGIN_RATE_LIMIT_WINDOW
    )

    # Exception handlers RFC 9457 Problem Details
    setup_problem_handlers(app, expose_internal_errors=settings.DEBUG)

    # Logs d'accès et identifiant de requête
    app.middleware("http")(build_request_logging_middleware(settings.LOG_ENABLE_REQUEST_LOGS))

    # Middleware CORS (les credentials sont incompatibles avec l'origine "*")
    origins = [str(origin) for origin in settings.ALLOWED_ORIGINS]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Middleware Trusted Hosts
    if settings.ENVIRONMENT not in ("development", "test"):
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.TRUSTED_HOSTS,
        )

    app.include_router(health.router)
    app.include_router(api_v1.router, prefix=settings.get_api_prefix("v1"))

    return app


def build_server(
    app: FastAPI, port_input: Any = None, settings: Settings | None = None
) -> tuple[uvicorn.Server, int]:
    """
    Prépare le serveur uvicorn sans le démarrer.

    Returns:
        (serveur, port effectif)
    """
    settings = settings or default_settings
    port = resolve_port(port_input)
    config = uvicorn.Config(
        app,
        host=settings.HOST,
        port=port,
        log_level=settings.get_log_level().lower(),
        # Le logging est déjà configuré par create_app
        log_config=None,
    )
    logger.info(
        "Server is running",
        extra={
            "event": "server.start",
            "port": port,
            "environment": settings.ENVIRONMENT,
            "health_url": f"http://localhost:{port}/health",
        },
    )
    return uvicorn.Server(config), port


def start_server() -> None:
    """Point d'entrée console: PORT de l'environnement, sinon celui des settings."""
    server, _ = build_server(app, os.environ.get("PORT", default_settings.PORT))
    server.run()


app = create_app()


if __name__ == "__main__":
    start_server()
