"""
Configuration pytest.

Les tests tournent sur SQLite en mémoire (aiosqlite) avec un pool statique:
une seule connexion partagée, donc une base neuve par test et aucun service
externe à lancer.

Usage:
    pip install -e ".[test]"
    pytest
"""

import os
from collections.abc import AsyncGenerator, Iterator
from datetime import date, time
from types import SimpleNamespace

import pytest

TEST_DATABASE_URL = "sqlite+aiosqlite://"
TEST_JWT_SECRET = "test-secret-berthcare-0123456789abcdef"

# Variables d'environnement de test, posées avant tout import de app.*
TEST_ENV = {
    "ENVIRONMENT": "test",
    "DEBUG": "false",
    "SQLALCHEMY_DATABASE_URI": TEST_DATABASE_URL,
    # OpenTelemetry actif (spans et corrélation des logs) mais sans export réseau
    "OTEL_SERVICE_NAME": "berthcare-backend-test",
    "OTEL_TRACES_EXPORTER": "none",
    "OTEL_METRICS_EXPORTER": "none",
    "OTEL_LOGS_EXPORTER": "none",
    "JWT_SECRET": TEST_JWT_SECRET,
}

for key, value in TEST_ENV.items():
    os.environ.setdefault(key, value)

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.database import Database  # noqa: E402


def build_test_database() -> Database:
    return Database(TEST_DATABASE_URL, poolclass=StaticPool)


@pytest.fixture
def test_settings() -> Settings:
    """Settings de test: tables créées par le lifespan, logs d'accès actifs."""
    return Settings(
        ENVIRONMENT="test",
        SQLALCHEMY_DATABASE_URI=TEST_DATABASE_URL,
        DATABASE_AUTO_CREATE=True,
        LOG_ENABLE_REQUEST_LOGS=True,
        JWT_SECRET=TEST_JWT_SECRET,
    )


# ============================================================================
# Fixtures base de données
# ============================================================================


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Base SQLite en mémoire avec toutes les tables, détruite après le test."""
    db = build_test_database()
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Session ouverte sur la base du test."""
    async with database.session() as session:
        yield session


# ============================================================================
# Fixtures HTTP
# ============================================================================


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """
    TestClient sur une application complète.

    Le lifespan tourne dans la boucle du TestClient: la base est créée puis
    fermée par l'application elle-même.
    """
    from app.main import create_app

    app = create_app(test_settings, database=build_test_database())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# ============================================================================
# Jeu de données minimal
# ============================================================================


@pytest.fixture
async def seed(db_session: AsyncSession) -> SimpleNamespace:
    """
    Soignant, coordinateur, client et créneau du 2026-10-19 à 09:30.

    Les enregistrements passent par les repositories pour exercer les mêmes
    chemins que l'API.
    """
    from app.repositories import CaregiverRepository, ClientRepository, ScheduleRepository

    caregivers = CaregiverRepository(db_session)
    caregiver = await caregivers.create(
        {
            "email": "marie.tremblay@berthcare.ca",
            "name": "Marie Tremblay",
            "phone": "+16045550101",
            "organization_id": "org-vancouver",
        }
    )
    coordinator = await caregivers.create(
        {
            "email": "luc.gagnon@berthcare.ca",
            "name": "Luc Gagnon",
            "phone": "+16045550102",
            "organization_id": "org-vancouver",
            "role": "coordinator",
        }
    )
    client = await ClientRepository(db_session).create(
        {
            "name": "Margaret Chen",
            "address": "1234 Main St, Vancouver BC",
            "organization_id": "org-vancouver",
        }
    )
    schedule = await ScheduleRepository(db_session).create(
        {
            "caregiver_id": caregiver.id,
            "client_id": client.id,
            "scheduled_date": date(2026, 10, 19),
            "scheduled_time": time(9, 30),
            "duration_minutes": 45,
        }
    )
    return SimpleNamespace(
        caregiver=caregiver, coordinator=coordinator, client=client, schedule=schedule
    )
