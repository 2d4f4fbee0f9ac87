"""Tests du RefreshTokenRepository: un jeton vivant par appareil."""

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import func, select

from app.models import RefreshToken
from app.repositories import RefreshTokenRepository

DEVICE_A = "5f1d2c3b-4a59-4e68-9d7c-8b6a5f4e3d2c"
DEVICE_B = "7a2b3c4d-5e6f-4a8b-9c0d-1e2f3a4b5c6d"


async def store(repository, seed, jti, device_id=DEVICE_A, expires_in=timedelta(days=30)):
    now = datetime.now(UTC)
    return await repository.upsert_for_device(
        jti=jti,
        user_id=seed.caregiver.id,
        device_id=device_id,
        token_hash=f"hash-{jti}",
        issued_at=now,
        expires_at=now + expires_in,
    )


class TestRefreshTokenRepository:
    @pytest.mark.asyncio
    async def test_upsert_replaces_device_token(self, db_session, seed):
        repository = RefreshTokenRepository(db_session)
        await store(repository, seed, "jti-1")
        await repository.mark_revoked("jti-1")

        record = await store(repository, seed, "jti-2")

        assert record.id == "jti-2"
        assert record.revoked_at is None
        assert await repository.find_by_jti("jti-1") is None
        count = await db_session.scalar(select(func.count()).select_from(RefreshToken))
        assert count == 1

    @pytest.mark.asyncio
    async def test_find_valid_skips_expired_and_revoked(self, db_session, seed):
        repository = RefreshTokenRepository(db_session)
        await store(repository, seed, "jti-live")
        await store(repository, seed, "jti-old", DEVICE_B, expires_in=timedelta(minutes=-1))

        assert (await repository.find_valid_by_jti("jti-live")).id == "jti-live"
        assert await repository.find_valid_by_jti("jti-old") is None

        assert await repository.mark_revoked("jti-live") is True
        assert await repository.mark_revoked("jti-live") is False
        assert await repository.find_valid_by_jti("jti-live") is None
        assert (await repository.find_by_jti("jti-live")).revoked_at is not None

    @pytest.mark.asyncio
    async def test_mark_revoked_records_replacement(self, db_session, seed):
        repository = RefreshTokenRepository(db_session)
        await store(repository, seed, "jti-1")

        await repository.mark_revoked("jti-1", replaced_by_jti="jti-2")

        record = await repository.find_by_jti("jti-1")
        await db_session.refresh(record)
        assert record.replaced_by_jti == "jti-2"

    @pytest.mark.asyncio
    async def test_touch_last_used(self, db_session, seed):
        repository = RefreshTokenRepository(db_session)
        record = await store(repository, seed, "jti-1")
        assert record.last_used_at is None

        await repository.touch_last_used("jti-1")

        await db_session.refresh(record)
        assert record.last_used_at is not None

    @pytest.mark.asyncio
    async def test_revoke_by_device_and_user(self, db_session, seed):
        repository = RefreshTokenRepository(db_session)
        await store(repository, seed, "jti-a")
        await store(repository, seed, "jti-b", DEVICE_B)

        assert await repository.revoke_by_device(seed.caregiver.id, DEVICE_A) == 1
        assert await repository.revoke_by_device(seed.caregiver.id, DEVICE_A) == 0
        assert await repository.revoke_all_for_user(seed.caregiver.id) == 1
        assert await repository.find_valid_by_jti("jti-b") is None
