from datetime import UTC, datetime

from pydantic import BaseModel
from sqlalchemy import select, update

from app.models import RefreshToken
from app.repositories.base import Repository
from app.repositories.deletion import DeletionPolicy


class RefreshTokenRepository(Repository[RefreshToken, BaseModel, BaseModel]):
    """
    Refresh tokens par appareil.

    Un jeton révoqué reste en base: supprimer revient à révoquer, et les
    lectures par défaut ne voient que les jetons non révoqués.
    """

    model = RefreshToken
    deletion_policy = DeletionPolicy.timestamp("revoked_at")

    async def upsert_for_device(
        self,
        *,
        jti: str,
        user_id: str,
        device_id: str,
        token_hash: str,
        issued_at: datetime,
        expires_at: datetime,
    ) -> RefreshToken:
        """
        Enregistre le jeton vivant de l'appareil.

        La ligne existante du couple (soignant, appareil) est réutilisée: son
        jti change, ce qui invalide l'ancien jeton, et l'état de révocation
        est remis à zéro.
        """
        result = await self.session.execute(
            select(RefreshToken).where(
                RefreshToken.user_id == user_id, RefreshToken.device_id == device_id
            )
        )
        record = result.scalar_one_or_none()
        values = {
            "id": jti,
            "token_hash": token_hash,
            "issued_at": issued_at,
            "expires_at": expires_at,
            "revoked_at": None,
            "replaced_by_jti": None,
            "last_used_at": None,
        }
        if record is None:
            record = RefreshToken(user_id=user_id, device_id=device_id, **values)
            self.session.add(record)
        else:
            for field, value in values.items():
                setattr(record, field, value)
        return await self._commit_and_refresh(record)

    async def find_valid_by_jti(
        self, jti: str, now: datetime | None = None
    ) -> RefreshToken | None:
        """Jeton non révoqué et non expiré, sinon None."""
        result = await self.session.execute(
            self._active_select().where(
                RefreshToken.id == jti, RefreshToken.expires_at > (now or datetime.now(UTC))
            )
        )
        return result.scalar_one_or_none()

    async def find_by_jti(self, jti: str) -> RefreshToken | None:
        """Jeton par jti, révoqué ou expiré compris."""
        return await self._get_any(jti)

    async def mark_revoked(
        self, jti: str, revoked_at: datetime | None = None, replaced_by_jti: str | None = None
    ) -> bool:
        """Révoque un jeton encore actif; False s'il est inconnu ou déjà révoqué."""
        count = await self._revoke(
            RefreshToken.id == jti,
            revoked_at=revoked_at,
            replaced_by_jti=replaced_by_jti,
        )
        return count > 0

    async def touch_last_used(self, jti: str) -> None:
        await self.session.execute(
            update(RefreshToken)
            .where(RefreshToken.id == jti)
            .values(last_used_at=datetime.now(UTC))
        )
        await self.session.commit()

    async def revoke_by_device(self, user_id: str, device_id: str) -> int:
        """Nombre de jetons révoqués pour l'appareil."""
        return await self._revoke(
            RefreshToken.user_id == user_id, RefreshToken.device_id == device_id
        )

    async def revoke_all_for_user(self, user_id: str) -> int:
        """Nombre de jetons révoqués pour le soignant, tous appareils confondus."""
        return await self._revoke(RefreshToken.user_id == user_id)

    async def _revoke(
        self,
        *criteria,
        revoked_at: datetime | None = None,
        replaced_by_jti: str | None = None,
    ) -> int:
        values = {"revoked_at": revoked_at or datetime.now(UTC)}
        if replaced_by_jti is not None:
            values["replaced_by_jti"] = replaced_by_jti
        result = await self.session.execute(
            update(RefreshToken)
            .where(*criteria, RefreshToken.revoked_at.is_(None))
            .values(**values)
        )
        await self.session.commit()
        return result.rowcount
