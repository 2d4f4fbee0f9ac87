"""
Authentification des soignants: connexion, rafraîchissement et déconnexion.

Un appareil (device_id) détient au plus un refresh token vivant. La
rotation remplace le jti de la ligne de l'appareil: l'ancien jeton devient
introuvable et ne peut plus servir.
"""

import hmac
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from opentelemetry import trace
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.exceptions import InvalidCredentialsError, TokenRejectedError
from app.core.security import (
    decode_token,
    dummy_password_hash,
    hash_token,
    sign_access_token,
    sign_refresh_token,
    verify_password,
)
from app.models import Caregiver
from app.models.types import new_id
from app.repositories.caregiver import CaregiverRepository
from app.repositories.refresh_token import RefreshTokenRepository

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


@dataclass
class AuthTokens:
    access_token: str
    access_expires_at: datetime
    user_id: str
    device_id: str
    jti: str
    refresh_token: str | None = None
    refresh_expires_at: datetime | None = None


class AuthService:
    """
    Args:
        session: Session de la requête
        settings: Paramètres JWT et bcrypt
    """

    def __init__(self, session: AsyncSession, settings: Settings):
        self.settings = settings
        self.caregivers = CaregiverRepository(session)
        self.refresh_tokens = RefreshTokenRepository(session)

    async def login(self, email: str, password: str, device_id: str) -> AuthTokens:
        """
        Vérifie les identifiants et émet access et refresh tokens pour l'appareil.

        Raises:
            InvalidCredentialsError: Compte inconnu, inactif, sans mot de passe ou mot de passe faux
        """
        with tracer.start_as_current_span("auth.login"):
            caregiver = await self.caregivers.find_by_email(email.strip().lower())
            password_hash = caregiver.password_hash if caregiver else None
            # bcrypt est toujours exécuté, compte connu ou non
            valid = verify_password(password, password_hash or dummy_password_hash())
            if caregiver is None or not password_hash or not valid:
                logger.warning("Login rejected", extra={"event": "auth.login_rejected"})
                raise InvalidCredentialsError()

            access = self._sign_access(caregiver, device_id)
            jti, refresh = await self._issue_refresh(caregiver.id, device_id)
            logger.info(
                "Login succeeded",
                extra={"event": "auth.login", "user_id": caregiver.id, "device_id": device_id},
            )
            return AuthTokens(
                access_token=access.token,
                access_expires_at=access.expires_at,
                user_id=caregiver.id,
                device_id=device_id,
                jti=jti,
                refresh_token=refresh.token,
                refresh_expires_at=refresh.expires_at,
            )

    async def refresh(
        self, token: str, device_id: str | None = None, rotate: bool = False
    ) -> AuthTokens:
        """
        Émet un nouvel access token à partir d'un refresh token valide.

        Avec `rotate`, un nouveau refresh token remplace celui présenté.

        Raises:
            TokenRejectedError: invalid, expired, not_found, revoked ou device_mismatch
        """
        with tracer.start_as_current_span("auth.refresh") as span:
            span.set_attribute("auth.rotate", rotate)
            claims = decode_token(self.settings, token, "refresh")
            if device_id and claims["device_id"] != device_id:
                raise TokenRejectedError("device_mismatch")

            jti = claims["jti"]
            record = await self.refresh_tokens.find_by_jti(jti)
            if record is None or not hmac.compare_digest(record.token_hash, hash_token(token)):
                raise TokenRejectedError("not_found")
            if record.revoked_at is not None:
                raise TokenRejectedError("revoked")
            if await self.refresh_tokens.find_valid_by_jti(jti) is None:
                raise TokenRejectedError("expired")

            caregiver = await self.caregivers.find_by_id(claims["sub"])
            if caregiver is None:
                raise TokenRejectedError("not_found")

            await self.refresh_tokens.touch_last_used(jti)
            access = self._sign_access(caregiver, claims["device_id"])
            tokens = AuthTokens(
                access_token=access.token,
                access_expires_at=access.expires_at,
                user_id=caregiver.id,
                device_id=claims["device_id"],
                jti=jti,
            )
            if rotate:
                tokens.jti, refresh = await self._issue_refresh(caregiver.id, claims["device_id"])
                tokens.refresh_token = refresh.token
                tokens.refresh_expires_at = refresh.expires_at
            return tokens

    async def logout(self, token: str) -> int:
        """Révoque le refresh token de l'appareil; renvoie le nombre de jetons révoqués."""
        claims = decode_token(self.settings, token, "refresh")
        revoked = await self.refresh_tokens.revoke_by_device(claims["sub"], claims["device_id"])
        logger.info(
            "Logout",
            extra={"event": "auth.logout", "user_id": claims["sub"], "revoked": revoked},
        )
        return revoked

    async def authenticate(self, access_token: str) -> Caregiver:
        """
        Soignant actif porteur de l'access token.

        Raises:
            TokenRejectedError: Jeton invalide ou expiré, ou soignant désactivé
        """
        claims = decode_token(self.settings, access_token, "access")
        caregiver = await self.caregivers.find_by_id(claims["sub"])
        if caregiver is None:
            raise TokenRejectedError("invalid")
        return caregiver

    def _sign_access(self, caregiver: Caregiver, device_id: str):
        return sign_access_token(self.settings, caregiver.id, device_id, {"role": caregiver.role})

    async def _issue_refresh(self, user_id: str, device_id: str):
        jti = new_id()
        now = datetime.now(UTC)
        refresh = sign_refresh_token(self.settings, user_id, device_id, jti, now=now)
        await self.refresh_tokens.upsert_for_device(
            jti=jti,
            user_id=user_id,
            device_id=device_id,
            token_hash=hash_token(refresh.token),
            issued_at=now,
            expires_at=refresh.expires_at,
        )
        return jti, refresh
