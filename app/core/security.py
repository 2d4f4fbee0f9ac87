"""
Mots de passe (bcrypt) et jetons JWT (python-jose, HS256).

Access token: sub (soignant), device_id, type="access" et claims libres
(role). Refresh token: mêmes claims avec type="refresh" et un jti qui est
la clé de la ligne refresh_tokens. Les deux portent iss, aud, iat et exp.
"""

import hashlib
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any, Literal

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from app.core.config import MIN_BCRYPT_ROUNDS, Settings
from app.core.exceptions import TokenRejectedError

JWT_ALGORITHM = "HS256"
BCRYPT_MAX_BYTES = 72

TokenType = Literal["access", "refresh"]


def _password_bytes(password: str) -> bytes:
    # bcrypt ne considère que les 72 premiers octets
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = MIN_BCRYPT_ROUNDS) -> str:
    """Hash bcrypt; un coût inférieur au minimum est relevé."""
    salt = bcrypt.gensalt(rounds=max(rounds, MIN_BCRYPT_ROUNDS))
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    """False pour un hash vide ou mal formé."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """Hash comparé pour les comptes inconnus, pour un temps de réponse constant."""
    return hash_password(uuid.uuid4().hex)


def hash_token(token: str) -> str:
    """Empreinte SHA-256 stockée à la place du refresh token."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class IssuedToken:
    token: str
    expires_at: datetime
    claims: dict[str, Any]


def _sign(
    settings: Settings, claims: dict[str, Any], ttl_seconds: int, now: datetime | None
) -> IssuedToken:
    issued_at = int((now or datetime.now(UTC)).timestamp())
    expires_at = issued_at + ttl_seconds
    payload = {
        **claims,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "iat": issued_at,
        "exp": expires_at,
    }
    token = jwt.encode(payload, settings.get_jwt_secret(), algorithm=JWT_ALGORITHM)
    return IssuedToken(token, datetime.fromtimestamp(expires_at, UTC), payload)


def sign_access_token(
    settings: Settings,
    user_id: str,
    device_id: str,
    extra_claims: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> IssuedToken:
    claims = {**(extra_claims or {}), "sub": user_id, "device_id": device_id, "type": "access"}
    return _sign(settings, claims, settings.JWT_ACCESS_TTL, now)


def sign_refresh_token(
    settings: Settings, user_id: str, device_id: str, jti: str, now: datetime | None = None
) -> IssuedToken:
    claims = {"sub": user_id, "device_id": device_id, "jti": jti, "type": "refresh"}
    return _sign(settings, claims, settings.JWT_REFRESH_TTL, now)


def decode_token(settings: Settings, token: str, expected_type: TokenType) -> dict[str, Any]:
    """
    Vérifie signature, émetteur, audience, expiration et type du jeton.

    Raises:
        TokenRejectedError: reason "expired" ou "invalid"
    """
    try:
        claims = jwt.decode(
            token,
            settings.get_jwt_secret(),
            algorithms=[JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except ExpiredSignatureError as exc:
        raise TokenRejectedError("expired") from exc
    except JWTError as exc:
        raise TokenRejectedError("invalid") from exc

    required = ("sub", "device_id", "jti") if expected_type == "refresh" else ("sub", "device_id")
    if claims.get("type") != expected_type or not all(claims.get(name) for name in required):
        raise TokenRejectedError("invalid")
    return claims
