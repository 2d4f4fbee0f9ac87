"""
Limitation de débit en mémoire pour les routes d'authentification.

Fenêtre fixe par clé (ip:email:appareil:route). Les compteurs vivent dans le
processus: chaque worker uvicorn limite indépendamment.
"""

import logging
import math
import time
from collections.abc import Callable

from fastapi import Request

from app.core.exceptions import TooManyRequestsError

logger = logging.getLogger(__name__)


class RateLimiter:
    """
    Args:
        max_requests: Requêtes admises par fenêtre et par clé
        window_seconds: Durée de la fenêtre
        clock: Horloge monotone (injectable pour les tests)
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._buckets: dict[str, tuple[int, float]] = {}
        self._next_prune = clock() + window_seconds

    def hit(self, key: str) -> tuple[int, float]:
        """Compte une requête; renvoie (compteur, secondes avant la fin de fenêtre)."""
        now = self._clock()
        self._prune(now)
        count, reset_at = self._buckets.get(key, (0, now + self.window_seconds))
        if reset_at <= now:
            count, reset_at = 0, now + self.window_seconds
        count += 1
        self._buckets[key] = (count, reset_at)
        return count, reset_at - now

    def check(self, key: str) -> None:
        """
        Raises:
            TooManyRequestsError: Quota de la fenêtre dépassé
        """
        count, remaining = self.hit(key)
        if count > self.max_requests:
            logger.warning("Rate limit exceeded", extra={"event": "auth.rate_limited"})
            raise TooManyRequestsError(
                detail="Too many requests", retry_after=math.ceil(remaining)
            )

    def _prune(self, now: float) -> None:
        if now < self._next_prune:
            return
        self._buckets = {
            key: bucket for key, bucket in self._buckets.items() if bucket[1] > now
        }
        self._next_prune = now + self.window_seconds


def rate_limit_key(request: Request, *parts: str | None) -> str:
    """Clé ip:parts...:route; les parties absentes sont laissées vides."""
    client = request.client.host if request.client else "unknown"
    return ":".join([client, *(part or "" for part in parts), request.url.path])
