"""Middleware HTTP: identifiant de requête et logs d'accès."""

import logging
import re
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request, Response

logger = logging.getLogger("app.http")

REQUEST_ID_HEADER = "x-request-id"
_TRACE_ID_PATTERN = re.compile(r"^[a-f0-9]{32}$", re.IGNORECASE)


def resolve_request_id(request: Request) -> str:
    """
    Détermine l'identifiant de corrélation d'une requête.

    Ordre de priorité:
    1. En-tête `x-request-id` fourni par le client ou le load balancer
    2. Trace id W3C extrait de `traceparent` (ou l'en-tête brut s'il est malformé)
    3. UUID4 généré
    """
    header_id = request.headers.get(REQUEST_ID_HEADER)
    if header_id:
        return header_id

    traceparent = request.headers.get("traceparent")
    if traceparent:
        parts = traceparent.split("-")
        if len(parts) >= 3 and _TRACE_ID_PATTERN.match(parts[1]):
            return parts[1]
        return traceparent

    return str(uuid.uuid4())


def build_request_logging_middleware(
    enable_request_logs: bool = True,
) -> Callable[[Request, Callable[[Request], Awaitable[Response]]], Awaitable[Response]]:
    """Construit le middleware `http` à enregistrer via `app.middleware("http")`."""

    async def request_logging_middleware(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = resolve_request_id(request)
        # request.state est partagé avec les exception handlers via le scope ASGI
        request.state.request_id = request_id

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            if enable_request_logs:
                logger.error(
                    "Request failed",
                    extra={
                        "event": "http.request",
                        "request_id": request_id,
                        "method": request.method,
                        "route": request.url.path,
                        "status_code": 500,
                        "duration_ms": round((time.perf_counter() - start) * 1000, 3),
                    },
                )
            raise

        response.headers[REQUEST_ID_HEADER] = request_id
        if enable_request_logs:
            logger.info(
                "Request completed",
                extra={
                    "event": "http.request",
                    "request_id": request_id,
                    "method": request.method,
                    "route": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 3),
                },
            )
        return response

    return request_logging_middleware
