"""
Exception handlers RFC 9457 pour l'application FastAPI.

Convertit BerthCareException, HTTPException Starlette, erreurs de validation
de requête et exceptions non gérées en réponses `application/problem+json`.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from opentelemetry import trace
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import BerthCareException, ProblemDetail

logger = logging.getLogger(__name__)

PROBLEM_JSON = "application/problem+json"


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _trace_id() -> str | None:
    context = trace.get_current_span().get_span_context()
    return trace.format_trace_id(context.trace_id) if context.is_valid else None


def problem_response(request: Request, problem: ProblemDetail) -> JSONResponse:
    """Sérialise un ProblemDetail en ajoutant instance, request id et trace id."""
    request_id = _request_id(request)
    problem = problem.model_copy(
        update={
            "instance": problem.instance or request.url.path,
            "request_id": problem.request_id or request_id,
            "trace_id": problem.trace_id or _trace_id(),
        }
    )
    headers = {"x-request-id": request_id} if request_id else None
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(mode="json", by_alias=True, exclude_none=True),
        media_type=PROBLEM_JSON,
        headers=headers,
    )


def setup_problem_handlers(app: FastAPI, *, expose_internal_errors: bool = False) -> None:
    """
    Enregistre les handlers Problem Details sur l'application.

    Args:
        app: Application FastAPI
        expose_internal_errors: Expose le message des erreurs 500 (dev uniquement)
    """

    async def handle_berthcare_exception(request: Request, exc: BerthCareException):
        return problem_response(request, exc.problem_detail)

    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        problem = ProblemDetail(
            title=_reason_phrase(exc.status_code),
            status=exc.status_code,
            detail=str(exc.detail) if exc.detail else None,
        )
        return problem_response(request, problem)

    async def handle_validation_error(request: Request, exc: RequestValidationError):
        problem = ProblemDetail(
            title="Unprocessable Entity",
            status=422,
            detail="Request validation failed",
            errors=[
                {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
                for error in exc.errors()
            ],
        )
        return problem_response(request, problem)

    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            exc_info=exc,
            extra={
                "event": "http.error",
                "request_id": _request_id(request),
                "method": request.method,
                "route": request.url.path,
            },
        )
        problem = ProblemDetail(
            title="Internal Server Error",
            status=500,
            detail=str(exc) if expose_internal_errors else None,
        )
        return problem_response(request, problem)

    app.add_exception_handler(BerthCareException, handle_berthcare_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"
