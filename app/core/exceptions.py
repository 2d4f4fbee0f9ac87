"""
RFC 9457 Problem Details pour HTTP APIs - Exceptions BerthCare.

Toutes les erreurs applicatives dérivent de BerthCareException et portent un
ProblemDetail sérialisé tel quel par les handlers de app.core.errors.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProblemDetail(BaseModel):
    """Corps de réponse `application/problem+json`."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str = "about:blank"
    title: str
    status: int
    detail: str | None = None
    instance: str | None = None
    request_id: str | None = Field(default=None, alias="requestId")
    trace_id: str | None = Field(default=None, alias="traceId")


class BerthCareException(Exception):
    """
    Exception de base porteuse d'un Problem Detail.

    Attributes:
        status_code: Code HTTP de la réponse
        problem_detail: Détails de l'erreur au format RFC 9457
    """

    status_code: int = 500
    title: str = "Internal Server Error"

    def __init__(
        self,
        detail: str | None = None,
        instance: str | None = None,
        *,
        status_code: int | None = None,
        title: str | None = None,
        type: str = "about:blank",
        **extensions: Any,
    ):
        if status_code is not None:
            self.status_code = status_code
        self.problem_detail = ProblemDetail(
            type=type,
            title=title or self.title,
            status=self.status_code,
            detail=detail,
            instance=instance,
            **extensions,
        )
        super().__init__(detail or self.problem_detail.title)


class UnauthorizedError(BerthCareException):
    status_code = 401
    title = "Unauthorized"


class NotFoundError(BerthCareException):
    status_code = 404
    title = "Not Found"


class ConflictError(BerthCareException):
    status_code = 409
    title = "Conflict"


class ValidationError(BerthCareException):
    status_code = 422
    title = "Unprocessable Entity"


class TooManyRequestsError(BerthCareException):
    status_code = 429
    title = "Too Many Requests"


class InternalServerError(BerthCareException):
    status_code = 500
    title = "Internal Server Error"


class ServiceUnavailableError(BerthCareException):
    status_code = 503
    title = "Service Unavailable"


class RecordNotFoundError(NotFoundError):
    """
    Exception levée lorsqu'une écriture vise un enregistrement inexistant.

    Les lectures (find_by_id, find_many) ne lèvent jamais: elles renvoient
    None ou une liste vide.

    Example:
        ```python
        raise RecordNotFoundError(entity="Visit", record_id=visit_id)
        ```
    """

    def __init__(self, entity: str, record_id: str, instance: str | None = None):
        self.entity = entity
        self.record_id = record_id
        super().__init__(
            detail=f"{entity} {record_id} not found",
            instance=instance,
            entity=entity,
            record_id=record_id,
        )


class ConstraintViolationError(ConflictError):
    """
    Exception levée lorsqu'une contrainte d'unicité ou de relation est violée.

    Enveloppe l'IntegrityError du driver; le message du driver n'est exposé
    que dans `detail`.
    """

    def __init__(self, entity: str, detail: str, instance: str | None = None):
        self.entity = entity
        super().__init__(
            detail=f"{entity} constraint violation: {detail}",
            instance=instance,
            title="Constraint Violation",
            entity=entity,
        )


class InvalidFilterError(ValidationError):
    """Exception levée lorsqu'un filtre référence une colonne inconnue."""

    def __init__(self, entity: str, fields: list[str]):
        self.entity = entity
        self.fields = fields
        super().__init__(
            detail=f"Unknown filter field(s) for {entity}: {', '.join(sorted(fields))}",
            entity=entity,
            fields=sorted(fields),
        )


class InvalidCredentialsError(UnauthorizedError):
    """
    Email inconnu, compte inactif ou sans mot de passe, ou mot de passe faux.

    Le message est volontairement identique dans tous les cas.
    """

    def __init__(self):
        super().__init__(detail="Invalid credentials")


class TokenRejectedError(BerthCareException):
    """
    Jeton JWT refusé.

    `reason` vaut invalid, expired, not_found, revoked ou device_mismatch.
    Les jetons révoqués ou présentés depuis un autre appareil donnent 403,
    les autres 401.
    """

    FORBIDDEN_REASONS = frozenset({"revoked", "device_mismatch"})

    def __init__(self, reason: str):
        self.reason = reason
        forbidden = reason in self.FORBIDDEN_REASONS
        super().__init__(
            detail=f"Token rejected: {reason}",
            status_code=403 if forbidden else 401,
            title="Forbidden" if forbidden else "Unauthorized",
            reason=reason,
        )
