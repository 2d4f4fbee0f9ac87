"""Tests unitaires pour les exceptions RFC 9457."""

import pytest

from app.core.exceptions import (
    BerthCareException,
    ConstraintViolationError,
    InvalidFilterError,
    NotFoundError,
    ProblemDetail,
    RecordNotFoundError,
    ServiceUnavailableError,
)


class TestBerthCareException:
    def test_defaults(self):
        exc = BerthCareException()

        assert exc.status_code == 500
        assert exc.problem_detail.title == "Internal Server Error"
        assert exc.problem_detail.type == "about:blank"
        assert str(exc) == "Internal Server Error"

    def test_status_override_and_extensions(self):
        """Les extensions sont conservées dans le ProblemDetail."""
        exc = BerthCareException(
            detail="Quota exceeded", status_code=429, title="Too Many Requests", retry_after=30
        )

        assert exc.status_code == 429
        assert exc.problem_detail.status == 429
        dumped = exc.problem_detail.model_dump(by_alias=True, exclude_none=True)
        assert dumped["retry_after"] == 30
        assert dumped["detail"] == "Quota exceeded"

    @pytest.mark.parametrize(
        ("exc_class", "status"),
        [(NotFoundError, 404), (ServiceUnavailableError, 503)],
    )
    def test_subclass_status(self, exc_class, status):
        exc = exc_class(detail="x")
        assert exc.status_code == status
        assert isinstance(exc.problem_detail, ProblemDetail)


class TestRepositoryErrors:
    def test_record_not_found(self):
        exc = RecordNotFoundError("Visit", "abc-123", instance="/api/v1/visits/abc-123")

        assert exc.status_code == 404
        assert exc.entity == "Visit"
        assert exc.record_id == "abc-123"
        assert exc.problem_detail.detail == "Visit abc-123 not found"
        assert exc.problem_detail.instance == "/api/v1/visits/abc-123"
        assert isinstance(exc, NotFoundError)

    def test_constraint_violation(self):
        exc = ConstraintViolationError("Caregiver", "UNIQUE constraint failed: caregivers.email")

        assert exc.status_code == 409
        assert exc.problem_detail.title == "Constraint Violation"
        assert "caregivers.email" in exc.problem_detail.detail

    def test_invalid_filter_sorts_fields(self):
        exc = InvalidFilterError("Client", ["zip", "colour"])

        assert exc.status_code == 422
        assert exc.fields == ["zip", "colour"]
        assert exc.problem_detail.detail == "Unknown filter field(s) for Client: colour, zip"

    def test_problem_detail_request_id_alias(self):
        problem = ProblemDetail(title="Not Found", status=404, request_id="req-1")
        assert problem.model_dump(by_alias=True)["requestId"] == "req-1"
