"""Tests du limiteur de débit en mémoire."""

import pytest

from app.core.exceptions import TooManyRequestsError
from app.core.rate_limit import RateLimiter


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_limit_per_key():
    limiter = RateLimiter(2, 60, clock=FakeClock())

    limiter.check("10.0.0.1:a@b.ca:dev:/login")
    limiter.check("10.0.0.1:a@b.ca:dev:/login")
    limiter.check("10.0.0.2:a@b.ca:dev:/login")

    with pytest.raises(TooManyRequestsError) as exc_info:
        limiter.check("10.0.0.1:a@b.ca:dev:/login")

    assert exc_info.value.status_code == 429
    assert exc_info.value.problem_detail.detail == "Too many requests"
    assert exc_info.value.problem_detail.retry_after == 60


def test_window_resets():
    clock = FakeClock()
    limiter = RateLimiter(1, 60, clock=clock)
    limiter.check("key")

    clock.now += 61

    limiter.check("key")
    assert limiter.hit("key")[0] == 2


def test_expired_buckets_pruned():
    clock = FakeClock()
    limiter = RateLimiter(5, 60, clock=clock)
    limiter.hit("old")

    clock.now += 120
    limiter.hit("new")

    assert set(limiter._buckets) == {"new"}
