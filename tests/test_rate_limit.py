import threading

import pytest

from src.portfolio.security.rate_limit import (
    RateLimitExceeded,
    WindowLimiter,
    rate_limit_action,
)


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_limit_blocks_and_reports_retry_after():
    clock = FakeClock()
    limiter = WindowLimiter(clock=clock)
    limiter.hit("contact", "1.2.3.4", limit=2, window_seconds=60)
    limiter.hit("contact", "1.2.3.4", limit=2, window_seconds=60)

    clock.now += 15
    with pytest.raises(RateLimitExceeded) as exc:
        limiter.hit("contact", "1.2.3.4", limit=2, window_seconds=60)
    assert exc.value.retry_after_seconds == 45


def test_window_reopens_after_expiry():
    clock = FakeClock()
    limiter = WindowLimiter(clock=clock)
    limiter.hit("contact", "ip", limit=1, window_seconds=10)
    clock.now += 10
    limiter.hit("contact", "ip", limit=1, window_seconds=10)


def test_expired_windows_are_evicted():
    clock = FakeClock()
    limiter = WindowLimiter(clock=clock)
    for i in range(1000):
        limiter.hit("contact", f"10.0.{i // 256}.{i % 256}", limit=5, window_seconds=60)
    assert len(limiter) == 1000

    clock.now += 61
    limiter.hit("contact", "192.168.0.1", limit=5, window_seconds=60)
    assert len(limiter) == 1


def test_concurrent_hits_never_exceed_limit():
    limiter = WindowLimiter()
    allowed = []
    blocked = []

    def worker():
        try:
            limiter.hit("contact", "shared", limit=10, window_seconds=60)
            allowed.append(1)
        except RateLimitExceeded:
            blocked.append(1)

    threads = [threading.Thread(target=worker) for _ in range(50)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(allowed) == 10
    assert len(blocked) == 40


def test_rate_limit_action_reads_env(monkeypatch):
    monkeypatch.setenv("TEST_LIMIT", "1")
    monkeypatch.setenv("TEST_WINDOW", "bogus")
    limiter = WindowLimiter()
    kwargs = dict(limit_env="TEST_LIMIT", window_env="TEST_WINDOW", default_limit=5, default_window_seconds=30)

    rate_limit_action("contact", "ip", limiter=limiter, **kwargs)
    with pytest.raises(RateLimitExceeded):
        rate_limit_action("contact", "ip", limiter=limiter, **kwargs)
