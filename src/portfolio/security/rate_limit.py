from __future__ import annotations

"""Fixed-window rate limiting for contact form submissions.

Windows are kept in memory per ``(action, client)`` pair. Expired windows are
pruned on every check, so the store only holds clients seen within the
current window.
"""

import os
import threading
import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


class RateLimitExceeded(Exception):
    def __init__(self, retry_after_seconds: int) -> None:
        super().__init__("Rate limit exceeded")
        self.retry_after_seconds = retry_after_seconds


@dataclass
class _Window:
    hits: int
    expires_at: float


class WindowLimiter:
    def __init__(self, clock=time.monotonic) -> None:
        self._clock = clock
        self._windows: Dict[Tuple[str, str], _Window] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._windows)

    def hit(self, action: str, client: str, *, limit: int, window_seconds: int) -> None:
        """Count one hit; raises RateLimitExceeded when the window is full."""
        now = self._clock()
        with self._lock:
            self._prune(now)
            window = self._windows.get((action, client))
            if window is None:
                self._windows[(action, client)] = _Window(hits=1, expires_at=now + window_seconds)
                return
            if window.hits >= limit:
                raise RateLimitExceeded(max(int(window.expires_at - now), 1))
            window.hits += 1

    def _prune(self, now: float) -> None:
        expired = [key for key, window in self._windows.items() if window.expires_at <= now]
        for key in expired:
            del self._windows[key]

    def clear(self) -> None:
        with self._lock:
            self._windows.clear()


_LIMITER = WindowLimiter()


def get_limiter() -> WindowLimiter:
    return _LIMITER


def rate_limit_action(
    key: str,
    identifier: str,
    *,
    limit_env: str,
    window_env: str,
    default_limit: int,
    default_window_seconds: int,
    limiter: Optional[WindowLimiter] = None,
) -> None:
    """Count one action for ``(key, identifier)`` using env-tunable limits.

    Raises:
        RateLimitExceeded once the limit for the current window is used up.
    """

    if _rate_limiting_disabled():
        return
    (limiter or _LIMITER).hit(
        key,
        identifier,
        limit=_env_int(limit_env, default_limit),
        window_seconds=_env_int(window_env, default_window_seconds),
    )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _rate_limiting_disabled() -> bool:
    flag = os.getenv("PORTFOLIO_RATE_LIMIT_DISABLED")
    return bool(flag and flag.lower() in {"1", "true", "yes", "on"})


def reset_rate_limits() -> None:
    """Clear in-memory windows (useful for tests)."""

    _LIMITER.clear()
