"""Logging utilities for the prismcentral_solver package."""

import logging
import time
from contextvars import ContextVar, Token

# NullHandler on root logger (library best practice)
_root = logging.getLogger("prismcentral_solver")
_root.addHandler(logging.NullHandler())

# Context variable for the challenge being solved by the current request
_current_challenge: ContextVar[str | None] = ContextVar("current_challenge", default=None)


def set_challenge(uid: str | None) -> Token[str | None]:
    """Set the current challenge uid for logging context.

    Args:
        uid: The uid of the challenge request being handled.

    Returns:
        Token to reset the context.
    """
    return _current_challenge.set(uid)


def reset_challenge(token: Token[str | None]) -> None:
    """Reset challenge context.

    Args:
        token: Token from set_challenge() call.
    """
    _current_challenge.reset(token)


def get_challenge_extra() -> dict[str, str]:
    """Get challenge info for log extra fields.

    Returns:
        Dict with 'challenge_uid', or empty dict when no challenge is active.
    """
    uid = _current_challenge.get()
    if not uid:
        return {}
    return {"challenge_uid": uid}


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the prismcentral_solver namespace.

    Args:
        name: The module name (typically __name__).

    Returns:
        A logger instance for the module.
    """
    return logging.getLogger(name)


class Timer:
    """Context manager for timing operations.

    Usage:
        with Timer() as t:
            # do work
        print(f"Elapsed: {t.elapsed_ms}ms")
    """

    def __init__(self) -> None:
        self.elapsed_ms: float = 0
        self._start: float = 0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: object) -> None:
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
