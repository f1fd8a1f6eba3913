"""
Error taxonomy for counter operations.

Every failure surfaces to the host as a single human-readable message, so
each class carries its message in ``str(exc)``.  Retry decisions are made on
the *category* of a failure:

- ``ValidationError``       — bad input; raised before any network activity
- ``NetworkError``          — the exchange could not complete; retried
- ``RateLimitError``        — HTTP 429; retried, honoring Retry-After
- ``TransientServerError``  — HTTP 5xx; retried with plain backoff
- ``TerminalError``         — any non-2xx response no longer subject to retry

``RateLimitError`` and ``TransientServerError`` label retryable responses;
once the attempt ceiling is reached those responses are reported through
``TerminalError`` like any other non-2xx status.
"""

from __future__ import annotations


class CounterActionError(Exception):
    """Base class for every error raised by counter_action."""

    category = "other"


class ValidationError(CounterActionError):
    """Malformed or missing caller input."""

    category = "validation"


class NetworkError(CounterActionError):
    """The HTTP exchange could not complete (connection error, timeout)."""

    category = "network"


class RateLimitError(CounterActionError):
    """The service answered 429 Too Many Requests."""

    category = "rate_limit"


class TransientServerError(CounterActionError):
    """The service answered with a 5xx status."""

    category = "server_error"


class TerminalError(CounterActionError):
    """A non-2xx response that will not be retried."""

    category = "terminal"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
