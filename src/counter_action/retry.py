"""
HTTP execution with bounded exponential backoff.

Retry schedule (milliseconds, capped):
  500 → 1000 → 2000 → 4000 → 8000 → 8000 ...

At most ``MAX_ATTEMPTS`` physical attempts are made.  An attempt is retried
when:
  - the exchange fails at the network level (``requests.RequestException``)
  - the service answers 429 (wait honors a ``Retry-After`` header in ms)
  - the service answers 5xx (wait is always the stored backoff)

Any other response, and a 429/5xx on the final attempt, is returned as-is;
status handling past that point belongs to the response parser.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import requests

from .config import (
    INITIAL_BACKOFF_MS,
    MAX_ATTEMPTS,
    MAX_BACKOFF_MS,
    REQUEST_TIMEOUT_SECONDS,
)
from .errors import CounterActionError, NetworkError, RateLimitError, TransientServerError
from .request_builder import RequestSpec


# ---------------------------------------------------------------------------
# Retry state
# ---------------------------------------------------------------------------

@dataclass
class RetryState:
    """Attempt counter and stored backoff for one logical request."""

    attempt: int = 1
    backoff_ms: int = INITIAL_BACKOFF_MS

    @property
    def exhausted(self) -> bool:
        return self.attempt >= MAX_ATTEMPTS

    def advance(self) -> None:
        """Move to the next attempt, doubling the stored backoff up to the cap."""
        self.attempt += 1
        self.backoff_ms = next_backoff(self.backoff_ms)


# ---------------------------------------------------------------------------
# Backoff helpers
# ---------------------------------------------------------------------------

def next_backoff(backoff_ms: int) -> int:
    """Return ``backoff_ms`` doubled, capped at ``MAX_BACKOFF_MS``."""
    return min(backoff_ms * 2, MAX_BACKOFF_MS)


def parse_retry_after(raw: str | None) -> int | None:
    """
    Parse a ``Retry-After`` header value in milliseconds.

    Args:
        raw: Header value, or ``None`` when the header is absent.

    Returns:
        Non-negative integer wait, or ``None`` when the header is absent or
        not a non-negative integer (the caller then uses its own backoff).
    """
    if raw is None:
        return None
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    return int(text)


def wait_milliseconds(ms: int) -> None:
    """Block for ``ms`` milliseconds."""
    time.sleep(ms / 1000)


def classify_response(response: requests.Response) -> type[CounterActionError] | None:
    """
    Map a response to its retry category.

    Returns:
        ``RateLimitError`` for 429, ``TransientServerError`` for 5xx, or
        ``None`` when the response is final.
    """
    if response.status_code == 429:
        return RateLimitError
    if 500 <= response.status_code <= 599:
        return TransientServerError
    return None


def _drain(response: requests.Response) -> None:
    """Read and discard the body so the connection is released."""
    try:
        response.content  # noqa: B018
    except requests.RequestException:
        pass  # body unreadable; closing below still releases the connection
    finally:
        response.close()


# ---------------------------------------------------------------------------
# Main retry loop
# ---------------------------------------------------------------------------

def request_with_retries(spec: RequestSpec) -> requests.Response:
    """
    Execute ``spec`` with automatic retry on rate limits and transient errors.

    Attempts are strictly sequential: attempt *n + 1* starts only after
    attempt *n* has completed and its wait has elapsed.  A ``Retry-After``
    value sets the wait for that retry only; the stored backoff keeps
    doubling from its own previous value.

    Args:
        spec: Request description from :func:`request_builder.build_request`.

    Returns:
        The first non-retryable response, or the final attempt's response.

    Raises:
        NetworkError: The exchange failed at the network level on the
                      final attempt (chained to the underlying exception).
    """
    state = RetryState()

    while True:
        try:
            response = requests.request(
                spec.method,
                spec.url,
                headers=spec.headers,
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.RequestException as exc:
            if state.exhausted:
                raise NetworkError(
                    f"Request failed after {state.attempt} attempts: {exc} "
                    f"(operation={spec.operation})"
                ) from exc
            wait_ms = state.backoff_ms
            category = NetworkError.category
        else:
            retry_kind = classify_response(response)
            if retry_kind is None or state.exhausted:
                return response

            wait_ms = state.backoff_ms
            if retry_kind is RateLimitError:
                retry_after = parse_retry_after(response.headers.get("Retry-After"))
                if retry_after is not None:
                    wait_ms = retry_after
            category = f"{retry_kind.category} {response.status_code}"
            _drain(response)

        print(
            f"  Attempt {state.attempt}/{MAX_ATTEMPTS} failed [{category}] "
            f"for operation={spec.operation}; retrying in {wait_ms} ms"
        )
        wait_milliseconds(wait_ms)
        state.advance()
