"""
Execution configuration: service constants, retry policy, host inputs and
output field lists.

All constants used across the counter_action modules are centralized here so
that configuration is separated from logic.  The service contract itself is
defined in config/service_config.py and re-exported below.
"""

from __future__ import annotations

import os

from config.service_config import (
    ACCEPT_HEADER,
    ADMIN_OPERATIONS,
    AUTH_SCHEME,
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    NAME_PATTERN,
    OPERATIONS,
    QUERY_PARAMETERS,
    READ_OPERATIONS,
)

__all__ = [
    "ACCEPT_HEADER",
    "ADMIN_OPERATIONS",
    "AUTH_SCHEME",
    "DEFAULT_BASE_URL",
    "INITIAL_BACKOFF_MS",
    "INPUT_DEFAULTS",
    "INPUT_NAMES",
    "MAX_ATTEMPTS",
    "MAX_BACKOFF_MS",
    "NAME_PATTERN",
    "OPERATIONS",
    "OPERATION_OUTPUT_FIELDS",
    "QUERY_PARAMETERS",
    "READ_OPERATIONS",
    "REQUEST_TIMEOUT_SECONDS",
    "SECRET_OUTPUT_FIELDS",
    "normalize_base_url",
    "resolve_base_url",
]


def normalize_base_url(url: str) -> str:
    """Strip a single trailing slash so paths can be appended verbatim."""
    return url[:-1] if url.endswith("/") else url


def resolve_base_url() -> str:
    """
    Return the service origin, honoring the ``ABACUS_BASE_URL`` override.

    Returns:
        Normalized origin without a trailing slash.
    """
    return normalize_base_url(os.getenv(BASE_URL_ENV) or DEFAULT_BASE_URL)


# ---------------------------------------------------------------------------
# Retry policy (fixed; not exposed to callers)
# ---------------------------------------------------------------------------

MAX_ATTEMPTS: int = 5            # physical attempts, including the first
INITIAL_BACKOFF_MS: int = 500    # wait before the second attempt
MAX_BACKOFF_MS: int = 8000       # doubling stops here
REQUEST_TIMEOUT_SECONDS: int = 30  # per-attempt HTTP timeout

# ---------------------------------------------------------------------------
# Host inputs
# ---------------------------------------------------------------------------

INPUT_NAMES: tuple[str, ...] = (
    "operation",
    "namespace",
    "key",
    "initializer",
    "value",
    "admin_key",
)

# Applied when the host supplies an empty string
INPUT_DEFAULTS: dict[str, str] = {
    "operation": "hit",
    "initializer": "0",
}

# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

# `value` is emitted for every operation; these are emitted in addition.
OPERATION_OUTPUT_FIELDS: dict[str, tuple[str, ...]] = {
    "create": ("namespace", "key", "admin_key"),
    "info": ("exists", "expires_in", "expires_str", "full_key", "is_genuine"),
    "delete": ("status", "message"),
}

# Output fields holding admin credentials; masked before emission
SECRET_OUTPUT_FIELDS: frozenset[str] = frozenset({"admin_key"})
