"""
Counter service description (Abacus, https://abacus.jasoncameron.dev).

This is the AUTHORITATIVE source for the remote service contract.
src/counter_action/config.py imports from here; do not maintain parallel
copies.

ENVIRONMENT VARIABLES (optional):
    ABACUS_BASE_URL     — override the service origin (e.g. a self-hosted
                          Abacus instance); a trailing slash is stripped
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Service origin
# ---------------------------------------------------------------------------

DEFAULT_BASE_URL: str = "https://abacus.jasoncameron.dev"
BASE_URL_ENV: str = "ABACUS_BASE_URL"

# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------
#
# Every operation maps to GET|POST {origin}/{operation}/{namespace}/{key}.
#   read   → GET, no credential
#   admin  → POST, Authorization: Bearer <admin_key>

READ_OPERATIONS: tuple[str, ...] = ("hit", "create", "get", "info")
ADMIN_OPERATIONS: tuple[str, ...] = ("set", "update", "reset", "delete")
OPERATIONS: tuple[str, ...] = READ_OPERATIONS + ADMIN_OPERATIONS

# Operations that carry a query parameter, and its name
QUERY_PARAMETERS: dict[str, str] = {
    "create": "initializer",
    "set": "value",
    "update": "value",
}

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

# Applied independently to namespace and key.
NAME_PATTERN: str = r"^[A-Za-z0-9_.-]{3,64}$"

# ---------------------------------------------------------------------------
# Headers
# ---------------------------------------------------------------------------

ACCEPT_HEADER: dict[str, str] = {"Accept": "application/json"}
AUTH_SCHEME: str = "Bearer"
