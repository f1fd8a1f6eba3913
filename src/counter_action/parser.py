"""
Response decoding, error extraction, and output projection.

No network I/O occurs here; every function is a pure transformation of a
response body or decoded payload, so each can be unit tested directly.
Payload fields are read defensively: an absent or null field is omitted
from the outputs, never emitted as an empty string, zero, or false.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

from .config import OPERATION_OUTPUT_FIELDS, SECRET_OUTPUT_FIELDS
from .errors import TerminalError


@dataclass(frozen=True)
class CounterResult:
    """Successful outcome of one counter operation."""

    operation: str
    status_code: int
    payload: dict[str, Any] = field(repr=False)
    outputs: dict[str, str] = field(default_factory=dict, repr=False)
    secrets: tuple[str, ...] = field(default=(), repr=False)


def decode_payload(text: str) -> dict[str, Any]:
    """
    Decode a response body into a payload mapping.

    - empty body → ``{}``
    - JSON object → the decoded dict
    - invalid JSON → ``{"error": text}`` so the raw body surfaces as the
      error message
    - valid JSON that is not an object → ``{}`` (no fields; errors fall back
      to the status-code message)

    Args:
        text: Full response body as text.

    Returns:
        Payload dict.
    """
    if not text:
        return {}
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return {"error": text}
    if not isinstance(parsed, dict):
        return {}
    return parsed


def extract_error_message(payload: dict[str, Any], status_code: int) -> str:
    """Return the payload's ``error`` string, or a generic status message."""
    error = payload.get("error")
    if isinstance(error, str):
        return error
    return f"Request failed with status {status_code}"


def format_output_value(value: Any) -> str:
    """
    Render a payload value as host output text.

    Booleans become ``true`` / ``false``, integral floats lose their
    ``.0``, and nested structures are emitted as compact JSON.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def project_outputs(
    operation: str,
    payload: dict[str, Any],
) -> tuple[dict[str, str], tuple[str, ...]]:
    """
    Select the named outputs for ``operation`` from a success payload.

    ``value`` is emitted for every operation when present; ``create``,
    ``info`` and ``delete`` add their own fields (see
    ``OPERATION_OUTPUT_FIELDS``).

    Args:
        operation: Operation that produced ``payload``.
        payload: Decoded success payload.

    Returns:
        Tuple of (outputs: name → text, secrets: output values that must be
        masked before emission).
    """
    outputs: dict[str, str] = {}
    secrets: list[str] = []

    for name in ("value",) + OPERATION_OUTPUT_FIELDS.get(operation, ()):
        raw = payload.get(name)
        if raw is None:
            continue
        outputs[name] = format_output_value(raw)
        if name in SECRET_OUTPUT_FIELDS and isinstance(raw, str):
            secrets.append(raw)

    return outputs, tuple(secrets)


def interpret_response(response: requests.Response, operation: str) -> CounterResult:
    """
    Turn the final HTTP response into a result or a terminal error.

    Args:
        response: Response returned by :func:`retry.request_with_retries`.
        operation: Operation name, appended to error messages for context.

    Returns:
        :class:`CounterResult` for a 2xx response.

    Raises:
        TerminalError: Any non-2xx status.  The message is the payload's
                       ``error`` field (or a generic status message)
                       followed by ``(operation=<op>)``.
    """
    payload = decode_payload(response.text)

    if not 200 <= response.status_code <= 299:
        message = extract_error_message(payload, response.status_code)
        raise TerminalError(
            f"{message} (operation={operation})",
            status_code=response.status_code,
        )

    outputs, secrets = project_outputs(operation, payload)
    return CounterResult(
        operation=operation,
        status_code=response.status_code,
        payload=payload,
        outputs=outputs,
        secrets=secrets,
    )
