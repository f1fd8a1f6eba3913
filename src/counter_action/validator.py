"""
Input validation for counter operations.

No I/O occurs here; every function is a pure check or conversion of the
raw strings supplied by the host, so validation always completes before any
request is built.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from .config import ADMIN_OPERATIONS, INPUT_DEFAULTS, NAME_PATTERN, OPERATIONS
from .errors import ValidationError

NAME_RE = re.compile(NAME_PATTERN)

# Operations whose URL carries ?value=N
VALUE_OPERATIONS: frozenset[str] = frozenset({"set", "update"})


@dataclass(frozen=True)
class CounterInputs:
    """Validated caller inputs for a single invocation."""

    operation: str
    namespace: str
    key: str
    initializer: int | None = None
    value: int | None = None
    admin_key: str | None = None


def require_non_empty(name: str, value: str | None) -> str:
    """
    Reject missing or blank inputs.

    Args:
        name: Input name, used in the error message.
        value: Raw input string.

    Returns:
        The value unchanged.

    Raises:
        ValidationError: ``value`` is ``None``, empty, or whitespace only.
    """
    if not value or not value.strip():
        raise ValidationError(f"Missing required input: {name}")
    return value


def validate_name(kind: str, value: str) -> str:
    """
    Check a namespace or key against the identifier pattern.

    Args:
        kind: ``'namespace'`` or ``'key'``.
        value: Candidate identifier.

    Returns:
        The value unchanged.

    Raises:
        ValidationError: ``value`` is not 3–64 characters of
                         ``[A-Za-z0-9_.-]``.  The message quotes ``value``.
    """
    if not NAME_RE.fullmatch(value):
        raise ValidationError(
            f"Invalid {kind}: must match {NAME_PATTERN} (got \"{value}\")"
        )
    return value


def parse_integer(name: str, raw: str | None) -> int:
    """
    Parse a raw input string as a finite integer.

    Surrounding whitespace is ignored.  Integral float spellings such as
    ``"5.0"`` or ``"1e3"`` are accepted; fractional, non-finite, and
    non-numeric strings are not, nor are digit separators (``1_000``) or
    non-ASCII digits.

    Args:
        name: Input name, used in the error message.
        raw: Raw input string.

    Returns:
        Parsed integer.

    Raises:
        ValidationError: ``raw`` is not a finite integer.
    """
    text = (raw or "").strip()
    error = ValidationError(f"Invalid {name}: expected integer, got \"{raw}\"")
    if not text or not text.isascii() or "_" in text:
        raise error

    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        raise error from None

    if not math.isfinite(number) or not number.is_integer():
        raise error
    return int(number)


def validate_operation(raw: str | None) -> str:
    """
    Resolve the requested operation, defaulting to ``hit``.

    Raises:
        ValidationError: The operation is not one of the eight supported.
    """
    operation = (raw or "").strip() or INPUT_DEFAULTS["operation"]
    if operation not in OPERATIONS:
        raise ValidationError(
            f"Invalid operation: \"{operation}\" "
            f"(expected one of: {', '.join(OPERATIONS)})"
        )
    return operation


def validate_inputs(raw: dict[str, str | None]) -> CounterInputs:
    """
    Validate a full set of raw host inputs.

    Checks run in a fixed order so the first problem reported is stable:
    operation, namespace/key presence, namespace/key pattern, admin
    credential (admin operations), value presence (set/update), then
    integer parsing.

    Args:
        raw: Mapping of input name → raw string (missing keys are treated
             as empty).

    Returns:
        :class:`CounterInputs` ready for the request builder.

    Raises:
        ValidationError: On the first failing check.
    """
    operation = validate_operation(raw.get("operation"))

    namespace = require_non_empty("namespace", raw.get("namespace"))
    key = require_non_empty("key", raw.get("key"))
    validate_name("namespace", namespace)
    validate_name("key", key)

    admin_key = raw.get("admin_key") or None
    if operation in ADMIN_OPERATIONS:
        require_non_empty("admin_key", admin_key)

    value_raw = raw.get("value")
    if operation in VALUE_OPERATIONS and (not value_raw or not value_raw.strip()):
        raise ValidationError(
            f"Missing required input: value (required for operation={operation})"
        )

    initializer = None
    if operation == "create":
        initializer_raw = raw.get("initializer") or INPUT_DEFAULTS["initializer"]
        initializer = parse_integer("initializer", initializer_raw)

    value = parse_integer("value", value_raw) if operation in VALUE_OPERATIONS else None

    return CounterInputs(
        operation=operation,
        namespace=namespace,
        key=key,
        initializer=initializer,
        value=value,
        admin_key=admin_key,
    )
