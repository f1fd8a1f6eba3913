"""
Request construction: operation → URL, HTTP method, and headers.

Pure functions only; nothing here performs I/O.  The admin credential is
placed in the Authorization header and never in the URL.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from .config import (
    ACCEPT_HEADER,
    ADMIN_OPERATIONS,
    AUTH_SCHEME,
    QUERY_PARAMETERS,
    normalize_base_url,
    resolve_base_url,
)
from .errors import ValidationError
from .validator import CounterInputs


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to issue one counter request (built once, read-only)."""

    operation: str
    namespace: str
    key: str
    url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict, repr=False)  # may hold the credential
    initializer: int | None = None
    value: int | None = None


def is_admin_operation(operation: str) -> bool:
    return operation in ADMIN_OPERATIONS


def method_for(operation: str) -> str:
    """Read operations use GET; admin operations use POST."""
    return "POST" if is_admin_operation(operation) else "GET"


def build_url(
    operation: str,
    namespace: str,
    key: str,
    initializer: int | None = None,
    value: int | None = None,
    base_url: str | None = None,
) -> str:
    """
    Build ``{origin}/{operation}/{namespace}/{key}[?param=N]``.

    Namespace and key are percent-encoded individually with no safe
    characters, so a ``/`` can never introduce an extra path segment.

    Args:
        operation: One of the supported operations.
        namespace: Validated namespace.
        key: Validated key.
        initializer: Starting value for ``create`` (defaults to 0).
        value: Target value for ``set`` / ``update``.
        base_url: Service origin; resolved from config when omitted.

    Returns:
        Absolute URL string.
    """
    origin = normalize_base_url(base_url) if base_url else resolve_base_url()
    url = f"{origin}/{operation}/{quote(namespace, safe='')}/{quote(key, safe='')}"

    param = QUERY_PARAMETERS.get(operation)
    if param == "initializer":
        return f"{url}?{urlencode({param: int(initializer or 0)})}"
    if param == "value" and value is not None:
        return f"{url}?{urlencode({param: int(value)})}"
    return url


def build_headers(operation: str, admin_key: str | None = None) -> dict[str, str]:
    """
    Construct request headers.

    Args:
        operation: One of the supported operations.
        admin_key: Admin credential; required for admin operations.

    Returns:
        Dict of HTTP header name → value pairs.

    Raises:
        ValidationError: An admin operation was requested without a credential.
    """
    headers = dict(ACCEPT_HEADER)
    if is_admin_operation(operation):
        if not admin_key:
            raise ValidationError("Missing required input: admin_key")
        headers["Authorization"] = f"{AUTH_SCHEME} {admin_key}"
    return headers


def build_request(inputs: CounterInputs, base_url: str | None = None) -> RequestSpec:
    """
    Map validated inputs to a :class:`RequestSpec`.

    Args:
        inputs: Output of :func:`validator.validate_inputs`.
        base_url: Optional service origin override.

    Returns:
        Frozen request description for the retry executor.
    """
    return RequestSpec(
        operation=inputs.operation,
        namespace=inputs.namespace,
        key=inputs.key,
        url=build_url(
            inputs.operation,
            inputs.namespace,
            inputs.key,
            initializer=inputs.initializer,
            value=inputs.value,
            base_url=base_url,
        ),
        method=method_for(inputs.operation),
        headers=build_headers(inputs.operation, inputs.admin_key),
        initializer=inputs.initializer,
        value=inputs.value,
    )
