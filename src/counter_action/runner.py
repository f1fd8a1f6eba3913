"""
Entry point: host inputs → validation → request → retries → outputs.

Usage (from project root, inside a GitHub Actions step):
    python -m src.counter_action.runner

Or programmatically:
    from src.counter_action.runner import run
    result = run(host)
"""

from __future__ import annotations

import sys

from .config import INPUT_NAMES
from .host import ActionHost, GitHubActionsHost
from .parser import CounterResult, interpret_response
from .request_builder import build_request, is_admin_operation
from .retry import request_with_retries
from .validator import validate_inputs


def read_inputs(host: ActionHost) -> dict[str, str]:
    """Collect every known input from the host (missing inputs are ``''``)."""
    return {name: host.get_input(name) for name in INPUT_NAMES}


def run(host: ActionHost) -> CounterResult:
    """
    Execute one counter operation against the service.

    The admin credential is masked before the request is built, and a
    returned ``admin_key`` is masked before any output is emitted.

    Args:
        host: Host platform capabilities.

    Returns:
        :class:`CounterResult` whose outputs have been written to ``host``.

    Raises:
        ValidationError: Bad input (no request is sent).
        NetworkError: Every attempt failed at the network level.
        TerminalError: The final response was not 2xx.
    """
    inputs = validate_inputs(read_inputs(host))
    if inputs.admin_key and is_admin_operation(inputs.operation):
        host.set_secret(inputs.admin_key)

    spec = build_request(inputs)
    response = request_with_retries(spec)
    result = interpret_response(response, spec.operation)

    for secret in result.secrets:
        host.set_secret(secret)
    for name, value in result.outputs.items():
        host.set_output(name, value)

    print(
        f"operation={result.operation} namespace={spec.namespace} key={spec.key} "
        f"status={result.status_code} outputs={sorted(result.outputs)}"
    )
    return result


def main(host: ActionHost | None = None) -> int:
    """
    Run once and report any failure through the host.

    Nothing propagates past this boundary: every exception becomes a single
    ``set_failed`` message and a non-zero exit status.

    Returns:
        Process exit status (0 success, 1 failure).
    """
    host = host or GitHubActionsHost()
    try:
        run(host)
    except Exception as exc:
        host.set_failed(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
