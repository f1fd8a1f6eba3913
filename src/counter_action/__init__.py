"""
src/counter_action — Abacus counter operations for GitHub Actions workflows.

Module layout
-------------
config.py           — retry policy, host inputs, output fields (service
                      contract re-exported from config/service_config.py)
errors.py           — error taxonomy and retry categories
validator.py        — input validation, integer parsing
request_builder.py  — URL, method and header construction
retry.py            — HTTP execution with bounded exponential backoff
parser.py           — body decoding, error extraction, output projection
host.py             — ActionHost protocol and the GitHub Actions adapter
runner.py           — orchestration and process entry point

Public interface
----------------
Run one operation through a host:
    run(host)
    main()

Build and execute a request directly:
    build_request(validate_inputs(raw_inputs))
    request_with_retries(spec)
    interpret_response(response, operation)
"""

from .errors import (
    CounterActionError,
    NetworkError,
    RateLimitError,
    TerminalError,
    TransientServerError,
    ValidationError,
)
from .host import ActionHost, GitHubActionsHost
from .parser import CounterResult, interpret_response
from .request_builder import RequestSpec, build_request
from .retry import request_with_retries
from .runner import main, run
from .validator import CounterInputs, validate_inputs

__all__ = [
    # Entry points
    "run",
    "main",
    # Pipeline stages
    "validate_inputs",
    "build_request",
    "request_with_retries",
    "interpret_response",
    # Types
    "ActionHost",
    "GitHubActionsHost",
    "CounterInputs",
    "CounterResult",
    "RequestSpec",
    # Errors
    "CounterActionError",
    "ValidationError",
    "NetworkError",
    "RateLimitError",
    "TransientServerError",
    "TerminalError",
]
