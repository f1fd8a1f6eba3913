"""
Host automation platform adapter.

The runner talks to its host only through :class:`ActionHost`: reading
inputs, emitting outputs, masking secrets, and reporting failure.
:class:`GitHubActionsHost` implements it with GitHub Actions workflow
commands; tests substitute an in-memory fake.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class ActionHost(Protocol):
    """Capabilities the runner needs from its host platform."""

    def get_input(self, name: str) -> str: ...

    def set_output(self, name: str, value: str) -> None: ...

    def set_secret(self, value: str) -> None: ...

    def set_failed(self, message: str) -> None: ...


def escape_data(value: str) -> str:
    """Escape a workflow command payload (``%``, CR, LF)."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    """Escape a workflow command property (payload escapes plus ``:`` and ``,``)."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class GitHubActionsHost:
    """
    :class:`ActionHost` backed by the GitHub Actions runner environment.

    - inputs come from ``INPUT_<NAME>`` environment variables, trimmed
    - outputs are appended to the file named by ``GITHUB_OUTPUT``; when that
      variable is unset the legacy ``::set-output`` command is printed
    - secrets are masked with ``::add-mask::``
    - failures are reported with ``::error::``; the exit status is left
      to the entry point
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def get_input(self, name: str) -> str:
        env_name = f"INPUT_{name.replace(' ', '_').upper()}"
        return self._environ.get(env_name, "").strip()

    def set_output(self, name: str, value: str) -> None:
        output_path = self._environ.get("GITHUB_OUTPUT")
        if not output_path:
            print(f"::set-output name={escape_property(name)}::{escape_data(value)}")
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Output delimiter collided with output '{name}'")
        with Path(output_path).open("a", encoding="utf-8") as fh:
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_secret(self, value: str) -> None:
        print(f"::add-mask::{escape_data(value)}")

    def set_failed(self, message: str) -> None:
        print(f"::error::{escape_data(message)}")
