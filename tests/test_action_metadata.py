"""
Checks on action.yml: the step environment matches the runner's inputs and
only the runtime dependency is installed into the workflow's Python.
"""

from __future__ import annotations

import re
from pathlib import Path

from src.counter_action.config import INPUT_NAMES

ACTION_YML = Path(__file__).resolve().parents[1] / "action.yml"


def _install_commands() -> list[str]:
    text = ACTION_YML.read_text(encoding="utf-8")
    return re.findall(r"run: (python -m pip install .+)", text)


def test_install_step_only_fetches_requests():
    """The action's own src/config packages must not land in site-packages."""
    commands = _install_commands()

    assert commands == ['python -m pip install --quiet "requests>=2.31"']
    assert "action_path" not in commands[0]


def test_entry_point_runs_from_action_path():
    text = ACTION_YML.read_text(encoding="utf-8")
    assert "working-directory: ${{ github.action_path }}" in text
    assert "run: python -m src.counter_action.runner" in text


def test_every_input_is_forwarded_to_the_step():
    text = ACTION_YML.read_text(encoding="utf-8")
    for name in INPUT_NAMES:
        assert f"INPUT_{name.upper()}: ${{{{ inputs.{name} }}}}" in text
