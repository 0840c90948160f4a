"""Helpers for invoking the COSTCALC CLI in tests (no tests here)."""

from __future__ import annotations

import re

from click.testing import CliRunner, Result

from costcalc.entrypoints.cli import main

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # strip SGR styling only

# keep test runs from touching the user's log directory
BASE_ARGS = ["--no-flight-recorder", "--no-color"]


def invoke(
    *args: str, input: str | None = None, env: dict[str, str] | None = None  # pylint: disable=redefined-builtin
) -> tuple[Result, str]:
    """Run ``costcalc`` with BASE_ARGS prepended.

    Returns:
        The Click result and its output with ANSI styling removed.
    """
    runner = CliRunner()
    result = runner.invoke(main.costcalc, [*BASE_ARGS, *args], input=input, env=env)
    return result, ANSI_RE.sub("", result.output)
