"""Bounded interactive prompts.

`click.prompt` re-asks forever when conversion fails. These helpers read the
raw text once per attempt, convert it with a Click parameter type, report
the problem, and give up after ``max_attempts`` invalid entries.
"""

import logging
from typing import Any

import click

from .messages import error

logger = logging.getLogger(__name__)


class TooManyAttemptsError(click.ClickException):
    """Raised when the user exhausts the allowed number of invalid entries."""

    def __init__(self, label: str, attempts: int) -> None:
        super().__init__(f"No valid value for {label!r} after {attempts} attempt(s).")
        self.label = label
        self.attempts = attempts


class YesNo(click.ParamType):
    """Parameter type accepting any answer starting with ``y`` or ``n``."""

    name = "y/n"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> bool:
        if isinstance(value, bool):
            return value
        answer = str(value).strip().lower()
        if answer.startswith("y"):
            return True
        if answer.startswith("n"):
            return False
        self.fail("Please enter 'y' for yes or 'n' for no.", param, ctx)


def prompt_value(
    text: str,
    param_type: click.ParamType,
    *,
    max_attempts: int,
    default: str | None = None,
) -> Any:
    """Prompt until ``param_type`` accepts the entry, at most ``max_attempts`` times.

    Args:
        text: Prompt label shown to the user.
        param_type: Click type used to convert and range-check the raw text
            (e.g. ``click.FloatRange(min=0)``).
        max_attempts: Number of entries allowed before giving up.
        default: Raw text used when the user just presses Enter.

    Returns:
        The converted value.

    Raises:
        TooManyAttemptsError: If every attempt is rejected.
    """
    for attempt in range(1, max_attempts + 1):
        raw = click.prompt(
            text, default=default, type=click.STRING, show_default=default is not None
        )
        try:
            return param_type.convert(raw, None, None)
        except click.BadParameter as exc:
            error(exc.message)
            logger.debug(
                "Rejected %r for %r (attempt %d/%d)", raw, text, attempt, max_attempts
            )
    raise TooManyAttemptsError(text, max_attempts)
