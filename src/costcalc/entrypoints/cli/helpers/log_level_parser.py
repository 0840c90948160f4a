"""Helpers for parsing logger-level CLI options.

This module provides utilities used by the CLI to parse options of the
form NAME=LEVEL (repeatable or comma/space-separated). It normalizes input
values into individual items and converts/validates textual log level names
into the corresponding numeric logging levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Normalize an input value into a flat list of items.

    Splits the input on commas and whitespace and removes empty fragments.
    Accepts either a single string (e.g. from an environment variable) or a
    sequence of strings (as provided by repeatable Click options).

    Args:
        value: The option value from Click.

    Returns:
        list[str]: A flat list of non-empty item strings.
    """
    parts = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for part in parts:
        items.extend(s for s in re.split(r"[,\s]+", part) if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI. Each
    item must be of the form NAME=LEVEL where LEVEL is a standard logging level
    name (e.g. DEBUG, INFO, WARNING).

    Args:
        ctx: Click context (passed by Click, not used here).
        param: Click parameter (passed by Click, not used here).
        value: The raw option value(s); None when neither the option nor its
            default supplies one.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value or ()):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
