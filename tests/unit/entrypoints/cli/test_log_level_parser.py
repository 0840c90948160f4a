"""Unit tests for the CLI log level parser.

These tests exercise costcalc.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering default behavior, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from costcalc.entrypoints.cli.helpers.log_level_parser import parse_log_level


def make_ctx():
    """Create a minimal Click context stub (the callback ignores it)."""
    return types.SimpleNamespace()


def test_empty_uses_defaults():
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(make_ctx(), None, ()) == {"click_extra": logging.WARNING}


def test_none_uses_defaults():
    """A missing value behaves like an empty one."""
    assert parse_log_level(make_ctx(), None, None) == {"click_extra": logging.WARNING}


def test_repeated_flags_override_order():
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("costcalc=INFO", "click_extra=ERROR", "costcalc=WARNING")
    out = parse_log_level(make_ctx(), None, value)
    assert out["costcalc"] == logging.WARNING
    assert out["click_extra"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces():
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    value = "costcalc=INFO,  costcalc.domain=DEBUG click_extra=ERROR"
    out = parse_log_level(make_ctx(), None, value)
    assert out["costcalc"] == logging.INFO
    assert out["costcalc.domain"] == logging.DEBUG
    assert out["click_extra"] == logging.ERROR


def test_case_insensitive_levels():
    """Level names should be parsed case-insensitively."""
    out = parse_log_level(make_ctx(), None, ("costcalc=info", "click_extra=WaRnInG"))
    assert out["costcalc"] == logging.INFO
    assert out["click_extra"] == logging.WARNING


def test_invalid_pair_raises():
    """Malformed NAME=LEVEL pairs should raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, ("not-a-pair",))


def test_invalid_level_raises():
    """Unknown level names should raise click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_log_level(make_ctx(), None, ("costcalc=LOUD",))
