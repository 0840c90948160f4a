"""COSTCALC ``interactive`` command - the menu-driven calculator session.

The session shows a welcome banner, then repeatedly asks for a calculation
mode and item details, prints the breakdown, and asks whether to go again.
Every prompt accepts at most ``--max-attempts`` invalid entries before the
session aborts.
"""

from __future__ import annotations

import logging

import click

from costcalc import __version__
from costcalc.config import (
    CUSTOM_DISCOUNT_MAX_PERCENT,
    CUSTOM_TAX_MAX_PERCENT,
    DEFAULT_MAX_ATTEMPTS,
)
from costcalc.domain.calculation import MIN_COST_PER_ITEM, MIN_QUANTITY
from costcalc.domain.currency import CurrencyFormat
from costcalc.domain.errors import DomainError, ValidationError

from .helpers import error, prompt_value, warn
from .helpers.prompts import YesNo
from .modes import (
    MENU,
    CalculationMode,
    ItemEntry,
    completion_note,
    display_results,
    pass_currency,
    run_calculation,
)

logger = logging.getLogger(__name__)

APP_TITLE = "ADVANCED COST CALCULATOR"
BANNER_WIDTH = 60


def _banner(*lines: str) -> None:
    click.echo("=" * BANNER_WIDTH)
    for line in lines:
        click.echo(line)
    click.echo("=" * BANNER_WIDTH)


def _choose_mode(max_attempts: int) -> CalculationMode:
    click.echo("Select Calculation Mode:")
    for number, mode in MENU.items():
        click.echo(f"   {number}. {mode.title}")
    click.echo()
    choice = prompt_value(
        f"Choose mode (1-{len(MENU)})",
        click.IntRange(1, len(MENU)),
        max_attempts=max_attempts,
    )
    return MENU[choice]


def _read_item(currency: CurrencyFormat, max_attempts: int) -> ItemEntry:
    name = click.prompt("Item Name", default="", show_default=False)
    cost = prompt_value(
        f"Cost Per Item ({currency.symbol})",
        click.FloatRange(min=MIN_COST_PER_ITEM),
        max_attempts=max_attempts,
    )
    quantity = prompt_value(
        "Quantity", click.IntRange(min=MIN_QUANTITY), max_attempts=max_attempts
    )
    delivery = prompt_value(
        f"Delivery Cost ({currency.symbol}, 0 for free)",
        click.FloatRange(min=0.0),
        max_attempts=max_attempts,
        default="0",
    )
    return ItemEntry(name, cost, quantity, delivery)


def _read_rates(max_attempts: int) -> tuple[float, float]:
    tax = prompt_value(
        f"Enter tax rate (0-{CUSTOM_TAX_MAX_PERCENT:.0f}%)",
        click.FloatRange(0.0, CUSTOM_TAX_MAX_PERCENT),
        max_attempts=max_attempts,
    )
    discount = prompt_value(
        f"Enter discount rate (0-{CUSTOM_DISCOUNT_MAX_PERCENT:.0f}%)",
        click.FloatRange(0.0, CUSTOM_DISCOUNT_MAX_PERCENT),
        max_attempts=max_attempts,
    )
    return tax, discount


def run_once(currency: CurrencyFormat, max_attempts: int) -> None:
    """Run a single calculation: menu, item prompts, results."""
    mode = _choose_mode(max_attempts)
    item = _read_item(currency, max_attempts)
    tax, discount = (0.0, 0.0)
    if mode is CalculationMode.CUSTOM:
        tax, discount = _read_rates(max_attempts)

    engine = run_calculation(mode, item, tax, discount)
    click.echo(completion_note(mode, engine))
    click.echo()
    display_results(engine, currency)


@click.command()
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_ATTEMPTS,
    show_default=True,
    envvar="COSTCALC_MAX_ATTEMPTS",
    show_envvar=True,
    help="Invalid entries allowed per prompt before the session aborts.",
)
@pass_currency
def interactive(currency: CurrencyFormat, max_attempts: int) -> None:
    """Run the menu-driven calculator until you choose to stop."""
    _banner(f"{APP_TITLE:^{BANNER_WIDTH}}".rstrip(), f"Version {__version__}")
    click.echo("Features: Tax Calculation | Discounts | Detailed Reports")
    click.echo()

    sessions = 0
    while True:
        try:
            run_once(currency, max_attempts)
            sessions += 1
        except ValidationError as exc:
            # prompts check ranges but let infinities through
            error(f"Validation Error: {exc}")
            warn("Please try again with valid inputs.")
        except DomainError as exc:
            error(str(exc))
            warn("Please try again with valid inputs.")
        again = prompt_value(
            "Would you like to perform another calculation? (y/n)",
            YesNo(),
            max_attempts=max_attempts,
        )
        if not again:
            break
        click.echo()

    logger.info("Interactive session finished after %d calculation(s)", sessions)
    click.echo()
    _banner(f"Thank you for using {APP_TITLE}!".center(BANNER_WIDTH).rstrip())
    click.echo("Have a great day!")
