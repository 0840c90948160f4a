"""COSTCALC ``calculate`` command - one non-interactive calculation.

All numeric range checks are left to the engine; a rejected value is
reported as a usage error pointing at the matching option.

Examples
    $ costcalc calculate --cost 100 --quantity 3 --delivery 20 --mode custom --tax 8 --discount 10
    $ costcalc calculate --cost 50 -n 1 --summary-only
"""

from __future__ import annotations

import logging

import click

from costcalc.config import CUSTOM_DISCOUNT_MAX_PERCENT, CUSTOM_TAX_MAX_PERCENT
from costcalc.domain.calculation import DEFAULT_ITEM_NAME
from costcalc.domain.currency import CurrencyFormat
from costcalc.domain.errors import DomainError, ValidationError

from .modes import (
    CalculationMode,
    ItemEntry,
    display_results,
    pass_currency,
    run_calculation,
)

logger = logging.getLogger(__name__)

# engine field -> CLI option, for error hints
OPTION_HINTS = {
    "item_name": "'--name'",
    "cost_per_item": "'--cost'",
    "quantity": "'--quantity' / '-n'",
    "delivery_cost": "'--delivery'",
    "tax_rate": "'--tax'",
    "discount_rate": "'--discount'",
}


@click.command()
@click.option(
    "--name",
    default=DEFAULT_ITEM_NAME,
    show_default=True,
    help="Item label shown in the report.",
)
@click.option(
    "--cost",
    "cost_per_item",
    type=float,
    required=True,
    help="Cost per item (at least 0.01).",
)
@click.option(
    "--quantity",
    "-n",
    "quantity",
    type=int,
    required=True,
    help="Number of items (at least 1).",
)
@click.option(
    "--delivery",
    "delivery_cost",
    type=float,
    default=0.0,
    show_default=True,
    help="Delivery charges (0 for free delivery).",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in CalculationMode], case_sensitive=False),
    default=CalculationMode.BASIC.value,
    show_default=True,
    help="basic: no tax; standard: 8% tax; custom: --tax and --discount.",
)
@click.option(
    "--tax",
    "tax_percent",
    type=click.FloatRange(0.0, CUSTOM_TAX_MAX_PERCENT),
    default=None,
    help="Tax percentage for custom mode (0-25).",
)
@click.option(
    "--discount",
    "discount_percent",
    type=click.FloatRange(0.0, CUSTOM_DISCOUNT_MAX_PERCENT),
    default=None,
    help="Discount percentage for custom mode (0-50).",
)
@click.option(
    "--summary-only",
    is_flag=True,
    default=False,
    help="Print only the one-line summary.",
)
@pass_currency
def calculate(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    currency: CurrencyFormat,
    name: str,
    cost_per_item: float,
    quantity: int,
    delivery_cost: float,
    mode: str,
    tax_percent: float | None,
    discount_percent: float | None,
    summary_only: bool,
) -> None:
    """Calculate the total cost of an item and print the breakdown."""
    selected = CalculationMode(mode.lower())
    if selected is not CalculationMode.CUSTOM and (
        tax_percent is not None or discount_percent is not None
    ):
        raise click.UsageError("--tax and --discount require --mode custom.")

    item = ItemEntry(name, cost_per_item, quantity, delivery_cost)
    try:
        engine = run_calculation(
            selected, item, tax_percent or 0.0, discount_percent or 0.0
        )
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint=OPTION_HINTS[exc.field]) from exc
    except DomainError as exc:
        raise click.ClickException(str(exc)) from exc

    logger.info("Calculated %s in %s mode", engine.item_name, selected.value)
    display_results(engine, currency, summary_only=summary_only)
