"""Calculation modes offered by the CLI.

Each mode maps user-level choices onto one engine operation:

- ``basic``    - items plus delivery, no tax.
- ``standard`` - items plus delivery with the standard 8% tax.
- ``custom``   - user-supplied tax and discount percentages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import click

from costcalc.config import STANDARD_TAX_RATE
from costcalc.domain.currency import CurrencyFormat
from costcalc.domain.engine import CostCalculationEngine

from .helpers import success


class CalculationMode(Enum):
    """Enumeration of CLI calculation modes."""

    BASIC = "basic"
    STANDARD = "standard"
    CUSTOM = "custom"

    @property
    def title(self) -> str:
        """Menu label for the mode."""
        return MODE_TITLES[self]


MODE_TITLES = {
    CalculationMode.BASIC: "Basic Calculation (Items + Delivery)",
    CalculationMode.STANDARD: "Standard Calculation (with 8% Tax)",
    CalculationMode.CUSTOM: "Advanced Calculation (Custom Tax & Discount)",
}

# menu number -> mode, in display order
MENU = dict(enumerate(CalculationMode, start=1))

# the root group stores the resolved currency format on the context
pass_currency = click.make_pass_decorator(CurrencyFormat, ensure=True)


@dataclass(frozen=True)
class ItemEntry:
    """Raw item details as parsed by the CLI, before engine validation."""

    name: str | None
    cost_per_item: float
    quantity: int
    delivery_cost: float = 0.0


def run_calculation(
    mode: CalculationMode,
    item: ItemEntry,
    tax_percent: float = 0.0,
    discount_percent: float = 0.0,
) -> CostCalculationEngine:
    """Create an engine, store ``item`` and calculate it according to ``mode``.

    Percentages are only used in custom mode.

    Raises:
        ValidationError: If the engine rejects any input.
    """
    engine = CostCalculationEngine.with_item(
        item.name, item.cost_per_item, item.quantity, item.delivery_cost
    )
    match mode:
        case CalculationMode.BASIC:
            engine.set_tax_rate(0.0)
            engine.calculate_cost(item.cost_per_item, item.quantity, item.delivery_cost)
        case CalculationMode.STANDARD:
            engine.calculate_advanced_cost(
                item.cost_per_item,
                item.quantity,
                item.delivery_cost,
                STANDARD_TAX_RATE,
                0.0,
            )
        case CalculationMode.CUSTOM:
            engine.calculate_advanced_cost(
                item.cost_per_item,
                item.quantity,
                item.delivery_cost,
                tax_percent / 100.0,
                discount_percent / 100.0,
            )
    return engine


def completion_note(mode: CalculationMode, engine: CostCalculationEngine) -> str:
    """One-line note describing what the calculation applied."""
    match mode:
        case CalculationMode.BASIC:
            return "Basic calculation completed (no tax applied)"
        case CalculationMode.STANDARD:
            return (
                f"Standard calculation completed "
                f"({engine.tax_rate * 100:.0f}% tax applied)"
            )
        case _:
            return (
                f"Custom calculation completed ({engine.tax_rate * 100:.1f}% tax, "
                f"{engine.discount_rate * 100:.1f}% discount applied)"
            )


def display_results(
    engine: CostCalculationEngine,
    currency: CurrencyFormat,
    summary_only: bool = False,
) -> None:
    """Print the engine's reports to stdout (status line goes to stderr)."""
    if summary_only:
        click.echo(engine.generate_summary(currency))
        return
    success("Calculation completed successfully!")
    click.echo(engine.generate_detailed_report(currency))
    click.echo("Quick Summary:")
    click.echo(f"   {engine.generate_summary(currency)}")
