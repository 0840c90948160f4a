"""Text rendering of a cost breakdown.

Two outputs are provided: a fixed-width detailed report and a one-line
summary. Both are pure functions of a `CostBreakdown` and a `CurrencyFormat`.
"""

from .calculation import CostBreakdown
from .currency import DEFAULT_CURRENCY, CurrencyFormat, format_currency

REPORT_WIDTH = 50
LABEL_WIDTH = 20
REPORT_TITLE = " " * 15 + "DETAILED COST BREAKDOWN"


def _line(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}: {value}\n"


def _percent(rate: float) -> str:
    return f"{rate * 100:.1f}%"


def render_detailed_report(
    breakdown: CostBreakdown, currency: CurrencyFormat = DEFAULT_CURRENCY
) -> str:
    """Render the detailed cost breakdown.

    Optional lines are left out when they carry nothing: delivery when it is
    free, discount when the rate is 0, and tax when the rate is 0.

    Args:
        breakdown: The calculation result to render.
        currency: Money display rules.

    Returns:
        str: A newline-terminated block, ``REPORT_WIDTH`` columns wide.
    """
    inputs = breakdown.inputs

    def money(amount: float) -> str:
        return format_currency(amount, currency)

    parts = [
        "=" * REPORT_WIDTH + "\n",
        REPORT_TITLE + "\n",
        "=" * REPORT_WIDTH + "\n",
    ]
    if inputs.item_name:
        parts.append(_line("Item Name", inputs.item_name))
    parts.append(_line("Cost Per Item", money(breakdown.cost_per_item)))
    parts.append(_line("Quantity", f"{breakdown.quantity} items"))
    parts.append(_line("Items Subtotal", money(breakdown.items_subtotal)))
    if inputs.delivery_cost > 0:
        parts.append(_line("Delivery Charges", money(inputs.delivery_cost)))
    parts.append(_line("Subtotal", money(breakdown.subtotal)))
    if inputs.discount_rate > 0:
        parts.append(
            _line(
                f"Discount ({_percent(inputs.discount_rate)})",
                f"-{money(breakdown.discount_amount)}",
            )
        )
    if inputs.tax_rate > 0:
        parts.append(
            _line(f"Tax ({_percent(inputs.tax_rate)})", money(breakdown.tax_amount))
        )
    parts.append("-" * REPORT_WIDTH + "\n")
    parts.append(_line("TOTAL COST", money(breakdown.total_cost)))
    parts.append("=" * REPORT_WIDTH + "\n")
    return "".join(parts)


def render_summary(
    breakdown: CostBreakdown, currency: CurrencyFormat = DEFAULT_CURRENCY
) -> str:
    """Render a one-line summary: total, quantity, unit cost and delivery."""
    inputs = breakdown.inputs
    return (
        f"Total Cost: {format_currency(breakdown.total_cost, currency)} "
        f"(Items: {breakdown.quantity} × "
        f"{format_currency(breakdown.cost_per_item, currency)} "
        f"+ Delivery: {format_currency(inputs.delivery_cost, currency)})"
    )
