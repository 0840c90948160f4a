"""Unit tests for costcalc.domain.report."""

from textwrap import dedent

import pytest

from costcalc.domain.calculation import CostBreakdown, CostInputs
from costcalc.domain.currency import CurrencyFormat
from costcalc.domain.report import REPORT_WIDTH, render_detailed_report, render_summary

# pylint: disable=magic-value-comparison


def breakdown_for(**kwargs) -> CostBreakdown:
    """Build a breakdown from CostInputs keyword arguments."""
    return CostBreakdown.from_inputs(CostInputs(**kwargs))


REFERENCE = {
    "item_name": "Widget",
    "cost_per_item": 100.0,
    "quantity": 3,
    "delivery_cost": 20.0,
    "tax_rate": 0.08,
    "discount_rate": 0.10,
}


class TestDetailedReport:
    """Tests for render_detailed_report."""

    @staticmethod
    def test_full_report_layout():
        """Every line is present when delivery, discount and tax are non-zero."""
        expected = dedent(
            """\
            ==================================================
                           DETAILED COST BREAKDOWN
            ==================================================
            Item Name           : Widget
            Cost Per Item       : Rs 100.00
            Quantity            : 3 items
            Items Subtotal      : Rs 300.00
            Delivery Charges    : Rs 20.00
            Subtotal            : Rs 320.00
            Discount (10.0%)    : -Rs 32.00
            Tax (8.0%)          : Rs 23.04
            --------------------------------------------------
            TOTAL COST          : Rs 311.04
            ==================================================
            """
        )
        assert render_detailed_report(breakdown_for(**REFERENCE)) == expected

    @staticmethod
    def test_optional_lines_omitted():
        """Free delivery, no discount and no tax drop their lines."""
        report = render_detailed_report(
            breakdown_for(cost_per_item=50.0, quantity=1, tax_rate=0.0)
        )
        assert "Delivery Charges" not in report
        assert "Discount" not in report
        assert "Tax" not in report
        assert "Subtotal            : Rs 50.00\n" in report
        assert "TOTAL COST          : Rs 50.00\n" in report

    @staticmethod
    def test_default_item_name_is_shown():
        """The "Item" default name is printed."""
        report = render_detailed_report(breakdown_for(cost_per_item=1.0, quantity=1))
        assert "Item Name           : Item\n" in report

    @staticmethod
    def test_lines_fit_report_width():
        """No line is wider than the report frame."""
        report = render_detailed_report(breakdown_for(**REFERENCE))
        assert all(len(line) <= REPORT_WIDTH for line in report.splitlines())

    @staticmethod
    def test_percentages_have_one_decimal():
        """Rates are shown as percentages with one decimal place."""
        report = render_detailed_report(
            breakdown_for(
                cost_per_item=10.0, quantity=1, tax_rate=0.175, discount_rate=0.025
            )
        )
        assert "Discount (2.5%)" in report
        assert "Tax (17.5%)" in report

    @staticmethod
    def test_uses_given_currency():
        """Money values follow the supplied currency format."""
        fmt = CurrencyFormat(symbol="$", symbol_separator="")
        report = render_detailed_report(breakdown_for(**REFERENCE), fmt)
        assert "TOTAL COST          : $311.04\n" in report
        assert "Rs" not in report


class TestSummary:
    """Tests for render_summary."""

    @staticmethod
    def test_reference_summary():
        """The summary is a single line with total, quantity, unit and delivery."""
        summary = render_summary(breakdown_for(**REFERENCE))
        assert summary == (
            "Total Cost: Rs 311.04 (Items: 3 × Rs 100.00 + Delivery: Rs 20.00)"
        )
        assert "\n" not in summary

    @staticmethod
    @pytest.mark.parametrize("symbol", ["$", "EUR"])
    def test_summary_currency(symbol):
        """The summary uses the supplied currency symbol throughout."""
        summary = render_summary(
            breakdown_for(cost_per_item=2.0, quantity=5, tax_rate=0.0),
            CurrencyFormat(symbol=symbol),
        )
        assert summary == (
            f"Total Cost: {symbol} 10.00 (Items: 5 × {symbol} 2.00 "
            f"+ Delivery: {symbol} 0.00)"
        )
