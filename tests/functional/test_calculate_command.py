"""Functional tests for `costcalc calculate`.

A shop assistant prices an order from the command line and reads the
breakdown. Invalid values are rejected with a message naming the option.
"""

from __future__ import annotations

import pytest

from tests.helpers.cli import invoke

# pylint: disable=magic-value-comparison


def run(*args: str, env: dict[str, str] | None = None):
    """Invoke `costcalc calculate` with the shared base options."""
    return invoke("calculate", *args, env=env)


class TestPricingAnOrder:
    """The user prices orders in each mode."""

    @staticmethod
    def test_custom_mode_reference_order():
        """Three items at 100 with 20 delivery, 10% off and 8% tax cost 311.04."""
        result, text = run(
            "--name", "Widget",
            "--cost", "100",
            "--quantity", "3",
            "--delivery", "20",
            "--mode", "custom",
            "--tax", "8",
            "--discount", "10",
        )  # fmt: skip

        assert result.exit_code == 0, text
        assert "DETAILED COST BREAKDOWN" in text
        assert "Item Name           : Widget" in text
        assert "Delivery Charges    : Rs 20.00" in text
        assert "Discount (10.0%)    : -Rs 32.00" in text
        assert "Tax (8.0%)          : Rs 23.04" in text
        assert "TOTAL COST          : Rs 311.04" in text
        assert "Quick Summary:" in text
        assert (
            "Total Cost: Rs 311.04 (Items: 3 × Rs 100.00 + Delivery: Rs 20.00)" in text
        )

    @staticmethod
    def test_basic_mode_has_no_optional_lines():
        """A single item with free delivery and no tax shows only the essentials."""
        result, text = run("--cost", "50", "-n", "1")

        assert result.exit_code == 0, text
        assert "Item Name           : Item" in text
        assert "Delivery Charges" not in text
        assert "Discount" not in text
        assert "Tax (" not in text
        assert "TOTAL COST          : Rs 50.00" in text

    @staticmethod
    def test_standard_mode_adds_eight_percent_tax():
        """Standard mode adds 8% tax."""
        result, text = run("--cost", "100", "-n", "1", "--mode", "standard")

        assert result.exit_code == 0, text
        assert "Tax (8.0%)          : Rs 8.00" in text
        assert "TOTAL COST          : Rs 108.00" in text

    @staticmethod
    def test_summary_only():
        """--summary-only prints the one-line summary."""
        result, text = run("--cost", "2.5", "-n", "4", "--summary-only")

        assert result.exit_code == 0, text
        assert "DETAILED COST BREAKDOWN" not in text
        assert "Total Cost: Rs 10.00 (Items: 4 × Rs 2.50 + Delivery: Rs 0.00)" in text

    @staticmethod
    def test_currency_symbol_option():
        """The report uses the currency symbol chosen on the command line."""
        result, text = invoke(
            "--currency-symbol", "$", "calculate", "--cost", "1234.5", "-n", "1"
        )

        assert result.exit_code == 0, text
        assert "TOTAL COST          : $ 1,234.50" in text

    @staticmethod
    def test_currency_environment():
        """Currency variables in the environment shape the output."""
        result, text = run(
            "--cost", "1234.5", "-n", "1", "--summary-only",
            env={"COSTCALC_CURRENCY_SYMBOL": "€", "COSTCALC_DECIMAL_SEPARATOR": ","},
        )  # fmt: skip

        assert result.exit_code == 0, text
        assert "Total Cost: € 1,234,50" in text


class TestRejectedInput:
    """The user mistypes values and is told what is wrong."""

    @staticmethod
    @pytest.mark.parametrize(
        ("args", "option", "fragment"),
        [
            (["--cost", "0.005", "-n", "1"], "--cost", "at least 0.01"),
            (["--cost", "5", "-n", "0"], "--quantity", "at least 1"),
            (["--cost", "5", "-n", "1", "--delivery", "-3"], "--delivery", "cannot be negative"),  # pylint: disable=line-too-long
            (["--cost", "inf", "-n", "1"], "--cost", "at least 0.01"),
            (["--cost", "5", "-n", "1", "--delivery", "inf"], "--delivery", "(got inf)"),  # pylint: disable=line-too-long
        ],
    )
    def test_engine_rejections_name_the_option(args, option, fragment):
        """Values the engine rejects are usage errors pointing at the option."""
        result, text = run(*args)

        assert result.exit_code == 2
        assert option in text
        assert fragment in text

    @staticmethod
    def test_non_integer_quantity_rejected_by_cli():
        """Quantity must be a whole number."""
        result, text = run("--cost", "5", "-n", "1.5")

        assert result.exit_code == 2
        assert "--quantity" in text

    @staticmethod
    def test_tax_outside_custom_range_rejected():
        """Custom tax is limited to 0-25%."""
        result, _ = run("--cost", "5", "-n", "1", "--mode", "custom", "--tax", "30")

        assert result.exit_code == 2

    @staticmethod
    def test_tax_requires_custom_mode():
        """--tax and --discount only make sense in custom mode."""
        result, text = run("--cost", "5", "-n", "1", "--tax", "5")

        assert result.exit_code == 2
        assert "--mode custom" in text

    @staticmethod
    def test_order_too_large_to_total():
        """Amounts beyond floating-point range end with an error, not a traceback."""
        result, text = run("--cost", "1e308", "-n", "10")

        assert result.exit_code == 1
        assert "too large to calculate" in text
        assert "Traceback" not in text

    @staticmethod
    def test_bad_decimal_places_configuration():
        """A broken currency configuration stops the program with a message."""
        result, text = run(
            "--cost", "5", "-n", "1", env={"COSTCALC_DECIMAL_PLACES": "two"}
        )

        assert result.exit_code == 1
        assert "COSTCALC_DECIMAL_PLACES" in text
