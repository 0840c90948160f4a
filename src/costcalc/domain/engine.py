"""The cost calculation engine.

`CostCalculationEngine` owns the inputs of one calculation and the totals
derived from them. Every mutation builds a new, validated `CostInputs`
before anything is stored, so a rejected input leaves the engine exactly as
it was.

Example:
    >>> engine = CostCalculationEngine()
    >>> engine.calculate_advanced_cost(100.0, 3, 20.0, 0.08, 0.10)
    >>> round(engine.total_cost, 2)
    311.04
"""

from __future__ import annotations

import logging
from dataclasses import replace

from .calculation import CostBreakdown, CostInputs, CostOptions
from .currency import DEFAULT_CURRENCY, CurrencyFormat
from .errors import CalculationNotPerformedError, ValidationError
from .report import render_detailed_report, render_summary

logger = logging.getLogger(__name__)


class CostCalculationEngine:
    """Holds one calculation's inputs, validates them and derives totals.

    The engine moves through three states: freshly constructed (name
    ``"Item"``, 8% tax, no discount, no cost or quantity yet), populated, and
    calculated. Derived amounts can only be read once a calculation has run.

    Note: This is NOT thread-safe. Use one engine per session, or serialize
    access to a shared instance.
    """

    def __init__(self) -> None:
        self._inputs = CostInputs()
        self._breakdown: CostBreakdown | None = None

    # --- Construction Paths ---

    @classmethod
    def with_item(
        cls,
        name: str | None,
        cost_per_item: float,
        quantity: int,
        delivery_cost: float = 0.0,
    ) -> CostCalculationEngine:
        """Build an engine with item details already stored (not yet calculated)."""
        engine = cls()
        engine.set_item_details(name, cost_per_item, quantity, delivery_cost)
        return engine

    # --- Input Setters ---

    def set_item_details(
        self,
        name: str | None,
        cost_per_item: float,
        quantity: int,
        delivery_cost: float,
    ) -> None:
        """Validate and store the item details without recalculating.

        Raises:
            ValidationError: If any value is out of range. Nothing is stored.
        """
        self._store(
            item_name=name,
            cost_per_item=cost_per_item,
            quantity=quantity,
            delivery_cost=delivery_cost,
        )

    def set_tax_rate(self, rate: float) -> None:
        """Validate and store the tax rate (a fraction in [0, 1]).

        Totals are not recalculated; call `recalculate` for that.
        """
        self._store(tax_rate=rate)

    def set_discount_rate(self, rate: float) -> None:
        """Validate and store the discount rate (a fraction in [0, 0.5]).

        Totals are not recalculated; call `recalculate` for that.
        """
        self._store(discount_rate=rate)

    # --- Calculation ---

    def calculate(self, options: CostOptions) -> CostBreakdown:
        """Apply ``options`` over the stored inputs and recompute all totals.

        Args:
            options: The calculation request. Fields left UNSET keep their
                stored values.

        Returns:
            CostBreakdown: The freshly derived amounts.

        Raises:
            ValidationError: If any supplied value is out of range. The engine
                keeps its previous inputs and totals.
        """
        try:
            inputs = options.apply_to(self._inputs)
        except ValidationError as exc:
            logger.debug("Rejected calculation request: %s", exc)
            raise
        return self._recompute(inputs)

    def calculate_cost(
        self, cost_per_item: float, quantity: int, delivery_cost: float = 0.0
    ) -> None:
        """Calculate with the given cost, quantity and delivery (0 if omitted).

        The stored tax and discount rates are kept.
        """
        self.calculate(CostOptions(cost_per_item, quantity, delivery_cost))

    def calculate_advanced_cost(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        cost_per_item: float,
        quantity: int,
        delivery_cost: float,
        tax_rate: float,
        discount_rate: float,
    ) -> None:
        """Calculate with every numeric input supplied explicitly."""
        self.calculate(
            CostOptions(
                cost_per_item,
                quantity,
                delivery_cost,
                tax_rate=tax_rate,
                discount_rate=discount_rate,
            )
        )

    def apply_discount(self, percentage: float) -> None:
        """Set the discount as a percentage (10 means 10%) and recalculate.

        Raises:
            ValidationError: If the resulting rate is outside [0, 0.5].
            MissingInputsError: If cost per item or quantity was never set.
        """
        self._recompute(self._candidate(discount_rate=percentage / 100.0))

    def apply_tax(self, percentage: float) -> None:
        """Set the tax as a percentage (8 means 8%) and recalculate.

        Raises:
            ValidationError: If the resulting rate is outside [0, 1].
            MissingInputsError: If cost per item or quantity was never set.
        """
        self._recompute(self._candidate(tax_rate=percentage / 100.0))

    def recalculate(self) -> CostBreakdown:
        """Recompute all totals from the stored inputs."""
        return self._recompute(self._inputs)

    # --- Reports ---

    def generate_detailed_report(
        self, currency: CurrencyFormat = DEFAULT_CURRENCY
    ) -> str:
        """Render the fixed-width breakdown of the last calculation."""
        return render_detailed_report(self._require("detailed report"), currency)

    def generate_summary(self, currency: CurrencyFormat = DEFAULT_CURRENCY) -> str:
        """Render the one-line summary of the last calculation."""
        return render_summary(self._require("summary"), currency)

    # --- Stored Inputs ---

    @property
    def inputs(self) -> CostInputs:
        """The currently stored inputs."""
        return self._inputs

    @property
    def item_name(self) -> str:
        """Item label; ``"Item"`` unless a non-blank name was given."""
        return self._inputs.item_name

    @property
    def cost_per_item(self) -> float | None:
        """Stored cost per item, or None if never set."""
        return self._inputs.cost_per_item

    @property
    def quantity(self) -> int | None:
        """Stored quantity, or None if never set."""
        return self._inputs.quantity

    @property
    def delivery_cost(self) -> float:
        """Stored delivery cost."""
        return self._inputs.delivery_cost

    @property
    def tax_rate(self) -> float:
        """Stored tax rate as a fraction."""
        return self._inputs.tax_rate

    @property
    def discount_rate(self) -> float:
        """Stored discount rate as a fraction."""
        return self._inputs.discount_rate

    # --- Derived Amounts ---

    @property
    def is_calculated(self) -> bool:
        """True once at least one calculation has run."""
        return self._breakdown is not None

    @property
    def breakdown(self) -> CostBreakdown:
        """Result of the last calculation."""
        return self._require("breakdown")

    @property
    def subtotal(self) -> float:
        """Items plus delivery, before discount and tax."""
        return self._require("subtotal").subtotal

    @property
    def discount_amount(self) -> float:
        """Amount taken off the subtotal."""
        return self._require("discount_amount").discount_amount

    @property
    def tax_amount(self) -> float:
        """Tax charged on the discounted subtotal."""
        return self._require("tax_amount").tax_amount

    @property
    def total_cost(self) -> float:
        """Final payable amount."""
        return self._require("total_cost").total_cost

    # --- Plumbing ---

    def _candidate(self, **changes: object) -> CostInputs:
        try:
            return replace(self._inputs, **changes)  # type: ignore[arg-type]
        except ValidationError as exc:
            logger.debug("Rejected input: %s", exc)
            raise

    def _store(self, **changes: object) -> None:
        self._inputs = self._candidate(**changes)

    def _recompute(self, inputs: CostInputs) -> CostBreakdown:
        breakdown = CostBreakdown.from_inputs(inputs)  # raises MissingInputsError
        self._inputs = inputs
        self._breakdown = breakdown
        logger.debug(
            "Calculated %s: subtotal=%.2f discount=%.2f tax=%.2f total=%.2f",
            inputs.item_name,
            breakdown.subtotal,
            breakdown.discount_amount,
            breakdown.tax_amount,
            breakdown.total_cost,
        )
        return breakdown

    def _require(self, attribute: str) -> CostBreakdown:
        if self._breakdown is None:
            raise CalculationNotPerformedError(attribute)
        return self._breakdown
