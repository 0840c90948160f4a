"""Value objects for a single cost calculation.

- `CostInputs` is the validated input record. It can only be constructed in
  a valid state, so replacing it is an atomic, all-or-nothing update.
- `CostOptions` describes one calculation request with named fields and
  defaults, standing in for the various ``calculate_*`` entry points.
- `CostBreakdown` holds the derived amounts and the inputs they came from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import AmountOverflowError, MissingInputsError, ValidationError
from .unsettable import UNSET, Unsettable, resolve

DEFAULT_ITEM_NAME = "Item"
DEFAULT_TAX_RATE = 0.08
MIN_COST_PER_ITEM = 0.01
MIN_QUANTITY = 1
MAX_TAX_RATE = 1.0
MAX_DISCOUNT_RATE = 0.5


def normalize_item_name(name: str | None) -> str:
    """Trim ``name``; blank or missing names become ``"Item"``."""
    if name is None or not name.strip():
        return DEFAULT_ITEM_NAME
    return name.strip()


# --- Inputs ---


@dataclass(frozen=True, slots=True)
class CostInputs:
    """Immutable, validated inputs of one calculation.

    Conventions:
      - `cost_per_item` and `quantity` are None until first supplied.
      - `tax_rate` and `discount_rate` are fractions (0.08 means 8%).
      - `item_name` is always non-empty after construction.
    """

    item_name: str = DEFAULT_ITEM_NAME
    cost_per_item: float | None = None
    quantity: int | None = None
    delivery_cost: float = 0.0
    tax_rate: float = DEFAULT_TAX_RATE
    discount_rate: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "item_name", normalize_item_name(self.item_name))

        # NaN and infinities fail every bound
        cost = self.cost_per_item
        if cost is not None and not (
            math.isfinite(cost) and cost >= MIN_COST_PER_ITEM
        ):
            raise ValidationError(
                "cost_per_item", cost, f"must be at least {MIN_COST_PER_ITEM}"
            )
        qty = self.quantity
        if qty is not None and not (math.isfinite(qty) and qty >= MIN_QUANTITY):
            raise ValidationError("quantity", qty, f"must be at least {MIN_QUANTITY}")
        if not (math.isfinite(self.delivery_cost) and self.delivery_cost >= 0):
            raise ValidationError(
                "delivery_cost", self.delivery_cost, "cannot be negative"
            )
        if not 0.0 <= self.tax_rate <= MAX_TAX_RATE:
            raise ValidationError(
                "tax_rate", self.tax_rate, "must be between 0 and 1 (0% to 100%)"
            )
        if not 0.0 <= self.discount_rate <= MAX_DISCOUNT_RATE:
            raise ValidationError(
                "discount_rate",
                self.discount_rate,
                "must be between 0 and 0.5 (0% to 50%)",
            )

    def missing(self) -> list[str]:
        """Return the names of inputs required for a calculation that are unset."""
        return [
            name
            for name in ("cost_per_item", "quantity")
            if getattr(self, name) is None
        ]


# --- Request ---


@dataclass(frozen=True, slots=True)
class CostOptions:
    """One calculation request.

    Defaults:
      - `delivery_cost` is 0 (free delivery).
      - `tax_rate`, `discount_rate` and `item_name` are UNSET, meaning the
        engine keeps whatever it currently stores (8% tax and no discount on
        a fresh engine).
    """

    cost_per_item: float
    quantity: int
    delivery_cost: float = 0.0
    tax_rate: Unsettable[float] = UNSET
    discount_rate: Unsettable[float] = UNSET
    item_name: Unsettable[str] = UNSET

    def apply_to(self, current: CostInputs) -> CostInputs:
        """Merge the request over ``current`` and return new validated inputs."""
        return CostInputs(
            item_name=resolve(self.item_name, current.item_name),
            cost_per_item=self.cost_per_item,
            quantity=self.quantity,
            delivery_cost=self.delivery_cost,
            tax_rate=resolve(self.tax_rate, current.tax_rate),
            discount_rate=resolve(self.discount_rate, current.discount_rate),
        )


# --- Result ---


@dataclass(frozen=True, slots=True)
class CostBreakdown:
    """Derived amounts of a calculation, plus the inputs they were derived from."""

    inputs: CostInputs
    cost_per_item: float
    quantity: int
    items_subtotal: float
    subtotal: float
    discount_amount: float
    after_discount: float
    tax_amount: float
    total_cost: float

    @classmethod
    def from_inputs(cls, inputs: CostInputs) -> CostBreakdown:
        """Compute the breakdown for ``inputs``.

        The order is fixed: delivery is part of the subtotal, the discount
        is taken from the whole subtotal, and tax applies to what remains
        after the discount.

        Raises:
            MissingInputsError: If cost per item or quantity is not set.
            AmountOverflowError: If an amount is too large to represent.
        """
        cost_per_item, quantity = inputs.cost_per_item, inputs.quantity
        if cost_per_item is None or quantity is None:
            raise MissingInputsError(inputs.missing())

        items_subtotal = cost_per_item * quantity
        subtotal = items_subtotal + inputs.delivery_cost
        discount_amount = subtotal * inputs.discount_rate
        after_discount = subtotal - discount_amount
        tax_amount = after_discount * inputs.tax_rate
        total_cost = after_discount + tax_amount
        if not (math.isfinite(subtotal) and math.isfinite(total_cost)):
            raise AmountOverflowError(subtotal, total_cost)
        return cls(
            inputs=inputs,
            cost_per_item=cost_per_item,
            quantity=quantity,
            items_subtotal=items_subtotal,
            subtotal=subtotal,
            discount_amount=discount_amount,
            after_discount=after_discount,
            tax_amount=tax_amount,
            total_cost=total_cost,
        )
