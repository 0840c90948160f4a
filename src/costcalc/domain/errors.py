"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when a calculation input falls outside its valid range.

    Attributes:
        field: Name of the offending input (e.g. ``"cost_per_item"``).
        value: The rejected value.
        bound: Human-readable description of the valid range.
    """

    def __init__(self, field: str, value: object, bound: str) -> None:
        super().__init__(f"{field} {bound} (got {value!r})")
        self.field = field
        self.value = value
        self.bound = bound


# ============================================================================
#                           Engine state errors
# ============================================================================


class InvalidStateError(DomainError):
    """Raised when the engine is in an invalid state for the attempted action."""


class CalculationNotPerformedError(InvalidStateError):
    """Raised when a derived amount is read before any calculation has run."""

    def __init__(self, attribute: str) -> None:
        super().__init__(
            f"{attribute} is not available until a calculation has been performed."
        )
        self.attribute = attribute


class MissingInputsError(InvalidStateError):
    """Raised when recomputation is requested before cost and quantity are set."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"Cannot recalculate: {', '.join(missing)} must be set first."
        )
        self.missing = missing


# ============================================================================
#                           Calculation errors
# ============================================================================


class AmountOverflowError(DomainError):
    """Raised when valid inputs produce an amount too large to represent."""

    def __init__(self, subtotal: float, total_cost: float) -> None:
        super().__init__(
            "The order is too large to calculate "
            f"(subtotal={subtotal!r}, total={total_cost!r})."
        )
        self.subtotal = subtotal
        self.total_cost = total_cost
