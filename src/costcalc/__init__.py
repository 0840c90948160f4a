"""COSTCALC

A small cost-calculation utility. It validates item pricing, quantity,
delivery, tax and discount inputs, applies discount before tax, and renders
a fixed-width cost breakdown.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
