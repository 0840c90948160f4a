"""Command-line interface for COSTCALC."""
