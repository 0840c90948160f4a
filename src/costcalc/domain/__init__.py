"""Domain layer for COSTCALC.

Contains the business rules: the calculation engine, its value objects,
currency formatting and report rendering. This package performs no I/O.

Dependency rule: do not import from `costcalc.entrypoints`.
"""
