"""Entrypoints (inbound adapters) for COSTCALC.

Expose the calculation engine to the outside world through the CLI. Parse
raw input into numbers, call the domain layer, and present its reports.

Dependency rule: may import `costcalc.domain` and `costcalc.config`.
"""
