"""CLI helpers for COSTCALC.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji→ASCII fallbacks, a NAME=LEVEL logger option parser, and
prompts that give up after a bounded number of invalid entries.
"""

from .messages import error, success, warn
from .prompts import TooManyAttemptsError, prompt_value

__all__ = ["error", "success", "warn", "prompt_value", "TooManyAttemptsError"]
