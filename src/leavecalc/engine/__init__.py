"""
leavecalc.engine
~~~~~~~~~~~~~~~~

The single call surface of the calculator.  Pick a mode, pass the raw text
of the other two quantities and the holiday list, and get back a
CalculationResult: the solved value plus rest-day warnings, or a failure
tagged with a FailureKind.

Basic usage::

    from leavecalc.engine import calculate

    result = calculate("end", start_text="2024-01-01", duration_text="5",
                       holidays_text="2024-01-03")
    result.ok            # → True
    result.value_text    # → '2024-01-06'

Modes
-----
duration  start + end        → number of leave days
end       start + duration   → end date
start     end + duration     → start date
"""

from leavecalc.engine.calculator import calculate, validate
from leavecalc.engine.types import (
    CalculationError,
    CalculationInput,
    CalculationMode,
    CalculationResult,
    FailureKind,
)

__all__ = [
    "CalculationError",
    "CalculationInput",
    "CalculationMode",
    "CalculationResult",
    "FailureKind",
    "calculate",
    "validate",
]
