# Requires Python 3.12+
"""
TVM Standard Formulas — time value of money solvers and amortization.

Solve for any one of present value, future value, interest rate, number of
periods or payment given the other four, then amortize the resolved loan.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Rate conversion
from tvm_standard_formulas.rates import (
    period_rate,
    period_rate_vector,
    annuity_multiplier,
    nominal_rate_from_period_rate,
)

# Closed-form solvers (PV, FV, PMT, N)
from tvm_standard_formulas.closed_form import (
    present_value,
    future_value,
    payment,
    number_of_periods,
    normalize_zero,
)

# Interest-rate solver
from tvm_standard_formulas.interest_rate import (
    interest_rate,
    rate_residual,
    rate_residual_derivative,
)

# Validation and errors
from tvm_standard_formulas.validation import (
    TVMVariable,
    TVMError,
    InvalidInputError,
    UnknownVariableError,
    validate_inputs,
    validate_period_range,
)

# Amortization
from tvm_standard_formulas.amortization import (
    AmortizationSchedule,
    AmortizationSummary,
    amortization_schedule,
    amortization_range,
    round_half_away,
    whole_periods,
)

# Calculator (single entry point)
from tvm_standard_formulas.calculator import (
    TVMParameters,
    TVMResult,
    solve,
    calculate,
    calculate_from_parameters,
)

# Examples
from tvm_standard_formulas.examples import (
    TVMExample,
    TVM_EXAMPLES,
)

__all__ = [
    "__version__",
    # Rate conversion
    "period_rate",
    "period_rate_vector",
    "annuity_multiplier",
    "nominal_rate_from_period_rate",
    # Closed-form solvers
    "present_value",
    "future_value",
    "payment",
    "number_of_periods",
    "normalize_zero",
    # Interest-rate solver
    "interest_rate",
    "rate_residual",
    "rate_residual_derivative",
    # Validation and errors
    "TVMVariable",
    "TVMError",
    "InvalidInputError",
    "UnknownVariableError",
    "validate_inputs",
    "validate_period_range",
    # Amortization
    "AmortizationSchedule",
    "AmortizationSummary",
    "amortization_schedule",
    "amortization_range",
    "round_half_away",
    "whole_periods",
    # Calculator
    "TVMParameters",
    "TVMResult",
    "solve",
    "calculate",
    "calculate_from_parameters",
    # Examples
    "TVMExample",
    "TVM_EXAMPLES",
]
