# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from . import closed_form
from .amortization import (
    AmortizationSchedule,
    amortization_range,
    amortization_schedule,
)
from .interest_rate import interest_rate as solve_interest_rate
from .rates import annuity_multiplier, period_rate
from .validation import (
    TVMVariable,
    validate_inputs,
    validate_period_range,
)

__version__ = "0.1.0"


# =============================================================================
# TVM Parameter Set
# =============================================================================
#
# TVMParameters is the input to the dispatcher. It holds the five TVM
# quantities as optional floats plus the payment/compounding frequencies,
# the annuity type, and which quantity is unknown.
#
# Payment convention:
#   - payment=None means a lump-sum scenario (no periodic payments). This is
#     only distinguished from payment=0.0 when classifying the scenario (the
#     interest-rate solver uses the lump-sum residual); once validated, an
#     absent payment is collapsed to 0.0 for every formula.
#   - Signs follow cash-flow convention: money received positive, money
#     paid out negative (a 75,000 loan has PV = +75000 and PMT < 0).
# =============================================================================

@dataclass(frozen=True)
class TVMParameters:
    """
    Time-value-of-money parameter set with one unknown.

    Rate convention:
        - interest_rate is a nominal annual percentage (5.5 for 5.5%)
        - payments_per_year (P) and compounding_periods_per_year (C) convert it
          to an effective rate per payment period (see rates.period_rate)
        - number_of_periods counts PAYMENT periods (360 for a 30-year monthly loan)
    """
    unknown_variable: TVMVariable
    present_value: float | None = None
    future_value: float | None = None
    interest_rate: float | None = None
    number_of_periods: float | None = None
    payment: float | None = None
    payments_per_year: int = 1
    compounding_periods_per_year: int = 1
    is_end_of_period_payment: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "unknown_variable", TVMVariable.coerce(self.unknown_variable))

    @property
    def is_lump_sum(self) -> bool:
        """True when there are no periodic payments (payment absent or zero)."""
        return self.payment is None or self.payment == 0.0

    def known(self, variable: TVMVariable | int | str) -> float | None:
        """Value of one quantity, or None if absent."""
        return getattr(self, TVMVariable.coerce(variable).field_name)

    def validate(self) -> None:
        """Run validation.validate_inputs on this parameter set."""
        validate_inputs(
            present_value=self.present_value,
            future_value=self.future_value,
            interest_rate=self.interest_rate,
            number_of_periods=self.number_of_periods,
            payment=self.payment,
            payments_per_year=self.payments_per_year,
            compounding_periods_per_year=self.compounding_periods_per_year,
            unknown_variable=self.unknown_variable,
        )

    def resolved(self, value: float) -> TVMParameters:
        """Copy of this parameter set with the unknown quantity filled in."""
        return dataclasses.replace(self, **{self.unknown_variable.field_name: value})


@dataclass(frozen=True)
class TVMResult:
    """
    Output of calculate().

    - result: The solved value of the unknown quantity
    - balance/principal/interest: Aggregates over the requested period range
    - schedule: Full amortization schedule, or None when not requested
    - parameters: The fully-resolved parameter set the amortization ran on
    """
    unknown_variable: TVMVariable
    result: float
    balance: float
    principal: float
    interest: float
    schedule: AmortizationSchedule | None
    parameters: TVMParameters


# =============================================================================
# Dispatch
# =============================================================================

def solve(parameters: TVMParameters) -> float:
    """
    Validate a parameter set and solve for its unknown quantity.

    PV, FV, PMT and N use the closed forms in closed_form; the interest rate
    uses the iterative solver in interest_rate. An absent payment is passed
    to the rate solver as None (lump-sum residual) and to the closed forms
    as 0.0.

    Args:
        parameters: Parameter set naming one unknown

    Returns:
        The unknown's value (interest rate as nominal annual percentage)

    Raises:
        InvalidInputError: If validation fails or the solve is degenerate
    """
    parameters.validate()
    unknown = parameters.unknown_variable
    p = parameters
    pmt = p.payment if p.payment is not None else 0.0

    if unknown is TVMVariable.INTEREST_RATE:
        return solve_interest_rate(
            present_value=p.present_value,
            future_value=p.future_value,
            number_of_periods=p.number_of_periods,
            payment=p.payment,
            payments_per_year=p.payments_per_year,
            compounding_periods_per_year=p.compounding_periods_per_year,
            is_end_of_period_payment=p.is_end_of_period_payment,
        )

    rate = period_rate(p.interest_rate, p.payments_per_year, p.compounding_periods_per_year)
    g = annuity_multiplier(rate, p.is_end_of_period_payment)

    if unknown is TVMVariable.PRESENT_VALUE:
        return closed_form.present_value(p.future_value, pmt, p.number_of_periods, rate, g)
    if unknown is TVMVariable.FUTURE_VALUE:
        return closed_form.future_value(p.present_value, pmt, p.number_of_periods, rate, g)
    if unknown is TVMVariable.PAYMENT:
        return closed_form.payment(p.present_value, p.future_value, p.number_of_periods, rate, g)
    return closed_form.number_of_periods(p.present_value, p.future_value, pmt, rate, g)


def calculate_from_parameters(
        parameters: TVMParameters,
        p1: int = 1,
        p2: int = 1,
        include_schedule: bool = True
) -> TVMResult:
    """
    Solve a parameter set, then amortize the resolved values.

    Control flow:
        validate period range -> validate inputs -> solve unknown ->
        back-fill the solved value -> amortization range [p1, p2] ->
        full schedule (when include_schedule)

    The amortization uses the resolved PV, period rate, N and PMT (PMT = 0.0
    for a lump sum). FV does not enter the amortization.

    Args:
        parameters: Parameter set naming one unknown
        p1: First period of the aggregate range (1-based)
        p2: Last period of the aggregate range (inclusive), >= p1
        include_schedule: Build the full period-by-period schedule. Set False
            to keep memory independent of N.

    Returns:
        TVMResult

    Raises:
        InvalidInputError: On any validation failure or degenerate solve
    """
    validate_period_range(p1, p2)
    value = solve(parameters)
    resolved = parameters.resolved(value)

    rate = period_rate(resolved.interest_rate, resolved.payments_per_year,
                       resolved.compounding_periods_per_year)
    pmt = resolved.payment if resolved.payment is not None else 0.0

    summary = amortization_range(resolved.present_value, rate, pmt, p1, p2)
    schedule = None
    if include_schedule:
        schedule = amortization_schedule(resolved.present_value, rate,
                                         resolved.number_of_periods, pmt)

    return TVMResult(
        unknown_variable=resolved.unknown_variable,
        result=value,
        balance=summary.balance,
        principal=summary.principal,
        interest=summary.interest,
        schedule=schedule,
        parameters=resolved,
    )


def calculate(
        *,
        present_value: float | None = None,
        future_value: float | None = None,
        interest_rate: float | None = None,
        number_of_periods: float | None = None,
        payment: float | None = None,
        payments_per_year: int = 1,
        compounding_periods_per_year: int = 1,
        is_end_of_period_payment: bool = True,
        p1: int = 1,
        p2: int = 1,
        unknown_variable: TVMVariable | int | str,
        include_schedule: bool = True
) -> TVMResult:
    """
    Solve for one unknown TVM quantity given the other four, and amortize.

    Single entry point of the package. Builds a TVMParameters and delegates
    to calculate_from_parameters.

    Args:
        present_value: Present value, or None when unknown
        future_value: Future value, or None when unknown
        interest_rate: Nominal annual rate as percentage, or None when unknown
        number_of_periods: Number of payment periods, or None when unknown
        payment: Periodic payment; None when unknown or for a lump sum
        payments_per_year: Payment periods per year (default 1)
        compounding_periods_per_year: Compounding periods per year (default 1)
        is_end_of_period_payment: True for ordinary annuity (default),
            False for annuity due
        p1: First period of the aggregate range (default 1)
        p2: Last period of the aggregate range, inclusive (default 1)
        unknown_variable: Quantity to solve for, as TVMVariable, its integer
            value, or its name ('payment', 'interestRate', ...)
        include_schedule: Build the full schedule (default True)

    Returns:
        TVMResult with the solved value, range aggregates and schedule

    Raises:
        UnknownVariableError: If unknown_variable names no TVM quantity
        InvalidInputError: On any validation failure or degenerate solve

    Example (monthly payment on a 75,000, 30-year, 5.5% mortgage):
        >>> out = calculate(present_value=75000, future_value=0, interest_rate=5.5,
        ...                 number_of_periods=360, payments_per_year=12,
        ...                 compounding_periods_per_year=12, unknown_variable="payment")
        >>> round(out.result, 2), round(out.principal, 2), round(out.interest, 2)
        (-425.84, -82.09, -343.75)
    """
    parameters = TVMParameters(
        unknown_variable=unknown_variable,
        present_value=present_value,
        future_value=future_value,
        interest_rate=interest_rate,
        number_of_periods=number_of_periods,
        payment=payment,
        payments_per_year=payments_per_year,
        compounding_periods_per_year=compounding_periods_per_year,
        is_end_of_period_payment=is_end_of_period_payment,
    )
    return calculate_from_parameters(parameters, p1=p1, p2=p2, include_schedule=include_schedule)
