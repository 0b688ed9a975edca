# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP

import numpy as np

from .validation import validate_period_range

__version__ = "0.1.0"

CENT_PLACES = 2
NOISE_PLACES = 12
WHOLE_PERIOD_TOLERANCE = 1e-7

_ROUNDING_CONTEXT = Context(prec=400)  # enough digits to quantize any finite float to 1e-12


# =============================================================================
# Amortization: period-by-period schedule and range aggregates
# =============================================================================
#
# Both functions in this module run the same cent-rounded recurrence, the
# way a printed amortization table is built. With PV and PMT rounded to
# cents and i the effective rate per payment period:
#
#   BAL₀  = round(PV, 2)
#   INTₘ  = round(round(-i·BALₘ₋₁, 12), 2)
#   BALₘ  = BALₘ₋₁ - INTₘ + PMT
#
# Sign convention follows the solvers: a loan received (PV > 0) is repaid
# with negative payments, so -i·BAL is the (negative) interest charged and
# subtracting it grows the balance before the payment is applied.
#
# The 12-place round strips floating-point noise from the product before
# the cent round, so e.g. 343.74999999999994 rounds to 343.75 rather than
# 343.74. Both rounds are half-away-from-zero.
#
# Principal for period m is inferred from the cumulative balance change,
# and interest is whatever part of the payment is not principal:
#
#   PRINₘ = (BALₘ - BAL₀) - Σₖ₌₁ᵐ⁻¹ PRINₖ
#   INTₘ' = PMT - PRINₘ
#
# amortization_schedule and amortization_range each run the recurrence from
# period 1; they share no intermediate state and agree period by period.
# =============================================================================

@dataclass(frozen=True)
class AmortizationSchedule:
    """
    Period-by-period amortization table.

    All arrays have one entry per period and are read-only; index k holds
    period k + 1.

    - period: Period numbers 1..N
    - balance: Ending balance after the period's payment
    - principal: Principal component of the period's payment
    - interest: Interest component of the period's payment (PMT - principal)
    """
    period: np.ndarray
    balance: np.ndarray
    principal: np.ndarray
    interest: np.ndarray

    def __len__(self) -> int:
        return len(self.period)

    @property
    def total_principal(self) -> float:
        """Sum of the principal components over every period."""
        return float(np.sum(self.principal))

    @property
    def total_interest(self) -> float:
        """Sum of the interest components over every period."""
        return float(np.sum(self.interest))


@dataclass(frozen=True)
class AmortizationSummary:
    """Balance, principal and interest aggregated over the inclusive period range [p1, p2]."""
    p1: int
    p2: int
    balance: float      # Ending balance at period p2
    principal: float    # BAL(p2) - BAL(p1 - 1)
    interest: float     # (p2 - p1 + 1)·PMT - principal


def round_half_away(value: float, places: int) -> float:
    """
    Round to a number of decimal places with ties away from zero.

    Python's round() rounds ties to even on the binary value; amortization
    tables round 0.125 to 0.13 and -0.125 to -0.13. The value is converted
    through its shortest repr so the decimal digits seen are the ones
    printed. Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP,
                                                       context=_ROUNDING_CONTEXT))


def whole_periods(number_of_periods: float) -> int:
    """
    Number of whole periods an amortization schedule covers.

    Values within WHOLE_PERIOD_TOLERANCE of an integer are snapped to it
    (a solved N of 359.99999999 is 360 periods); anything else is truncated.
    Zero or negative N covers no periods.
    """
    nearest = round(number_of_periods)
    if abs(number_of_periods - nearest) < WHOLE_PERIOD_TOLERANCE:
        periods = int(nearest)
    else:
        periods = math.floor(number_of_periods)
    return max(periods, 0)


def _period_interest(rate: float, balance: float) -> float:
    return round_half_away(round_half_away(-rate * balance, NOISE_PLACES), CENT_PLACES)


def _read_only(values: list[float] | range, dtype: type = float) -> np.ndarray:
    array = np.asarray(values, dtype=dtype)
    array.flags.writeable = False
    return array


def amortization_schedule(
        present_value: float,
        rate: float,
        number_of_periods: float,
        payment: float
) -> AmortizationSchedule:
    """
    Generate the full amortization schedule for periods 1..N.

    Starting from BAL₀ = round(PV, 2) and PMT = round(PMT, 2), iterates the
    cent-rounded recurrence (see module notes) and records each period's
    ending balance, principal and interest.

    Args:
        present_value: Present value (PV), rounded to cents before simulation
        rate: Effective rate per payment period as decimal (i)
        number_of_periods: Number of payment periods (N); see whole_periods
        payment: Periodic payment (PMT), rounded to cents before simulation;
                 0.0 for a lump sum (the balance simply compounds)

    Returns:
        AmortizationSchedule with len == whole_periods(N)

    Warns:
        UserWarning: If number_of_periods is not a whole number and the
            schedule is truncated

    Example (75,000 mortgage at 5.5%/12, PMT -425.84):
        >>> schedule = amortization_schedule(75000, 5.5 / 1200, 360, -425.84)
        >>> schedule.balance[0], schedule.principal[0], schedule.interest[0]
        (74917.91..., -82.09..., -343.75...)
    """
    periods = whole_periods(number_of_periods)
    if periods > 0 and abs(number_of_periods - periods) >= WHOLE_PERIOD_TOLERANCE:
        warnings.warn(
            f"number_of_periods {number_of_periods} is not a whole number, "
            f"schedule covers {periods} whole period(s)",
            UserWarning
        )

    starting_balance = round_half_away(present_value, CENT_PLACES)
    level_payment = round_half_away(payment, CENT_PLACES)

    balances: list[float] = []
    principals: list[float] = []
    interests: list[float] = []

    balance = starting_balance
    cumulative_principal = 0.0
    for _ in range(periods):
        balance = balance - _period_interest(rate, balance) + level_payment
        principal = (balance - starting_balance) - cumulative_principal
        cumulative_principal += principal
        balances.append(balance)
        principals.append(principal)
        interests.append(level_payment - principal)

    return AmortizationSchedule(
        period=_read_only(range(1, periods + 1), dtype=int),
        balance=_read_only(balances),
        principal=_read_only(principals),
        interest=_read_only(interests),
    )


def amortization_range(
        present_value: float,
        rate: float,
        payment: float,
        p1: int = 1,
        p2: int = 1
) -> AmortizationSummary:
    """
    Aggregate balance, principal and interest over periods p1..p2 inclusive.

    Runs the cent-rounded recurrence from period 1 to p2, recording the
    balance at the end of period p1 - 1 as the baseline (BAL₀ when p1 == 1):

        balance   = BAL(p2)
        principal = BAL(p2) - BAL(p1 - 1)
        interest  = (p2 - p1 + 1)·PMT - principal

    Only the running balance is kept, so memory does not grow with p2. The
    range is not limited to the loan's N; the recurrence simply continues.

    Args:
        present_value: Present value (PV), rounded to cents before simulation
        rate: Effective rate per payment period as decimal (i)
        payment: Periodic payment (PMT), rounded to cents before simulation
        p1: First period of the range (1-based)
        p2: Last period of the range (inclusive), >= p1

    Returns:
        AmortizationSummary for [p1, p2]

    Raises:
        InvalidInputError: If 1 <= p1 <= p2 does not hold

    Example (75,000 mortgage at 5.5%/12, tenth year):
        >>> summary = amortization_range(75000, 5.5 / 1200, -425.84, 133, 144)
        >>> summary.balance, summary.principal, summary.interest
        (58309.61..., -1847.54..., -3262.54...)
    """
    validate_period_range(p1, p2)

    starting_balance = round_half_away(present_value, CENT_PLACES)
    level_payment = round_half_away(payment, CENT_PLACES)

    balance = starting_balance
    baseline_balance = starting_balance
    for period in range(1, p2 + 1):
        if period == p1:
            baseline_balance = balance
        balance = balance - _period_interest(rate, balance) + level_payment

    principal = balance - baseline_balance
    return AmortizationSummary(
        p1=p1,
        p2=p2,
        balance=balance,
        principal=principal,
        interest=(p2 - p1 + 1) * level_payment - principal,
    )
