# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import numpy as np

__version__ = "0.1.0"


# =============================================================================
# Rate Conversion: nominal annual rate -> effective rate per payment period
# =============================================================================

def period_rate(
        interest_rate: float,
        payments_per_year: int,
        compounding_periods_per_year: int
) -> float:
    """
    Convert a nominal annual rate into the effective rate per payment period.

    A nominal annual rate R% compounded C times per year earns R/C percent per
    compounding period. Over one payment period (1/P of a year) there are C/P
    compounding periods, so the effective rate for one payment period is:

    Formula:
        i = (1 + 0.01 * R / C)^(C / P) - 1

    Where:
        R = Nominal annual rate as percentage (e.g., 5.5 for 5.5%)
        C = Compounding periods per year
        P = Payment periods per year

    When C == P (monthly payments on a monthly-compounded rate) this reduces
    to the familiar R / (100 * P). When C != P the exponent rescales the
    compounding to the payment frequency, e.g. monthly payments on a
    quarterly-compounded rate:

        i = (1 + 0.01 * R / 4)^(4 / 12) - 1

    Args:
        interest_rate: Nominal annual rate as percentage (R)
        payments_per_year: Payment periods per year (P), >= 1
        compounding_periods_per_year: Compounding periods per year (C), >= 1

    Returns:
        Effective rate per payment period as decimal

    Example:
        >>> period_rate(5.5, 12, 12)
        0.004583333...
        >>> period_rate(12.0, 12, 4)   # 3% per quarter, paid monthly
        0.009901634...
    """
    compounding = float(compounding_periods_per_year)
    return (1.0 + 0.01 * interest_rate / compounding) ** (compounding / payments_per_year) - 1.0


def period_rate_vector(
        interest_rates: list[float] | np.ndarray,
        payments_per_year: int,
        compounding_periods_per_year: int
) -> np.ndarray:
    """
    Vectorized nominal-to-period rate conversion. See period_rate for details.

    Args:
        interest_rates: Array of nominal annual rates as percentage.
                        Can be any shape (1D vector, 2D grid, etc.).
        payments_per_year: Payment periods per year (P), >= 1
        compounding_periods_per_year: Compounding periods per year (C), >= 1

    Returns:
        Array of effective period rates as decimal, same shape as input.
        NaN/inf inputs will produce NaN/inf outputs (natural numpy propagation).
    """
    if not isinstance(interest_rates, np.ndarray):
        interest_rates = np.array(interest_rates, dtype=float)

    compounding = float(compounding_periods_per_year)
    return np.power(1.0 + 0.01 * interest_rates / compounding,
                    compounding / payments_per_year) - 1.0


def nominal_rate_from_period_rate(
        rate: float,
        compounding_periods_per_year: int
) -> float:
    """
    Express a per-period rate found by the interest-rate solver as a nominal
    annual percentage.

    Formula:
        R = i * 100 * C

    This is the calculator's reporting convention for a solved rate. It is
    the exact inverse of period_rate only when payments and compounding share
    the same frequency (P == C), which covers every reference scenario.

    Args:
        rate: Rate per period as decimal
        compounding_periods_per_year: Compounding periods per year (C)

    Returns:
        Nominal annual rate as percentage
    """
    return rate * 100.0 * compounding_periods_per_year


def annuity_multiplier(rate: float, is_end_of_period_payment: bool) -> float:
    """
    Annuity-type multiplier g applied to every payment term.

    An ordinary annuity (payments at the END of each period) needs no
    adjustment. An annuity due (payments at the BEGINNING of each period)
    earns one extra period of compounding on every payment:

        g = 1          ordinary annuity
        g = 1 + i      annuity due

    Args:
        rate: Effective rate per payment period as decimal (i)
        is_end_of_period_payment: True for ordinary annuity, False for annuity due

    Returns:
        Multiplier g
    """
    return 1.0 if is_end_of_period_payment else 1.0 + rate
