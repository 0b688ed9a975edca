# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings
import numpy as np

from .validation import InvalidInputError

__version__ = "0.1.0"

ZERO_THRESHOLD = 1e-7


# =============================================================================
# Closed-Form Solvers: PV, FV, PMT, N
# =============================================================================
#
# All four solvers rearrange the same fundamental annuity identity. With
# cash outflows negative and inflows positive:
#
#   PV·(1+i)^N + PMT·g·[(1+i)^N - 1]/i + FV = 0
#
# Where:
#   i   = effective rate per payment period (see rates.period_rate)
#   g   = annuity multiplier: 1 (ordinary) or 1+i (due) (see rates.annuity_multiplier)
#   N   = number of payment periods
#
# The identity has a removable singularity at i = 0, where the annuity
# factor [(1+i)^N - 1]/i tends to N. Each solver therefore special-cases
# i == 0 with the linear (non-compounding) form:
#
#   PV + PMT·N + FV = 0
#
# Results within ZERO_THRESHOLD of zero are normalized to exactly 0.0 to
# absorb cancellation noise. Any result that is not finite (division by
# zero, log of a non-positive ratio, overflow) is raised as
# InvalidInputError rather than returned as NaN/inf.
# =============================================================================

def normalize_zero(value: float, threshold: float = ZERO_THRESHOLD) -> float:
    """Return 0.0 when |value| < threshold, otherwise value unchanged."""
    return 0.0 if abs(value) < threshold else value


def _finite(value: float, quantity: str) -> float:
    if not np.isfinite(value):
        raise InvalidInputError(f"{quantity} is not finite for the given inputs, got {value}")
    return float(value)


def present_value(
        future_value: float,
        payment: float,
        number_of_periods: float,
        rate: float,
        multiplier: float
) -> float:
    """
    Solve the annuity identity for the present value.

    Formula (i != 0):
        PV = (PMT·g/i - FV) / (1+i)^N - PMT·g/i

    Formula (i == 0):
        PV = -(FV + PMT·N)

    Args:
        future_value: Future value (FV)
        payment: Periodic payment (PMT); 0.0 for a lump sum
        number_of_periods: Number of payment periods (N)
        rate: Effective rate per payment period as decimal (i)
        multiplier: Annuity multiplier (g)

    Returns:
        Present value

    Raises:
        InvalidInputError: If the result is not finite
        Warning: If rate is zero

    Example (10-year annuity of 20,000/yr at 10%):
        >>> present_value(0.0, -20000.0, 10, 0.10, 1.0)
        122891.34...
    """
    if rate == 0.0:
        warnings.warn("period rate is zero, returning linear (non-compounding) present value")
        present = -(future_value + payment * number_of_periods)
    else:
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            growth = np.power(np.float64(1.0 + rate), number_of_periods)
            annuity = payment * multiplier / rate
            present = (annuity - future_value) / growth - annuity
    return normalize_zero(_finite(present, "present_value"))


def future_value(
        present_value: float,
        payment: float,
        number_of_periods: float,
        rate: float,
        multiplier: float
) -> float:
    """
    Solve the annuity identity for the future value.

    Formula (i != 0):
        FV = PMT·g/i - (1+i)^N · (PV + PMT·g/i)

    Formula (i == 0):
        FV = -(PV + PMT·N)

    Args:
        present_value: Present value (PV)
        payment: Periodic payment (PMT); 0.0 for a lump sum
        number_of_periods: Number of payment periods (N)
        rate: Effective rate per payment period as decimal (i)
        multiplier: Annuity multiplier (g)

    Returns:
        Future value

    Raises:
        InvalidInputError: If the result is not finite
        Warning: If rate is zero

    Example (5,000 deposited for 20 years at 0.5%):
        >>> future_value(-5000.0, 0.0, 20, 0.005, 1.0)
        5524.47...
    """
    if rate == 0.0:
        warnings.warn("period rate is zero, returning linear (non-compounding) future value")
        future = -(present_value + payment * number_of_periods)
    else:
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            growth = np.power(np.float64(1.0 + rate), number_of_periods)
            annuity = payment * multiplier / rate
            future = annuity - growth * (present_value + annuity)
    return normalize_zero(_finite(future, "future_value"))


def payment(
        present_value: float,
        future_value: float,
        number_of_periods: float,
        rate: float,
        multiplier: float
) -> float:
    """
    Solve the annuity identity for the level periodic payment.

    Formula (i != 0):
        PMT = -(i/g) · [PV + (PV + FV) / ((1+i)^N - 1)]

    Formula (i == 0):
        PMT = -(PV + FV) / N

    Derivation:
    -----------
    Multiply the identity by i / [g·((1+i)^N - 1)] and isolate PMT:

        PMT = -(i/g) · [PV·(1+i)^N + FV] / [(1+i)^N - 1]

    then split PV·(1+i)^N = PV·[(1+i)^N - 1] + PV to reach the form above,
    which keeps a single division by the annuity growth term.

    Args:
        present_value: Present value (PV)
        future_value: Future value (FV)
        number_of_periods: Number of payment periods (N)
        rate: Effective rate per payment period as decimal (i)
        multiplier: Annuity multiplier (g)

    Returns:
        Periodic payment

    Raises:
        InvalidInputError: If number_of_periods or multiplier is zero, or the
            result is not finite
        Warning: If rate is zero

    Example (75,000 mortgage, 5.5% monthly, 30 years):
        >>> payment(75000.0, 0.0, 360, 5.5 / 1200, 1.0)
        -425.84...
    """
    if number_of_periods == 0:
        raise InvalidInputError("number_of_periods must be non-zero to solve for payment")
    if rate == 0.0:
        warnings.warn("period rate is zero, returning linear (non-compounding) payment")
        level = -(present_value + future_value) / number_of_periods
    else:
        # annuity due at -100% per period: payments contribute nothing
        if multiplier == 0.0:
            raise InvalidInputError("payment is undetermined when the annuity multiplier is zero "
                                    f"(period rate {rate})")
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            growth = np.power(np.float64(1.0 + rate), number_of_periods)
            level = -rate / multiplier * (present_value + (present_value + future_value) / (growth - 1.0))
    return normalize_zero(_finite(level, "payment"))


def number_of_periods(
        present_value: float,
        future_value: float,
        payment: float,
        rate: float,
        multiplier: float
) -> float:
    """
    Solve the annuity identity for the number of payment periods.

    Formula (i != 0):
        N = ln[(PMT·g - FV·i) / (PMT·g + PV·i)] / ln(1+i)

    Formula (i == 0):
        N = -(PV + FV) / PMT

    The logarithm argument is only positive when the cash-flow signs are
    realizable, e.g. a positive loan balance repaid by negative payments that
    exceed the interest accruing on it. Payments too small to cover interest,
    or PV/FV/PMT all sharing one sign, make the ratio non-positive; no
    period count satisfies those inputs and InvalidInputError is raised.

    The result is generally fractional (e.g. 254.36 periods); the final
    partial period is left to the caller.

    Args:
        present_value: Present value (PV)
        future_value: Future value (FV)
        payment: Periodic payment (PMT); 0.0 for a lump sum
        rate: Effective rate per payment period as decimal (i)
        multiplier: Annuity multiplier (g)

    Returns:
        Number of payment periods

    Raises:
        InvalidInputError: If the inputs admit no finite solution
        Warning: If rate is zero

    Example (75,000 at 5.5% monthly, paying 500/month):
        >>> number_of_periods(75000.0, 0.0, -500.0, 5.5 / 1200, 1.0)
        254.36...
    """
    if rate == 0.0:
        warnings.warn("period rate is zero, returning linear (non-compounding) number of periods")
        if payment == 0.0:
            raise InvalidInputError("payment must be non-zero to solve for number_of_periods at a zero rate")
        periods = -(present_value + future_value) / payment
    else:
        # (1+i)^N is zero for every N > 0 at -100% per period
        if rate <= -1.0:
            raise InvalidInputError("number_of_periods is undetermined at a period rate of "
                                    f"-100% or below, got {rate}")
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            ratio = np.divide(payment * multiplier - future_value * rate,
                              np.float64(payment * multiplier + present_value * rate))
            periods = np.log(ratio) / np.log1p(rate)
    return normalize_zero(_finite(periods, "number_of_periods"))
