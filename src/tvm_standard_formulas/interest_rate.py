# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import numpy as np

from .rates import annuity_multiplier, nominal_rate_from_period_rate, period_rate
from .validation import InvalidInputError

__version__ = "0.1.0"

RATE_TOLERANCE = 1e-5
MAX_ITERATIONS = 1000
INITIAL_RATE_GUESS = 0.1
RATE_LOW = 0.0
RATE_HIGH = 1.0


# =============================================================================
# Interest-Rate Solver
# =============================================================================
#
# The annuity identity
#
#   PV·(1+r)^N + PMT·g·[(1+r)^N - 1]/r + FV = 0
#
# has no closed-form solution for r in general, so the rate is found
# by iteration on the PER-PERIOD rate r and reported as a nominal annual
# percentage at the end (see rates.nominal_rate_from_period_rate).
#
# ITERATION:
#
#   r₀     = 0.1                             (fixed initial guess)
#   rₖ₊₁   = rₖ - f(rₖ) / f'(rₖ)            (Newton step, not clamped)
#   stop when |rₖ₊₁ - rₖ| < tolerance       (return rₖ₊₁)
#
# A bisection bracket [rate_low, rate_high], starting at [0, 1], is
# tightened from the sign of f(rₖ) every iteration. The bracket is not used
# to clamp Newton steps; its midpoint becomes the next guess only when the
# Newton step is not finite (overflow of (1+r)^N in f or f', or a negative
# base raised to a fractional N) or falls at or below -100% per period.
#
# The annuity-due multiplier g depends on the rate, so it is recomputed
# from the current guess on every iteration and held constant for the step.
# =============================================================================

def _growth(rate: float, number_of_periods: float) -> np.float64:
    return np.power(np.float64(1.0 + rate), number_of_periods)


def rate_residual(
        rate: float,
        present_value: float,
        future_value: float,
        number_of_periods: float,
        payment: float | None,
        multiplier: float = 1.0
) -> float:
    """
    Residual of the annuity identity at a trial per-period rate.

    Annuity case (payment given):
        f(r) = PV·(1+r)^N + PMT·g·[(1+r)^N - 1]/r + FV

    Lump-sum case (payment None):
        f(r) = PV·(1+r)^N + FV

    Args:
        rate: Trial rate per period as decimal (r); must be non-zero in the annuity case
        present_value: Present value (PV)
        future_value: Future value (FV)
        number_of_periods: Number of payment periods (N)
        payment: Periodic payment (PMT), or None for a lump sum
        multiplier: Annuity multiplier g at this rate

    Returns:
        f(r); may be inf/nan when (1+r)^N overflows or is undefined
    """
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        growth = _growth(rate, number_of_periods)
        residual = present_value * growth + future_value
        if payment is not None:
            residual = residual + payment * multiplier * (growth - 1.0) / np.float64(rate)
    return float(residual)


def rate_residual_derivative(
        rate: float,
        present_value: float,
        number_of_periods: float,
        payment: float | None,
        multiplier: float = 1.0
) -> float:
    """
    Analytic derivative f'(r) of rate_residual, holding g constant.

    Annuity case:
        f'(r) = PV·N·(1+r)^(N-1) + PMT·g·[N·(1+r)^(N-1)·r - ((1+r)^N - 1)] / r²

    Lump-sum case:
        f'(r) = PV·N·(1+r)^(N-1)

    The quotient-rule term is the derivative of the annuity factor
    [(1+r)^N - 1]/r. FV is constant in r and drops out.

    Args:
        rate: Trial rate per period as decimal (r)
        present_value: Present value (PV)
        number_of_periods: Number of payment periods (N)
        payment: Periodic payment (PMT), or None for a lump sum
        multiplier: Annuity multiplier g at this rate

    Returns:
        f'(r); may be inf/nan when (1+r)^N overflows or is undefined
    """
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        growth = _growth(rate, number_of_periods)
        growth_prime = number_of_periods * _growth(rate, number_of_periods - 1.0)
        derivative = present_value * growth_prime
        if payment is not None:
            derivative = derivative + payment * multiplier * (
                growth_prime * rate - (growth - 1.0)
            ) / np.float64(rate * rate)
    return float(derivative)


def interest_rate(
        present_value: float,
        future_value: float,
        number_of_periods: float,
        payment: float | None = None,
        payments_per_year: int = 1,
        compounding_periods_per_year: int = 1,
        is_end_of_period_payment: bool = True,
        tolerance: float = RATE_TOLERANCE,
        max_iterations: int = MAX_ITERATIONS,
        initial_guess: float = INITIAL_RATE_GUESS
) -> float:
    """
    Solve for the nominal annual interest rate given PV, FV, N and PMT.

    ALGORITHM:
    ----------
    1. Start from rate_guess = initial_guess (per period) and bracket [0, 1]
    2. Recompute g from the current guess:
           g = annuity_multiplier(period_rate(r·100·C, P, C), is_end_of_period_payment)
       which is 1 + r for an annuity due when P == C, and 1 otherwise.
    3. Evaluate f(r) and f'(r) (rate_residual, rate_residual_derivative)
    4. Newton step: r_next = r - f(r)/f'(r)
    5. If |r_next - r| < tolerance, return r_next · 100 · C
    6. Tighten the bracket from the sign of f(r): f > 0 -> rate_high = r,
       f < 0 -> rate_low = r
    7. r = r_next, or the bracket midpoint if r_next is not finite (including
       an overflowed f or f') or is at or below -1; repeat. While Newton
       steps stay finite and above -1 the bracket is never consulted, so it
       only matters after such a fallback

    An absent payment selects the lump-sum residual. A zero payment is an
    annuity with PMT = 0, which has the same root.

    Failure is non-convergence within max_iterations, not a proof that no
    rate exists. A vanishing derivative, or a guess of exactly zero in the
    annuity case (where the annuity factor divides by r), fails immediately.

    Args:
        present_value: Present value (PV)
        future_value: Future value (FV)
        number_of_periods: Number of payment periods (N), > 0
        payment: Periodic payment (PMT), or None for a lump sum
        payments_per_year: Payment periods per year (P)
        compounding_periods_per_year: Compounding periods per year (C)
        is_end_of_period_payment: True for ordinary annuity, False for annuity due
        tolerance: Convergence tolerance on the per-period rate (default 1e-5)
        max_iterations: Iteration cap (default 1000)
        initial_guess: Starting per-period rate (default 0.1)

    Returns:
        Nominal annual rate as percentage (e.g., 5.5 for 5.5%)

    Raises:
        InvalidInputError: If the iteration hits a zero derivative or zero
            annuity guess, or does not converge within max_iterations

    Example (75,000 mortgage, 360 monthly payments of 425.84):
        >>> interest_rate(75000, 0, 360, -425.84, 12, 12)
        5.4999...
    """
    rate_low = RATE_LOW
    rate_high = RATE_HIGH
    rate_guess = initial_guess

    for _ in range(max_iterations):
        if payment is not None:
            if rate_guess == 0.0:
                raise InvalidInputError("interest rate iteration reached a zero rate guess")
            g = annuity_multiplier(
                period_rate(nominal_rate_from_period_rate(rate_guess, compounding_periods_per_year),
                            payments_per_year, compounding_periods_per_year),
                is_end_of_period_payment,
            )
        else:
            g = 1.0

        f_value = rate_residual(rate_guess, present_value, future_value, number_of_periods, payment, g)
        f_derivative = rate_residual_derivative(rate_guess, present_value, number_of_periods, payment, g)
        if f_derivative == 0.0:
            raise InvalidInputError(f"interest rate iteration reached a zero derivative at rate {rate_guess}")

        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            next_rate_guess = float(np.float64(rate_guess) - np.float64(f_value) / np.float64(f_derivative))
        # an overflowed residual or slope gives no usable step
        if not (np.isfinite(f_value) and np.isfinite(f_derivative)):
            next_rate_guess = float("nan")

        if abs(next_rate_guess - rate_guess) < tolerance:
            return nominal_rate_from_period_rate(next_rate_guess, compounding_periods_per_year)

        if f_value > 0:
            rate_high = rate_guess
        elif f_value < 0:
            rate_low = rate_guess

        # rates at or below -100% per period have no real growth factor
        if np.isfinite(next_rate_guess) and next_rate_guess > -1.0:
            rate_guess = next_rate_guess
        else:
            rate_guess = (rate_low + rate_high) / 2.0

    raise InvalidInputError(
        f"interest rate did not converge within {max_iterations} iterations "
        f"(tolerance {tolerance}); last per-period guess {rate_guess}"
    )
